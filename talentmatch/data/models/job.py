"""
Job requirement data models for TalentMatch.

A JobRequirement is validated strictly: without a title, a job type and
coordinates no meaningful ranking is possible.
"""

from typing import Optional

from pydantic import Field, field_validator

from talentmatch.utils.constants import DEFAULT_MAX_DISTANCE_MILES, KM_PER_MILE, JobType

from .base import Coordinates, EmbeddedModel


class JobRequirement(EmbeddedModel):
    """What an employer is looking for in a single matching request."""

    title: str = Field(min_length=1)
    required_skills: list[str] = Field(default_factory=list)
    salary_ceiling: Optional[float] = None
    job_type: JobType
    coordinates: Coordinates
    max_distance: float = Field(default=DEFAULT_MAX_DISTANCE_MILES, ge=0)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Reject blank titles."""
        v = v.strip()
        if not v:
            raise ValueError("Job title is required for matching")
        return v

    @field_validator("required_skills")
    @classmethod
    def drop_blank_skills(cls, v: list[str]) -> list[str]:
        """Strip skill names and remove empty ones."""
        return [s.strip() for s in v if s and s.strip()]

    @property
    def max_distance_km(self) -> float:
        """Search radius in kilometers."""
        return self.max_distance * KM_PER_MILE
