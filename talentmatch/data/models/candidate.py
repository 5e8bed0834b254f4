"""
Candidate data models for TalentMatch.

Defines the canonical candidate profile consumed by the matching core:
skills, work history, education, and job-search preferences.
"""

from typing import Optional

from pydantic import Field, field_validator

from talentmatch.utils.constants import JobType

from .base import Coordinates, EmbeddedModel


def _clean_strings(values: list[str]) -> list[str]:
    return [v.strip() for v in values if v and v.strip()]


class WorkExperience(EmbeddedModel):
    """Represents a single work experience entry."""

    job_title: Optional[str] = None
    company: Optional[str] = None
    duration: Optional[str] = None
    responsibilities: list[str] = Field(default_factory=list)

    @field_validator("responsibilities")
    @classmethod
    def drop_blank_responsibilities(cls, v: list[str]) -> list[str]:
        """Remove empty responsibility fragments."""
        return _clean_strings(v)


class Education(EmbeddedModel):
    """Represents an education entry. Any part may be missing."""

    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    institution: Optional[str] = None

    @property
    def fields(self) -> list[str]:
        """Present, non-blank parts in degree/field/institution order."""
        return [f for f in (self.degree, self.field_of_study, self.institution) if f and f.strip()]


class CandidateProfile(EmbeddedModel):
    """
    Structured candidate record as produced by the upstream document parser
    and job-search survey.

    Missing job type or coordinates do not fail validation; the candidate
    filter treats them as disqualifying.
    """

    # Identity (presentation only)
    candidate_id: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None

    # Skills
    skills: list[str] = Field(default_factory=list)
    hidden_skills: list[str] = Field(default_factory=list)

    # History
    work_experience: list[WorkExperience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)

    # Job-search preferences
    desired_titles: list[str] = Field(default_factory=list)
    salary_floor: Optional[float] = None
    job_type: Optional[JobType] = None
    coordinates: Optional[Coordinates] = None

    @field_validator("skills", "hidden_skills", "desired_titles")
    @classmethod
    def drop_blank_entries(cls, v: list[str]) -> list[str]:
        """Strip entries and remove empty ones."""
        return _clean_strings(v)

    @property
    def responsibilities(self) -> list[str]:
        """All responsibility fragments across work history."""
        return [r for exp in self.work_experience for r in exp.responsibilities]

    @property
    def display_name(self) -> str:
        """Best available label for the candidate."""
        return self.full_name or self.email or self.candidate_id or "Unknown Candidate"
