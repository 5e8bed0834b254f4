"""
Match and scoring data models for TalentMatch.

Defines the schema for score breakdowns, ranked match results and
per-run ranking summaries.
"""

from typing import Optional

from pydantic import Field

from talentmatch.utils.constants import ExclusionReason, MatchScoreLevel

from .base import EmbeddedModel
from .candidate import CandidateProfile


class SkillEvidence(EmbeddedModel):
    """A required skill and the pool entry that satisfied it."""

    required_skill: str
    matched_term: str


class ScoreBreakdown(EmbeddedModel):
    """Component scores for one eligible candidate."""

    skill_score: float = Field(0.0, ge=0, le=1)
    education_score: float = Field(0.0, ge=0, le=1)
    combined_score: float = Field(0.0, ge=0, le=1)

    matched_skills: list[SkillEvidence] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    education_evidence: Optional[str] = None  # Education field that matched

    @property
    def match_percentage(self) -> float:
        """Combined score as a percentage, rounded for presentation."""
        return round(self.combined_score * 100, 1)


class MatchResult(EmbeddedModel):
    """A candidate that passed every hard gate and scored above zero."""

    candidate: CandidateProfile

    # Scores
    combined_score: float = Field(ge=0, le=1)
    match_percentage: float = Field(ge=0, le=100)
    skill_score: float = 0.0
    education_score: float = 0.0
    score_level: MatchScoreLevel = MatchScoreLevel.POOR

    # Location
    distance_miles: float = Field(ge=0)
    distance_km: float = Field(ge=0)

    # Metadata
    salary_floor: Optional[float] = None

    # Evidence
    matched_skills: list[SkillEvidence] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    education_evidence: Optional[str] = None

    @property
    def candidate_name(self) -> str:
        """Display label of the matched candidate."""
        return self.candidate.display_name

    def to_display_dict(self) -> dict:
        """Flat dictionary for tables and JSON output."""
        return {
            "candidate_id": self.candidate.candidate_id,
            "name": self.candidate_name,
            "email": self.candidate.email,
            "match_percentage": self.match_percentage,
            "score_level": self.score_level.value,
            "distance_miles": round(self.distance_miles, 2),
            "distance_km": round(self.distance_km, 2),
            "salary_floor": self.salary_floor if self.salary_floor is not None else "N/A",
            "matched_skills": [e.required_skill for e in self.matched_skills],
            "missing_skills": list(self.missing_skills),
            "education_evidence": self.education_evidence,
        }


class RankingSummary(EmbeddedModel):
    """Ranked results together with counts describing the run."""

    results: list[MatchResult] = Field(default_factory=list)
    min_percentage: float = 0.0
    evaluated: int = 0
    eligible: int = 0
    zero_score: int = 0
    below_cutoff: int = 0
    exclusions: dict[ExclusionReason, int] = Field(default_factory=dict)

    @property
    def excluded(self) -> int:
        """Number of candidates that failed a hard gate."""
        return sum(self.exclusions.values())
