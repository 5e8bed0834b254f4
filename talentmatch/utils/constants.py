"""
Application-wide constants for TalentMatch.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "TalentMatch"


# =============================================================================
# Similarity Constants
# =============================================================================

# Minimum normalized similarity for two strings to count as the same concept
DEFAULT_FUZZY_THRESHOLD: Final[float] = 0.65


# =============================================================================
# Geo Constants
# =============================================================================

EARTH_RADIUS_MILES: Final[float] = 3959.0
KM_PER_MILE: Final[float] = 1.60934

# Search radius used when a job requirement does not specify one
DEFAULT_MAX_DISTANCE_MILES: Final[float] = 20000.0


# =============================================================================
# Scoring Constants
# =============================================================================

DEFAULT_SCORING_WEIGHTS: Final[dict[str, float]] = {
    "skills_match": 0.7,
    "education_match": 0.3,
}

# Score thresholds
SCORE_THRESHOLDS: Final[dict[str, float]] = {
    "excellent": 0.85,
    "good": 0.70,
    "fair": 0.50,
    "poor": 0.30,
}


# =============================================================================
# Enums
# =============================================================================


class JobType(str, Enum):
    """Where the work is performed."""

    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


# requirement type -> candidate types it accepts
JOB_TYPE_COMPATIBILITY: Final[dict[JobType, frozenset[JobType]]] = {
    JobType.REMOTE: frozenset({JobType.REMOTE, JobType.HYBRID}),
    JobType.HYBRID: frozenset({JobType.REMOTE, JobType.HYBRID, JobType.ONSITE}),
    JobType.ONSITE: frozenset({JobType.ONSITE, JobType.HYBRID}),
}


class ExclusionReason(str, Enum):
    """Hard gate a candidate failed during filtering."""

    SALARY_ABOVE_CEILING = "salary_above_ceiling"
    MISSING_JOB_TYPE = "missing_job_type"
    JOB_TYPE_MISMATCH = "job_type_mismatch"
    TITLE_MISMATCH = "title_mismatch"
    MISSING_COORDINATES = "missing_coordinates"
    TOO_FAR = "too_far"


class MatchScoreLevel(Enum):
    """Categorical levels for match scores."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def from_score(cls, score: float) -> "MatchScoreLevel":
        """Convert a numeric score to a level."""
        if score >= SCORE_THRESHOLDS["excellent"]:
            return cls.EXCELLENT
        elif score >= SCORE_THRESHOLDS["good"]:
            return cls.GOOD
        elif score >= SCORE_THRESHOLDS["fair"]:
            return cls.FAIR
        return cls.POOR


class AuditAction(str, Enum):
    """Types of actions that can be audited."""

    CANDIDATES_RANKED = "candidates_ranked"
    REQUIREMENT_REJECTED = "requirement_rejected"
