"""
Hard eligibility gates applied before scoring.

A candidate must pass every gate (salary, job type, title, location) to be
scored. Gates are independent of one another, so evaluation stops at the
first failure without changing the outcome.
"""

from dataclasses import dataclass
from typing import Optional

from talentmatch.data.models import CandidateProfile, JobRequirement
from talentmatch.utils.constants import (
    DEFAULT_FUZZY_THRESHOLD,
    JOB_TYPE_COMPATIBILITY,
    ExclusionReason,
    JobType,
)
from talentmatch.utils.logger import get_logger

from .geo import haversine_distance
from .similarity import fuzzy_match

logger = get_logger(__name__)


@dataclass(frozen=True)
class FilterDecision:
    """Outcome of running the gates for one candidate."""

    eligible: bool
    reason: Optional[ExclusionReason] = None
    distance_miles: Optional[float] = None  # Set once the location gate ran


def job_types_compatible(required: JobType, candidate: Optional[JobType]) -> bool:
    """Check the requirement/candidate work arrangement matrix."""
    if candidate is None:
        return False
    return candidate in JOB_TYPE_COMPATIBILITY[required]


class CandidateFilter:
    """
    Applies hard constraints to candidates.

    Checks, in order:
    - Salary floor does not exceed the salary ceiling
    - Job types are compatible
    - Job title matches one of the candidate's desired titles
    - Candidate is within the maximum search distance
    """

    def __init__(self, fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD):
        self.fuzzy_threshold = fuzzy_threshold

    def is_eligible(self, requirement: JobRequirement, candidate: CandidateProfile) -> bool:
        """Return True if the candidate passes every gate."""
        return self.evaluate(requirement, candidate).eligible

    def evaluate(self, requirement: JobRequirement, candidate: CandidateProfile) -> FilterDecision:
        """
        Run the gates and report the first one that failed.

        Args:
            requirement: Job requirement being matched
            candidate: Candidate under consideration

        Returns:
            FilterDecision with the exclusion reason, or eligible=True
            together with the computed distance
        """
        reason = (
            self._check_salary(requirement, candidate)
            or self._check_job_type(requirement, candidate)
            or self._check_title(requirement, candidate)
        )
        if reason:
            return self._exclude(candidate, reason)

        if candidate.coordinates is None:
            return self._exclude(candidate, ExclusionReason.MISSING_COORDINATES)

        distance = haversine_distance(requirement.coordinates, candidate.coordinates)
        if distance > requirement.max_distance:
            logger.debug(
                f"{candidate.display_name} is {distance:.2f} miles away "
                f"(max {requirement.max_distance:.2f})"
            )
            return self._exclude(candidate, ExclusionReason.TOO_FAR, distance)

        return FilterDecision(eligible=True, distance_miles=distance)

    def _check_salary(
        self, requirement: JobRequirement, candidate: CandidateProfile
    ) -> Optional[ExclusionReason]:
        ceiling = requirement.salary_ceiling
        floor = candidate.salary_floor
        if ceiling is None or floor is None:
            return None
        if floor > ceiling:
            return ExclusionReason.SALARY_ABOVE_CEILING
        return None

    def _check_job_type(
        self, requirement: JobRequirement, candidate: CandidateProfile
    ) -> Optional[ExclusionReason]:
        if candidate.job_type is None:
            return ExclusionReason.MISSING_JOB_TYPE
        if not job_types_compatible(requirement.job_type, candidate.job_type):
            return ExclusionReason.JOB_TYPE_MISMATCH
        return None

    def _check_title(
        self, requirement: JobRequirement, candidate: CandidateProfile
    ) -> Optional[ExclusionReason]:
        title = requirement.title.lower()
        for desired in candidate.desired_titles:
            desired = desired.lower()
            if (
                fuzzy_match(title, desired, self.fuzzy_threshold)
                or fuzzy_match(desired, title, self.fuzzy_threshold)
            ):
                return None
        return ExclusionReason.TITLE_MISMATCH

    def _exclude(
        self,
        candidate: CandidateProfile,
        reason: ExclusionReason,
        distance: Optional[float] = None,
    ) -> FilterDecision:
        logger.debug(f"Excluding {candidate.display_name}: {reason.value}")
        return FilterDecision(eligible=False, reason=reason, distance_miles=distance)
