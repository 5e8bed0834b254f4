"""
Candidate ranking.

Filters and scores a candidate pool against one job requirement, drops
non-matches, sorts by score and applies the caller's percentage cutoff.
"""

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Optional

from talentmatch.data.models import (
    CandidateProfile,
    JobRequirement,
    MatchResult,
    RankingSummary,
)
from talentmatch.utils.config import MatchingSettings
from talentmatch.utils.constants import (
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_SCORING_WEIGHTS,
    AuditAction,
    ExclusionReason,
    MatchScoreLevel,
)
from talentmatch.utils.logger import LoggerMixin, audit_log

from .candidate_filter import CandidateFilter
from .geo import miles_to_km
from .score_calculator import ScoreCalculator


CUTOFF_TOLERANCE = 1e-9


@dataclass(frozen=True)
class _Evaluation:
    """Per-candidate outcome before sorting."""

    result: Optional[MatchResult] = None
    reason: Optional[ExclusionReason] = None
    zero_score: bool = False


class MatchRanker(LoggerMixin):
    """
    Ranks candidates for a job requirement.

    For every candidate:
    1. Run the candidate filter; ineligible candidates are dropped
    2. Score survivors; candidates scoring zero are dropped
    3. Attach distance and salary metadata

    Results are sorted by score (stable for ties) and cut off at the
    requested minimum percentage.
    """

    def __init__(
        self,
        candidate_filter: Optional[CandidateFilter] = None,
        score_calculator: Optional[ScoreCalculator] = None,
        max_workers: int = 1,
    ):
        """
        Initialize the ranker.

        Args:
            candidate_filter: Gate implementation (default thresholds if omitted)
            score_calculator: Scoring implementation (default weights if omitted)
            max_workers: Evaluate candidates on a thread pool when greater than 1
        """
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.candidate_filter = candidate_filter or CandidateFilter()
        self.score_calculator = score_calculator or ScoreCalculator()
        self.max_workers = max_workers

    @classmethod
    def from_settings(cls, settings: MatchingSettings) -> "MatchRanker":
        """Build a ranker from matching settings."""
        return cls(
            candidate_filter=CandidateFilter(fuzzy_threshold=settings.fuzzy_threshold),
            score_calculator=ScoreCalculator(
                skills_weight=settings.skills_weight,
                education_weight=settings.education_weight,
                fuzzy_threshold=settings.fuzzy_threshold,
            ),
            max_workers=settings.max_workers,
        )

    def rank(
        self,
        requirement: JobRequirement,
        candidates: Iterable[CandidateProfile],
        min_percentage: float = 0.0,
    ) -> list[MatchResult]:
        """
        Rank candidates by combined score.

        Args:
            requirement: Validated job requirement
            candidates: Candidate pool
            min_percentage: Results scoring below this percentage are dropped

        Returns:
            Match results, highest score first
        """
        return self.rank_with_summary(requirement, candidates, min_percentage).results

    def rank_with_summary(
        self,
        requirement: JobRequirement,
        candidates: Iterable[CandidateProfile],
        min_percentage: float = 0.0,
    ) -> RankingSummary:
        """
        Rank candidates and report how the pool was narrowed down.

        Raises:
            ValueError: if min_percentage is outside [0, 100]
        """
        if not 0 <= min_percentage <= 100:
            raise ValueError(f"min_percentage must be between 0 and 100, got {min_percentage}")

        pool = list(candidates)
        self.logger.info(
            f"Ranking {len(pool)} candidate(s) for '{requirement.title}' "
            f"({requirement.job_type.value}, within {requirement.max_distance:.2f} miles "
            f"= {requirement.max_distance_km:.2f} km)"
        )

        evaluations = self._evaluate_all(requirement, pool)

        exclusions: Counter[ExclusionReason] = Counter(
            e.reason for e in evaluations if e.reason is not None
        )
        zero_score = sum(1 for e in evaluations if e.zero_score)
        scored = [e.result for e in evaluations if e.result is not None]

        # sorted() is stable, so equal scores keep pool order
        ranked = sorted(scored, key=lambda r: r.combined_score, reverse=True)
        # Tolerance keeps exact boundary scores (e.g. 0.8999999999999999 at 90%)
        results = [r for r in ranked if r.combined_score * 100 >= min_percentage - CUTOFF_TOLERANCE]

        summary = RankingSummary(
            results=results,
            min_percentage=min_percentage,
            evaluated=len(pool),
            eligible=len(pool) - sum(exclusions.values()),
            zero_score=zero_score,
            below_cutoff=len(ranked) - len(results),
            exclusions=dict(exclusions),
        )

        self.logger.info(
            f"Found {len(results)} match(es): {summary.excluded} excluded, "
            f"{zero_score} scored zero, {summary.below_cutoff} below {min_percentage}%"
        )
        audit_log(
            AuditAction.CANDIDATES_RANKED.value,
            {
                "job_title": requirement.title,
                "evaluated": summary.evaluated,
                "matched": len(results),
                "min_percentage": min_percentage,
                "exclusions": {k.value: v for k, v in exclusions.items()},
            },
        )
        return summary

    def _evaluate_all(
        self, requirement: JobRequirement, pool: list[CandidateProfile]
    ) -> list[_Evaluation]:
        if self.max_workers > 1 and len(pool) > 1:
            # map() yields in submission order
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return list(executor.map(lambda c: self._evaluate(requirement, c), pool))
        return [self._evaluate(requirement, c) for c in pool]

    def _evaluate(self, requirement: JobRequirement, candidate: CandidateProfile) -> _Evaluation:
        decision = self.candidate_filter.evaluate(requirement, candidate)
        if not decision.eligible:
            return _Evaluation(reason=decision.reason)

        breakdown = self.score_calculator.score(requirement, candidate)
        if breakdown.combined_score == 0:
            self.logger.debug(f"No skill or education matches for {candidate.display_name}")
            return _Evaluation(zero_score=True)

        distance = decision.distance_miles
        return _Evaluation(
            result=MatchResult(
                candidate=candidate,
                combined_score=breakdown.combined_score,
                match_percentage=breakdown.match_percentage,
                skill_score=breakdown.skill_score,
                education_score=breakdown.education_score,
                score_level=MatchScoreLevel.from_score(breakdown.combined_score),
                distance_miles=distance,
                distance_km=miles_to_km(distance),
                salary_floor=candidate.salary_floor,
                matched_skills=breakdown.matched_skills,
                missing_skills=breakdown.missing_skills,
                education_evidence=breakdown.education_evidence,
            )
        )


def rank(
    requirement: JobRequirement,
    candidates: Iterable[CandidateProfile],
    min_percentage: float = 0.0,
    *,
    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD,
    skills_weight: float = DEFAULT_SCORING_WEIGHTS["skills_match"],
    education_weight: float = DEFAULT_SCORING_WEIGHTS["education_match"],
) -> list[MatchResult]:
    """
    Rank candidates for a job requirement with explicit parameters.

    Args:
        requirement: Validated job requirement
        candidates: Candidate pool
        min_percentage: Minimum match percentage to keep
        fuzzy_threshold: Similarity threshold for every fuzzy comparison
        skills_weight: Weight of the skill score
        education_weight: Weight of the education score

    Returns:
        Match results, highest score first
    """
    ranker = MatchRanker(
        candidate_filter=CandidateFilter(fuzzy_threshold=fuzzy_threshold),
        score_calculator=ScoreCalculator(
            skills_weight=skills_weight,
            education_weight=education_weight,
            fuzzy_threshold=fuzzy_threshold,
        ),
    )
    return ranker.rank(requirement, candidates, min_percentage)
