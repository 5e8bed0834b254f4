"""
Weighted skill and education scoring for eligible candidates.
"""

from typing import Optional

from talentmatch.data.models import (
    CandidateProfile,
    JobRequirement,
    ScoreBreakdown,
    SkillEvidence,
)
from talentmatch.utils.constants import DEFAULT_FUZZY_THRESHOLD, DEFAULT_SCORING_WEIGHTS
from talentmatch.utils.logger import get_logger

from .similarity import fuzzy_match

logger = get_logger(__name__)


def build_skill_pool(candidate: CandidateProfile) -> list[str]:
    """
    Lower-cased, deduplicated union of explicit skills, hidden skills and
    work-history responsibility fragments, in first-seen order.
    """
    pool = dict.fromkeys(
        entry.lower()
        for entry in [*candidate.skills, *candidate.hidden_skills, *candidate.responsibilities]
    )
    return list(pool)


class ScoreCalculator:
    """
    Scores eligible candidates against a job requirement.

    combined = skills_weight * skill_score + education_weight * education_score
    """

    def __init__(
        self,
        skills_weight: float = DEFAULT_SCORING_WEIGHTS["skills_match"],
        education_weight: float = DEFAULT_SCORING_WEIGHTS["education_match"],
        fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD,
    ):
        """
        Initialize the calculator.

        Args:
            skills_weight: Weight of the skill score
            education_weight: Weight of the education score
            fuzzy_threshold: Similarity threshold used for every comparison
        """
        if skills_weight < 0 or education_weight < 0:
            raise ValueError("Score weights must be non-negative")
        if skills_weight + education_weight > 1.0 + 1e-9:
            raise ValueError("Score weights must not sum to more than 1.0")
        self.skills_weight = skills_weight
        self.education_weight = education_weight
        self.fuzzy_threshold = fuzzy_threshold

    def score(self, requirement: JobRequirement, candidate: CandidateProfile) -> ScoreBreakdown:
        """
        Score a candidate that already passed the filter.

        Args:
            requirement: Job requirement being matched
            candidate: Eligible candidate

        Returns:
            ScoreBreakdown with component scores and matched-skill evidence
        """
        pool = build_skill_pool(candidate)
        required = list(dict.fromkeys(s.lower() for s in requirement.required_skills))

        matched, missing, skill_score = self._match_skills(required, pool)
        education_evidence = self._match_education(candidate, requirement.title.lower(), required)
        education_score = 1.0 if education_evidence else 0.0

        combined = skill_score * self.skills_weight + education_score * self.education_weight
        combined = min(1.0, combined)

        logger.debug(
            f"{candidate.display_name}: skills={skill_score:.3f} "
            f"education={education_score:.0f} combined={combined:.3f}"
        )

        return ScoreBreakdown(
            skill_score=skill_score,
            education_score=education_score,
            combined_score=combined,
            matched_skills=matched,
            missing_skills=missing,
            education_evidence=education_evidence,
        )

    def _match_skills(
        self, required: list[str], pool: list[str]
    ) -> tuple[list[SkillEvidence], list[str], float]:
        """Match required skills against the candidate's skill pool."""
        if not required:
            # No requirements: any skills at all count as a full match
            return [], [], 1.0 if pool else 0.0

        matched = []
        missing = []
        for skill in required:
            term = next(
                (entry for entry in pool if fuzzy_match(entry, skill, self.fuzzy_threshold)),
                None,
            )
            if term is None:
                missing.append(skill)
            else:
                matched.append(SkillEvidence(required_skill=skill, matched_term=term))

        return matched, missing, len(matched) / len(required)

    def _match_education(
        self, candidate: CandidateProfile, title: str, required: list[str]
    ) -> Optional[str]:
        """Return the first education field relevant to the title or a required skill."""
        for entry in candidate.education:
            for value in entry.fields:
                value = value.lower()
                if fuzzy_match(value, title, self.fuzzy_threshold) or any(
                    fuzzy_match(value, skill, self.fuzzy_threshold) for skill in required
                ):
                    return value
        return None
