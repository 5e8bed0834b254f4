"""Candidate-job matching pipeline."""

from .candidate_filter import CandidateFilter, FilterDecision, job_types_compatible
from .geo import haversine_distance, miles_to_km
from .match_ranker import MatchRanker, rank
from .score_calculator import ScoreCalculator, build_skill_pool
from .similarity import edit_distance, fuzzy_match, similarity_ratio

__all__ = [
    "CandidateFilter",
    "FilterDecision",
    "MatchRanker",
    "ScoreCalculator",
    "build_skill_pool",
    "edit_distance",
    "fuzzy_match",
    "haversine_distance",
    "job_types_compatible",
    "miles_to_km",
    "rank",
    "similarity_ratio",
]
