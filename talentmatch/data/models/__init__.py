"""
Pydantic data models for TalentMatch.

This module provides the canonical records consumed and produced by the
matching core.
"""

# Base models
from .base import Coordinates, EmbeddedModel

# Candidate models
from .candidate import CandidateProfile, Education, WorkExperience

# Job models
from .job import JobRequirement

# Match models
from .match import MatchResult, RankingSummary, ScoreBreakdown, SkillEvidence

__all__ = [
    # Base
    "Coordinates",
    "EmbeddedModel",
    # Candidate
    "CandidateProfile",
    "Education",
    "WorkExperience",
    # Job
    "JobRequirement",
    # Match
    "MatchResult",
    "RankingSummary",
    "ScoreBreakdown",
    "SkillEvidence",
]
