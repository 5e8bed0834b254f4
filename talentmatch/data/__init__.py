"""
Data layer for TalentMatch.

Submodules:
- models: Pydantic data models for candidates, job requirements and results
- normalize: Mapping of loosely shaped JSON records onto the models
"""

from .normalize import (
    InvalidCandidateError,
    InvalidRequirementError,
    normalize_candidate,
    normalize_candidates,
    normalize_requirement,
)

__all__ = [
    "InvalidCandidateError",
    "InvalidRequirementError",
    "normalize_candidate",
    "normalize_candidates",
    "normalize_requirement",
]
