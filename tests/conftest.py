"""
Shared test fixtures for the TalentMatch test suite.

Sets environment variables before any talentmatch imports so settings and
logging never touch the filesystem or the console, then provides factory
fixtures for job requirements and candidate profiles.
"""

import os

# === Set environment BEFORE any talentmatch imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")

from typing import Any, Optional

import pytest
from loguru import logger

from talentmatch.core.matching import CandidateFilter, MatchRanker, ScoreCalculator
from talentmatch.data.models import (
    CandidateProfile,
    Coordinates,
    Education,
    JobRequirement,
    WorkExperience,
)
from talentmatch.utils.constants import JobType


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_requirement():
    """Factory that returns a callable to build JobRequirement models."""

    def _factory(
        title: str = "Software Engineer",
        required_skills: Optional[list[str]] = None,
        salary_ceiling: Optional[float] = 120000,
        job_type: JobType = JobType.REMOTE,
        coordinates: tuple[float, float] = (40.0, -75.0),
        max_distance: float = 50,
        **kwargs: Any,
    ) -> JobRequirement:
        if required_skills is None:
            required_skills = ["Go", "SQL"]
        return JobRequirement(
            title=title,
            required_skills=required_skills,
            salary_ceiling=salary_ceiling,
            job_type=job_type,
            coordinates=Coordinates(lat=coordinates[0], lng=coordinates[1]),
            max_distance=max_distance,
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_candidate():
    """Factory that returns a callable to build CandidateProfile models."""

    def _factory(
        candidate_id: str = "cand-1",
        full_name: str = "Jane Smith",
        skills: Optional[list[str]] = None,
        hidden_skills: Optional[list[str]] = None,
        responsibilities: Optional[list[str]] = None,
        education: Optional[list[Education]] = None,
        desired_titles: Optional[list[str]] = None,
        salary_floor: Optional[float] = 100000,
        job_type: Optional[JobType] = JobType.HYBRID,
        coordinates: Optional[tuple[float, float]] = (40.1, -75.1),
        **kwargs: Any,
    ) -> CandidateProfile:
        if skills is None:
            skills = ["golang", "sql", "docker"]
        if desired_titles is None:
            desired_titles = ["Software Engineer"]
        work_experience = []
        if responsibilities:
            work_experience.append(
                WorkExperience(job_title="Developer", company="Acme", responsibilities=responsibilities)
            )
        return CandidateProfile(
            candidate_id=candidate_id,
            full_name=full_name,
            skills=skills,
            hidden_skills=hidden_skills or [],
            work_experience=work_experience,
            education=education or [],
            desired_titles=desired_titles,
            salary_floor=salary_floor,
            job_type=job_type,
            coordinates=Coordinates(lat=coordinates[0], lng=coordinates[1]) if coordinates else None,
            **kwargs,
        )

    return _factory


# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def silence_package_logs():
    """Keep the package logger disabled between tests, as it is for library callers."""
    yield
    logger.disable("talentmatch")


# ---------------------------------------------------------------------------
# Pipeline fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def candidate_filter():
    return CandidateFilter()


@pytest.fixture
def score_calculator():
    return ScoreCalculator()


@pytest.fixture
def match_ranker():
    return MatchRanker()


@pytest.fixture
def raw_job_record():
    """Job post as stored by the web application."""
    return {
        "jobTitle": "Software Engineer",
        "requiredSkills": ["Go", "SQL"],
        "salary": "$120,000",
        "jobType": "remote",
        "locationCoordinates": {"lat": 40.0, "lng": -75.0},
        "maxDistance": 50,
    }


@pytest.fixture
def raw_candidate_record():
    """Resume document with a linked survey, as stored by the web application."""
    return {
        "userId": "u-42",
        "fullName": "Jane Smith",
        "email": "jane@example.com",
        "skills": ["golang", "SQL", "  "],
        "hiddenSoftSkills": ["Teamwork"],
        "workExperience": [
            {
                "Job Title": "Backend Developer",
                "Company": "Acme",
                "Duration": "2019-2023",
                "Responsibilities": ["Built REST APIs", "Maintained PostgreSQL schemas"],
            },
            {
                "jobTitle": "Intern",
                "company": "Initech",
                "jobDetails": {"responsibilities": "Wrote unit tests"},
            },
        ],
        "education": [
            {"degree": "BSc", "fieldOfStudy": "Computer Science", "institution": "MIT"},
            "Certificate in Cloud Computing",
        ],
        "survey": {
            "jobTitles": ["Software Engineer", "Backend Developer"],
            "minSalary": 100000,
            "jobType": "hybrid",
            "locationCoordinates": [{"lat": 40.1, "lng": -75.1}],
        },
    }
