"""
Record normalization for TalentMatch.

Upstream services hand us loosely shaped JSON: the same field can arrive as
"Job Title", "jobTitle" or "title", responsibilities can be a string or a
list, and survey answers may sit in a nested "survey" document. This module
is the one place where those shapes are mapped onto the canonical
CandidateProfile and JobRequirement models.

Candidates are normalized leniently (unusable values become None and the
candidate filter excludes them). Job requirements are normalized strictly:
a missing title, job type or location raises InvalidRequirementError.
"""

import re
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from talentmatch.utils.constants import DEFAULT_MAX_DISTANCE_MILES, JobType
from talentmatch.utils.logger import get_logger

from .models import (
    CandidateProfile,
    Coordinates,
    Education,
    JobRequirement,
    WorkExperience,
)

logger = get_logger(__name__)


class InvalidRequirementError(ValueError):
    """Raised when a job requirement cannot be used for matching."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Invalid job requirement: " + "; ".join(problems))


class InvalidCandidateError(ValueError):
    """Raised when a candidate record is not a mapping at all."""


REMOTE_SYNS = {"remote", "fully remote", "remote only", "wfh", "work from home"}
HYBRID_SYNS = {"hybrid", "flexible", "part-remote", "partly remote"}
ONSITE_SYNS = {"onsite", "on-site", "on site", "in office", "in-office", "office"}

_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")


# =============================================================================
# Field helpers
# =============================================================================


def _first(record: Mapping[str, Any], *keys: str) -> Any:
    """Return the first present, non-empty value among the given keys."""
    for key in keys:
        value = record.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        if isinstance(value, (list, tuple, dict)) and not value:
            continue
        return value
    return None


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_string_list(value: Any) -> list[str]:
    """Coerce a string or an iterable of strings into a clean list."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, Iterable) and not isinstance(value, Mapping):
        return [str(v).strip() for v in value if v is not None and str(v).strip()]
    return []


def parse_job_type(value: Any) -> Optional[JobType]:
    """Map free-form work arrangement text onto a JobType."""
    if isinstance(value, JobType):
        return value
    text = _as_text(value)
    if text is None:
        return None
    text = " ".join(text.lower().split())
    if text in REMOTE_SYNS:
        return JobType.REMOTE
    if text in HYBRID_SYNS:
        return JobType.HYBRID
    if text in ONSITE_SYNS:
        return JobType.ONSITE
    return None


def parse_amount(value: Any) -> Optional[float]:
    """
    Parse a salary-like value.

    Accepts numbers and strings such as "120000", "$120,000" or "120000.50".
    Anything without a usable number yields None, which leaves the salary
    gate unconstrained.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if value == value else None  # NaN check
    text = _as_text(value)
    if text is None:
        return None
    match = _NUMBER_RE.search(text.replace(",", ""))
    return float(match.group()) if match else None


def parse_coordinates(value: Any) -> Optional[Coordinates]:
    """
    Parse a coordinate pair.

    Accepts {"lat", "lng"} mappings (also "lon"/"longitude"/"latitude"),
    (lat, lng) sequences, or a list of such points in which case the first
    one is used. Returns None when the value is missing or out of range.
    """
    if value is None or isinstance(value, Coordinates):
        return value
    if isinstance(value, Mapping):
        lat = _first(value, "lat", "latitude")
        lng = _first(value, "lng", "lon", "longitude")
    elif isinstance(value, (list, tuple)):
        if not value:
            return None
        if isinstance(value[0], (Mapping, list, tuple)):
            return parse_coordinates(value[0])
        if len(value) != 2:
            return None
        lat, lng = value
    else:
        return None

    if isinstance(lat, bool) or isinstance(lng, bool):
        return None
    if not isinstance(lat, (int, float)) or not isinstance(lng, (int, float)):
        return None
    try:
        return Coordinates(lat=lat, lng=lng)
    except ValidationError:
        return None


def _parse_work_experience(value: Any) -> list[WorkExperience]:
    entries = []
    for entry in value if isinstance(value, list) else []:
        if not isinstance(entry, Mapping) or not entry:
            continue
        details = entry.get("jobDetails") if isinstance(entry.get("jobDetails"), Mapping) else {}
        responsibilities = _first(entry, "Responsibilities", "responsibilities", "description")
        if responsibilities is None:
            responsibilities = details.get("responsibilities")
        title = _as_text(_first(entry, "jobTitle", "Job Title", "title"))
        company = _as_text(_first(entry, "company", "Company"))
        duration = _as_text(_first(entry, "duration", "Duration", "years"))
        responsibilities = _as_string_list(responsibilities)
        if not (title or company or duration or responsibilities):
            continue
        entries.append(
            WorkExperience(
                job_title=title,
                company=company,
                duration=duration,
                responsibilities=responsibilities,
            )
        )
    return entries


def _parse_education(value: Any) -> list[Education]:
    entries = []
    for entry in _as_list(value):
        if isinstance(entry, str):
            if entry.strip():
                entries.append(Education(degree=entry.strip()))
            continue
        if not isinstance(entry, Mapping):
            continue
        education = Education(
            degree=_as_text(_first(entry, "degree", "Degree")),
            field_of_study=_as_text(_first(entry, "fieldOfStudy", "field_of_study", "Field of Study", "field")),
            institution=_as_text(_first(entry, "institution", "Institution", "school", "university")),
        )
        if education.fields:
            entries.append(education)
    return entries


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


# =============================================================================
# Public API
# =============================================================================


def normalize_candidate(record: Mapping[str, Any]) -> CandidateProfile:
    """
    Build a CandidateProfile from a loosely shaped candidate record.

    Survey answers are read from a nested "survey" document when present,
    falling back to top-level keys.

    Raises:
        InvalidCandidateError: if the record is not a mapping
    """
    if isinstance(record, CandidateProfile):
        return record
    if not isinstance(record, Mapping):
        raise InvalidCandidateError(f"Candidate record must be an object, got {type(record).__name__}")

    survey = record.get("survey") if isinstance(record.get("survey"), Mapping) else {}

    def pref(*keys: str) -> Any:
        value = _first(survey, *keys)
        return value if value is not None else _first(record, *keys)

    candidate_id = _as_text(_first(record, "candidateId", "candidate_id", "userId", "_id", "id"))

    profile = CandidateProfile(
        candidate_id=candidate_id,
        full_name=_as_text(_first(record, "fullName", "Full Name", "full_name", "name", "username")),
        email=_as_text(_first(record, "email", "Email")),
        skills=_as_string_list(_first(record, "skills", "Skills")),
        hidden_skills=_as_string_list(_first(record, "hiddenSoftSkills", "hidden_skills", "hiddenSkills")),
        work_experience=_parse_work_experience(_first(record, "workExperience", "Work Experience", "work_experience")),
        education=_parse_education(_first(record, "education", "Education")),
        desired_titles=_as_string_list(pref("jobTitles", "desired_titles", "desiredTitles")),
        salary_floor=parse_amount(pref("minSalary", "salary_floor", "salaryFloor")),
        job_type=parse_job_type(pref("jobType", "job_type")),
        coordinates=parse_coordinates(pref("locationCoordinates", "coordinates", "coords")),
    )

    if profile.job_type is None or profile.coordinates is None:
        logger.debug(
            f"Candidate {profile.display_name} normalized without "
            f"{'job type' if profile.job_type is None else 'coordinates'}"
        )
    return profile


def normalize_candidates(records: Iterable[Any]) -> list[CandidateProfile]:
    """
    Normalize a pool of candidate records, skipping unusable entries.

    Records that are not objects are logged and dropped so a single bad
    entry does not stop the run.
    """
    profiles = []
    for index, record in enumerate(records):
        try:
            profiles.append(normalize_candidate(record))
        except (InvalidCandidateError, ValidationError) as e:
            logger.warning(f"Skipping candidate record #{index}: {e}")
    return profiles


def normalize_requirement(
    record: Mapping[str, Any],
    default_max_distance: float = DEFAULT_MAX_DISTANCE_MILES,
) -> JobRequirement:
    """
    Build a JobRequirement from a loosely shaped job post record.

    Raises:
        InvalidRequirementError: if title, job type or coordinates are
            missing or malformed
    """
    if isinstance(record, JobRequirement):
        return record
    if not isinstance(record, Mapping):
        raise InvalidRequirementError([f"record must be an object, got {type(record).__name__}"])

    problems = []

    title = _as_text(_first(record, "jobTitle", "Job Title", "title"))
    if title is None:
        problems.append("job title is required")

    raw_job_type = _first(record, "jobType", "job_type", "Job Type")
    job_type = parse_job_type(raw_job_type)
    if job_type is None:
        problems.append(f"invalid or missing job type: {raw_job_type!r}")

    coordinates = parse_coordinates(_first(record, "locationCoordinates", "coordinates", "coords"))
    if coordinates is None:
        problems.append("valid location coordinates are required")

    max_distance = parse_amount(_first(record, "maxDistance", "max_distance"))
    if max_distance is None:
        max_distance = default_max_distance
    elif max_distance < 0:
        problems.append(f"max distance must be non-negative, got {max_distance}")

    if problems:
        raise InvalidRequirementError(problems)

    return JobRequirement(
        title=title,
        required_skills=_as_string_list(_first(record, "requiredSkills", "required_skills", "Required Skills")),
        salary_ceiling=parse_amount(_first(record, "salary", "salaryCeiling", "salary_ceiling", "maxSalary")),
        job_type=job_type,
        coordinates=coordinates,
        max_distance=max_distance,
    )
