"""
Tests for talentmatch.utils.constants — enums, scoring weights, job-type compatibility.
"""

import pytest

from talentmatch.utils.constants import (
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_MAX_DISTANCE_MILES,
    DEFAULT_SCORING_WEIGHTS,
    EARTH_RADIUS_MILES,
    JOB_TYPE_COMPATIBILITY,
    KM_PER_MILE,
    SCORE_THRESHOLDS,
    AuditAction,
    ExclusionReason,
    JobType,
    MatchScoreLevel,
)


# ── MatchScoreLevel.from_score() ────────────────────────────────────────────


class TestMatchScoreLevelFromScore:
    @pytest.mark.parametrize(
        "score, level",
        [
            (1.0, MatchScoreLevel.EXCELLENT),
            (0.85, MatchScoreLevel.EXCELLENT),
            (0.849, MatchScoreLevel.GOOD),
            (0.70, MatchScoreLevel.GOOD),
            (0.699, MatchScoreLevel.FAIR),
            (0.50, MatchScoreLevel.FAIR),
            (0.499, MatchScoreLevel.POOR),
            (0.0, MatchScoreLevel.POOR),
        ],
    )
    def test_levels(self, score, level):
        assert MatchScoreLevel.from_score(score) == level


# ── Job types ────────────────────────────────────────────────────────────────


class TestJobTypes:
    def test_values(self):
        assert {t.value for t in JobType} == {"remote", "hybrid", "onsite"}

    def test_every_type_has_a_rule(self):
        assert set(JOB_TYPE_COMPATIBILITY) == set(JobType)

    def test_remote_job(self):
        assert JOB_TYPE_COMPATIBILITY[JobType.REMOTE] == {JobType.REMOTE, JobType.HYBRID}

    def test_onsite_job(self):
        assert JOB_TYPE_COMPATIBILITY[JobType.ONSITE] == {JobType.ONSITE, JobType.HYBRID}

    def test_hybrid_job_accepts_everything(self):
        assert JOB_TYPE_COMPATIBILITY[JobType.HYBRID] == set(JobType)

    def test_str_enum_compares_to_raw_value(self):
        assert JobType.REMOTE == "remote"


# ── Numeric constants ────────────────────────────────────────────────────────


class TestNumericConstants:
    def test_geo(self):
        assert EARTH_RADIUS_MILES == 3959.0
        assert KM_PER_MILE == 1.60934
        assert DEFAULT_MAX_DISTANCE_MILES == 20000.0

    def test_fuzzy_threshold(self):
        assert DEFAULT_FUZZY_THRESHOLD == 0.65

    def test_weights_sum_to_one(self):
        assert DEFAULT_SCORING_WEIGHTS == {"skills_match": 0.7, "education_match": 0.3}
        assert sum(DEFAULT_SCORING_WEIGHTS.values()) == pytest.approx(1.0)

    def test_thresholds_descending(self):
        values = [SCORE_THRESHOLDS[k] for k in ("excellent", "good", "fair", "poor")]
        assert values == sorted(values, reverse=True)


class TestAuditEnums:
    def test_audit_actions(self):
        # Only actions the package actually records
        assert {a.value for a in AuditAction} == {"candidates_ranked", "requirement_rejected"}

    def test_exclusion_reasons_unique(self):
        values = [r.value for r in ExclusionReason]
        assert len(values) == len(set(values)) == 6
