"""
Tests for talentmatch.core.matching.score_calculator — skill and education scoring.
"""

import pytest

from talentmatch.core.matching.score_calculator import ScoreCalculator, build_skill_pool
from talentmatch.data.models import Education


# ── build_skill_pool ─────────────────────────────────────────────────────────


class TestBuildSkillPool:
    def test_union_of_sources(self, make_candidate):
        candidate = make_candidate(
            skills=["Python"],
            hidden_skills=["Leadership"],
            responsibilities=["Built REST APIs"],
        )
        assert build_skill_pool(candidate) == ["python", "leadership", "built rest apis"]

    def test_case_folded_and_deduplicated(self, make_candidate):
        candidate = make_candidate(skills=["SQL", "sql"], hidden_skills=["Sql"])
        assert build_skill_pool(candidate) == ["sql"]

    def test_empty(self, make_candidate):
        assert build_skill_pool(make_candidate(skills=[])) == []


# ── Skill score ──────────────────────────────────────────────────────────────


class TestSkillScore:
    def test_all_required_matched(self, score_calculator, make_requirement, make_candidate):
        breakdown = score_calculator.score(make_requirement(), make_candidate())
        assert breakdown.skill_score == 1.0
        evidence = {e.required_skill: e.matched_term for e in breakdown.matched_skills}
        assert evidence == {"go": "golang", "sql": "sql"}
        assert breakdown.missing_skills == []

    def test_partial_match(self, score_calculator, make_requirement, make_candidate):
        breakdown = score_calculator.score(
            make_requirement(required_skills=["Go", "Rust"]),
            make_candidate(skills=["golang"]),
        )
        assert breakdown.skill_score == 0.5
        assert breakdown.missing_skills == ["rust"]

    def test_none_matched(self, score_calculator, make_requirement, make_candidate):
        breakdown = score_calculator.score(
            make_requirement(required_skills=["Kubernetes"]),
            make_candidate(skills=["painting"]),
        )
        assert breakdown.skill_score == 0.0

    def test_hidden_skills_count(self, score_calculator, make_requirement, make_candidate):
        breakdown = score_calculator.score(
            make_requirement(required_skills=["Leadership"]),
            make_candidate(skills=[], hidden_skills=["leadership"]),
        )
        assert breakdown.skill_score == 1.0

    def test_responsibility_fragments_count(self, score_calculator, make_requirement, make_candidate):
        breakdown = score_calculator.score(
            make_requirement(required_skills=["REST APIs"]),
            make_candidate(skills=[], responsibilities=["Built REST APIs for billing"]),
        )
        assert breakdown.skill_score == 1.0
        assert breakdown.matched_skills[0].matched_term == "built rest apis for billing"

    def test_near_match_by_edit_distance(self, score_calculator, make_requirement, make_candidate):
        breakdown = score_calculator.score(
            make_requirement(required_skills=["Kubernetes"]),
            make_candidate(skills=["kubernets"]),
        )
        assert breakdown.skill_score == 1.0

    def test_required_skills_case_insensitive(self, score_calculator, make_requirement, make_candidate):
        breakdown = score_calculator.score(
            make_requirement(required_skills=["PYTHON"]),
            make_candidate(skills=["python"]),
        )
        assert breakdown.skill_score == 1.0

    def test_no_requirements_with_skills(self, score_calculator, make_requirement, make_candidate):
        breakdown = score_calculator.score(
            make_requirement(required_skills=[]),
            make_candidate(skills=["anything"]),
        )
        assert breakdown.skill_score == 1.0

    def test_no_requirements_without_skills(self, score_calculator, make_requirement, make_candidate):
        breakdown = score_calculator.score(
            make_requirement(required_skills=[]),
            make_candidate(skills=[]),
        )
        assert breakdown.skill_score == 0.0
        assert breakdown.combined_score == 0.0


# ── Education score ──────────────────────────────────────────────────────────


class TestEducationScore:
    def test_degree_matches_title(self, score_calculator, make_requirement, make_candidate):
        candidate = make_candidate(education=[Education(degree="BSc Software Engineering")])
        breakdown = score_calculator.score(make_requirement(), candidate)
        assert breakdown.education_score == 1.0
        assert breakdown.education_evidence == "bsc software engineering"

    def test_field_matches_required_skill(self, score_calculator, make_requirement, make_candidate):
        candidate = make_candidate(
            education=[Education(degree="Diploma", field_of_study="SQL Databases")]
        )
        breakdown = score_calculator.score(make_requirement(), candidate)
        assert breakdown.education_score == 1.0
        assert breakdown.education_evidence == "sql databases"

    def test_institution_is_checked(self, score_calculator, make_requirement, make_candidate):
        candidate = make_candidate(education=[Education(institution="Software Engineer Academy")])
        breakdown = score_calculator.score(make_requirement(), candidate)
        assert breakdown.education_score == 1.0

    def test_unrelated_education(self, score_calculator, make_requirement, make_candidate):
        candidate = make_candidate(
            education=[Education(degree="Fine Arts", field_of_study="Painting", institution="Yale")]
        )
        breakdown = score_calculator.score(make_requirement(), candidate)
        assert breakdown.education_score == 0.0
        assert breakdown.education_evidence is None

    def test_missing_parts_are_ignored(self, score_calculator, make_requirement, make_candidate):
        candidate = make_candidate(education=[Education()])
        assert score_calculator.score(make_requirement(), candidate).education_score == 0.0


# ── Combined score ───────────────────────────────────────────────────────────


class TestCombinedScore:
    def test_end_to_end_scenario(self, score_calculator, make_requirement, make_candidate):
        breakdown = score_calculator.score(make_requirement(), make_candidate())
        assert breakdown.combined_score == pytest.approx(0.7)
        assert breakdown.match_percentage >= 70

    def test_skills_and_education(self, score_calculator, make_requirement, make_candidate):
        candidate = make_candidate(education=[Education(degree="Software Engineering")])
        breakdown = score_calculator.score(make_requirement(), candidate)
        assert breakdown.combined_score == pytest.approx(1.0)
        assert breakdown.match_percentage == 100.0

    def test_education_only(self, score_calculator, make_requirement, make_candidate):
        candidate = make_candidate(skills=["painting"], education=[Education(degree="Software Engineering")])
        breakdown = score_calculator.score(make_requirement(), candidate)
        assert breakdown.skill_score == 0.0
        assert breakdown.combined_score == pytest.approx(0.3)

    def test_percentage_rounded_to_one_decimal(self, score_calculator, make_requirement, make_candidate):
        breakdown = score_calculator.score(
            make_requirement(required_skills=["go", "rust", "c"]),
            make_candidate(skills=["golang"]),
        )
        # 1/3 * 0.7 = 0.2333...
        assert breakdown.match_percentage == 23.3

    def test_custom_weights(self, make_requirement, make_candidate):
        calculator = ScoreCalculator(skills_weight=0.5, education_weight=0.5)
        breakdown = calculator.score(make_requirement(), make_candidate())
        assert breakdown.combined_score == pytest.approx(0.5)

    @pytest.mark.parametrize("skills, education", [(0.8, 0.3), (-0.1, 0.3), (0.7, -0.3)])
    def test_invalid_weights(self, skills, education):
        with pytest.raises(ValueError):
            ScoreCalculator(skills_weight=skills, education_weight=education)

    def test_does_not_mutate_inputs(self, score_calculator, make_requirement, make_candidate):
        requirement = make_requirement()
        candidate = make_candidate()
        before = (requirement.model_dump(), candidate.model_dump())
        score_calculator.score(requirement, candidate)
        assert (requirement.model_dump(), candidate.model_dump()) == before
