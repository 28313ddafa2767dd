"""Tests for the job requirement extractor."""

import pytest

from conftest import SAMPLE_JD, SCENARIO_JD
from models.schemas.job_requirements import EducationLevel, ExperienceLevel, JobRequirements
from services.requirement_extractor import (
    classify_skills,
    experience_level_for_years,
    extract_skills,
    parse_job_requirements,
    skill_context,
)


class TestSkillExtraction:
    def test_finds_skills_across_groups(self):
        skills = extract_skills("we need python, django and strong communication skills")
        assert skills == ["python", "django", "communication"]

    def test_whole_word_matching(self):
        skills = extract_skills("javascript and postgresql")
        assert "java" not in skills
        assert "sql" not in skills
        assert "javascript" in skills
        assert "postgresql" in skills

    def test_symbol_terms(self):
        skills = extract_skills("c++, c# and node.js services with ci/cd")
        assert {"c++", "c#", "node.js", "ci/cd"} <= set(skills)

    def test_duplicates_collapsed(self):
        skills = extract_skills("python python PYTHON")
        assert skills == ["python"]

    def test_multi_word_soft_skill_with_hyphen(self):
        assert "problem solving" in extract_skills("excellent problem-solving ability")

    def test_hyphen_and_space_spellings_collapsed(self):
        assert extract_skills("problem solving and problem-solving") == ["problem solving"]

    def test_hyphenated_vocabulary_term_kept(self):
        req = parse_job_requirements("an e-commerce and e commerce platform")
        assert req.experience.domains == ["e-commerce"]


class TestClassification:
    def test_required_indicator(self):
        required, preferred = classify_skills("docker is mandatory", ["docker"])
        assert required == ["docker"]
        assert preferred == []

    def test_preferred_indicator(self):
        required, preferred = classify_skills("kubernetes experience is a plus", ["kubernetes"])
        assert required == []
        assert preferred == ["kubernetes"]

    def test_required_wins_over_preferred(self):
        required, preferred = classify_skills("redis required, graphql preferred", ["redis"])
        assert required == ["redis"]

    def test_no_indicator_defaults_to_required(self):
        required, preferred = classify_skills("our team uses docker daily", ["docker"])
        assert required == ["docker"]
        assert preferred == []

    def test_window_limits_context(self):
        text = "kubernetes is a plus." + " filler" * 40 + " mandatory"
        required, preferred = classify_skills(text, ["kubernetes"])
        assert preferred == ["kubernetes"]

    def test_context_for_absent_skill_is_empty(self):
        assert skill_context("python only", "rust") == ""

    def test_hyphenated_mention_classified(self):
        required, preferred = classify_skills("problem-solving is a plus", ["problem solving"])
        assert preferred == ["problem solving"]


class TestExperience:
    @pytest.mark.parametrize(
        "years, level",
        [
            (0, ExperienceLevel.MID),
            (2, ExperienceLevel.ENTRY),
            (3, ExperienceLevel.MID),
            (5, ExperienceLevel.MID),
            (8, ExperienceLevel.SENIOR),
            (12, ExperienceLevel.LEAD),
            (13, ExperienceLevel.EXECUTIVE),
            (None, ExperienceLevel.MID),
        ],
    )
    def test_level_thresholds(self, years, level):
        assert experience_level_for_years(years) == level

    def test_years_parsed(self):
        req = parse_job_requirements("Minimum 10+ years of professional experience.")
        assert req.experience.minimum_years == 10
        assert req.experience.level == ExperienceLevel.LEAD

    def test_no_years_defaults_to_mid(self):
        req = parse_job_requirements("Join our team building web apps in Python.")
        assert req.experience.minimum_years is None
        assert req.experience.level == ExperienceLevel.MID


    def test_zero_years_is_no_requirement(self):
        req = parse_job_requirements("0 years experience needed, python")
        assert req.experience.minimum_years is None
        assert req.experience.level == ExperienceLevel.MID
    def test_domains(self):
        req = parse_job_requirements("A healthcare SaaS startup")
        assert req.experience.domains == ["healthcare", "saas", "startup"]


class TestEducation:
    def test_required_flag(self):
        assert parse_job_requirements("Bachelor's degree required").education.required is True
        assert parse_job_requirements("A degree is nice to have").education.required is False

    def test_level_priority(self):
        req = parse_job_requirements("PhD preferred, Bachelor's required")
        assert req.education.level == EducationLevel.PHD

    def test_masters(self):
        assert parse_job_requirements("MBA or Master's degree").education.level == EducationLevel.MASTERS

    def test_associates(self):
        assert parse_job_requirements("Associate's in IT").education.level == EducationLevel.ASSOCIATES

    def test_default_bachelors(self):
        assert parse_job_requirements("Python developer").education.level == EducationLevel.BACHELORS

    def test_fields_and_certifications(self):
        req = parse_job_requirements("Computer Science or Mathematics grads. PMP and AWS certification.")
        assert req.education.fields == ["computer science", "mathematics"]
        assert req.certifications == ["pmp", "aws"]


class TestParseJobRequirements:
    def test_sample_jd(self):
        req = parse_job_requirements(SAMPLE_JD)
        assert {"python", "django", "postgresql", "redis"} <= set(req.required_skills)
        assert req.experience.minimum_years == 5
        assert req.experience.level == ExperienceLevel.MID
        assert "fintech" in req.experience.domains
        assert req.education.required is True
        assert req.education.level == EducationLevel.BACHELORS
        assert req.education.fields == ["computer science"]

    def test_scenario_description(self):
        req = parse_job_requirements(SCENARIO_JD)
        assert req.required_skills == ["python", "django"]
        assert req.preferred_skills == []
        assert req.experience.minimum_years == 5
        assert req.experience.level == ExperienceLevel.MID

    @pytest.mark.parametrize("text", ["", "   \n\t "])
    def test_blank_text(self, text):
        req = parse_job_requirements(text)
        assert req == JobRequirements()
        assert req.experience.level == ExperienceLevel.MID
        assert req.education.level == EducationLevel.BACHELORS
        assert req.required_skills == []

    def test_idempotent(self):
        assert parse_job_requirements(SAMPLE_JD) == parse_job_requirements(SAMPLE_JD)

    def test_lowercased_and_deduplicated(self):
        req = parse_job_requirements("PYTHON required. Python, python!")
        assert req.required_skills == ["python"]

    def test_negation_is_not_handled(self):
        req = parse_job_requirements("No Python experience required")
        assert "python" in req.required_skills
