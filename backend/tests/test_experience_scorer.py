"""Tests for the experience scorer."""

import pytest

from models.schemas.job_requirements import ExperienceLevel, ExperienceRequirement, JobRequirements
from services.experience_scorer import (
    detect_tiers,
    determine_experience_level,
    score_experience,
)

SENIOR = ["Senior Manager, Payments"]
MID = ["Software Engineer at Acme"]
ENTRY = ["Intern at Acme"]
NONE = ["Barista"]


def _req(level: ExperienceLevel, domains: list[str] | None = None) -> JobRequirements:
    return JobRequirements(experience=ExperienceRequirement(level=level, domains=domains or []))


@pytest.mark.parametrize(
    "level, experience, expected",
    [
        (ExperienceLevel.ENTRY, ENTRY, 1.0),
        (ExperienceLevel.ENTRY, MID, 0.8),
        (ExperienceLevel.ENTRY, SENIOR, 0.6),
        (ExperienceLevel.ENTRY, NONE, 0.4),
        (ExperienceLevel.MID, MID, 1.0),
        (ExperienceLevel.MID, SENIOR, 0.9),
        (ExperienceLevel.MID, ENTRY, 0.7),
        (ExperienceLevel.MID, NONE, 0.5),
        (ExperienceLevel.SENIOR, SENIOR, 1.0),
        (ExperienceLevel.SENIOR, MID, 0.7),
        (ExperienceLevel.SENIOR, ENTRY, 0.4),
        (ExperienceLevel.SENIOR, NONE, 0.4),
        (ExperienceLevel.LEAD, SENIOR, 0.9),
        (ExperienceLevel.LEAD, MID, 0.5),
        (ExperienceLevel.LEAD, NONE, 0.3),
        (ExperienceLevel.EXECUTIVE, SENIOR, 0.9),
        (ExperienceLevel.EXECUTIVE, MID, 0.5),
        (ExperienceLevel.EXECUTIVE, ENTRY, 0.3),
    ],
)
def test_level_table(level, experience, expected):
    assert score_experience(experience, _req(level)) == pytest.approx(expected)


def test_mid_job_prefers_mid_tier_when_both_present():
    score = score_experience(["Senior Python Developer, 6 years"], _req(ExperienceLevel.MID))
    assert score == pytest.approx(1.0)


def test_domain_blend():
    req = _req(ExperienceLevel.MID, domains=["fintech", "healthcare"])
    score = score_experience(["Software Engineer at a Fintech startup"], req)
    assert score == pytest.approx(1.0 * 0.7 + 0.5 * 0.3)


def test_empty_experience():
    assert score_experience([], _req(ExperienceLevel.SENIOR)) == pytest.approx(0.4)


def test_detect_tiers_uses_substrings():
    assert detect_tiers("team leader and engineering intern") == {"senior", "mid", "entry"}


class TestExperienceLevelLabel:
    def test_senior(self):
        assert determine_experience_level(["Senior Python Developer"]) == "Senior Level"

    def test_mid(self):
        assert determine_experience_level(["Data Analyst"]) == "Mid Level"

    def test_entry(self):
        assert determine_experience_level(["Summer Intern"]) == "Entry Level"

    def test_unknown(self):
        assert determine_experience_level(["Barista"]) == "Level Not Determined"
        assert determine_experience_level([]) == "Level Not Determined"
