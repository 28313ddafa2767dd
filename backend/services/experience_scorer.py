"""Experience scorer: candidate experience lines vs. required level and domains."""

from models.schemas.job_requirements import ExperienceLevel, JobRequirements
from services import patterns

# level -> (tier, score) pairs checked in order; the first tier present wins
_LEVEL_TABLE: dict[ExperienceLevel, tuple[tuple[str, float], ...]] = {
    ExperienceLevel.ENTRY: (("entry", 1.0), ("mid", 0.8), ("senior", 0.6)),
    ExperienceLevel.MID: (("mid", 1.0), ("senior", 0.9), ("entry", 0.7)),
    ExperienceLevel.SENIOR: (("senior", 1.0), ("mid", 0.7)),
    ExperienceLevel.LEAD: (("senior", 0.9), ("mid", 0.5)),
    ExperienceLevel.EXECUTIVE: (("senior", 0.9), ("mid", 0.5)),
}
_NO_MATCH_SCORE: dict[ExperienceLevel, float] = {
    ExperienceLevel.ENTRY: 0.4,
    ExperienceLevel.MID: 0.5,
    ExperienceLevel.SENIOR: 0.4,
    ExperienceLevel.LEAD: 0.3,
    ExperienceLevel.EXECUTIVE: 0.3,
}

BASE_WEIGHT = 0.7
DOMAIN_WEIGHT = 0.3

_TIER_INDICATORS: dict[str, tuple[str, ...]] = {
    "senior": patterns.SENIOR_INDICATORS,
    "mid": patterns.MID_INDICATORS,
    "entry": patterns.ENTRY_INDICATORS,
}

_LEVEL_LABEL_RES = (
    ("Senior Level", patterns.keyword_pattern(patterns.SENIOR_INDICATORS)),
    ("Mid Level", patterns.keyword_pattern(patterns.MID_INDICATORS)),
    ("Entry Level", patterns.keyword_pattern(patterns.ENTRY_INDICATORS)),
)


def detect_tiers(experience_text: str) -> set[str]:
    """Seniority tiers whose indicator words appear in the text (substring test)."""
    return {
        tier
        for tier, indicators in _TIER_INDICATORS.items()
        if any(word in experience_text for word in indicators)
    }


def level_score(level: ExperienceLevel, tiers: set[str]) -> float:
    for tier, score in _LEVEL_TABLE[level]:
        if tier in tiers:
            return score
    return _NO_MATCH_SCORE[level]


def score_experience(candidate_experience: list[str], requirements: JobRequirements) -> float:
    """Score 0.0-1.0 from seniority tiers, blended with domain coverage."""
    text = " ".join(candidate_experience).lower()
    score = level_score(requirements.experience.level, detect_tiers(text))

    domains = requirements.experience.domains
    if domains:
        matched = [d for d in domains if d.lower() in text]
        score = score * BASE_WEIGHT + (len(matched) / len(domains)) * DOMAIN_WEIGHT

    return min(1.0, score)


def determine_experience_level(candidate_experience: list[str]) -> str:
    """Human-readable seniority label for the match breakdown."""
    text = " ".join(candidate_experience).lower()
    for label, level_re in _LEVEL_LABEL_RES:
        if level_re.search(text):
            return label
    return "Level Not Determined"
