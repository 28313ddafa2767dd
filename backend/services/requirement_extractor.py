"""Requirement extractor: free-text job description -> JobRequirements.

Pattern-driven, no model involved:
    1. whole-word scan of three skill vocabularies (unioned, deduplicated)
    2. required/preferred classification from a window around each skill
    3. minimum years -> experience level thresholds
    4. industry domains
    5. education required flag, level (priority order), fields
    6. certifications

Negations are not handled: "no Python experience required" still counts
as a Python mention.
"""

import logging
import re
from collections.abc import Iterable

from models.schemas.job_requirements import (
    EducationLevel,
    EducationRequirement,
    ExperienceLevel,
    ExperienceRequirement,
    JobRequirements,
)
from services import patterns

logger = logging.getLogger(__name__)

_SKILL_RES = tuple(patterns.keyword_pattern(group) for group in patterns.SKILL_GROUPS)
_REQUIRED_RE = patterns.keyword_pattern(patterns.REQUIRED_INDICATORS)
_PREFERRED_RE = patterns.keyword_pattern(patterns.PREFERRED_INDICATORS)
_DOMAIN_RE = patterns.keyword_pattern(patterns.DOMAINS)
_FIELD_RE = patterns.keyword_pattern(patterns.EDUCATION_FIELDS)
_CERT_RE = patterns.keyword_pattern(patterns.CERTIFICATIONS)


# Vocabulary spelling keyed by its hyphen/space-insensitive form
_VOCABULARY: dict[str, str] = {
    re.sub(r"[\s-]+", " ", keyword): keyword
    for group in (*patterns.SKILL_GROUPS, patterns.DOMAINS, patterns.EDUCATION_FIELDS, patterns.CERTIFICATIONS)
    for keyword in group
}


def _normalize(term: str) -> str:
    """Lower-case and collapse whitespace; known keywords map to their vocabulary spelling."""
    term = term.lower().strip()
    return _VOCABULARY.get(re.sub(r"[\s-]+", " ", term), re.sub(r"\s+", " ", term))


def dedupe(terms: Iterable[str]) -> list[str]:
    """Lower-case and deduplicate, keeping first-seen order."""
    seen: set[str] = set()
    result: list[str] = []
    for term in terms:
        norm = _normalize(term)
        if norm and norm not in seen:
            seen.add(norm)
            result.append(norm)
    return result


def find_keywords(pattern: re.Pattern, text: str) -> list[str]:
    return dedupe(m.group(0) for m in pattern.finditer(text))


def extract_skills(text: str) -> list[str]:
    """Union of all skill vocabulary matches, first-seen order per group."""
    found: list[str] = []
    for skill_re in _SKILL_RES:
        found.extend(m.group(0) for m in skill_re.finditer(text))
    return dedupe(found)


def skill_context(text: str, skill: str, window: int = patterns.SKILL_CONTEXT_WINDOW) -> str:
    """Text around the first occurrence of ``skill`` (empty if absent).

    Spaces in a multi-word skill also match hyphens, as in extraction.
    """
    match = re.search(r"[\s-]".join(re.escape(part) for part in skill.split(" ")), text)
    if match is None:
        return ""
    start = max(0, match.start() - window)
    end = min(len(text), match.end() + window)
    return text[start:end]


def classify_skills(text: str, skills: list[str]) -> tuple[list[str], list[str]]:
    """Split skills into (required, preferred) using nearby indicator words.

    A skill with no indicator in its window is treated as required.
    """
    required: list[str] = []
    preferred: list[str] = []
    for skill in skills:
        context = skill_context(text, skill)
        if _REQUIRED_RE.search(context):
            required.append(skill)
        elif _PREFERRED_RE.search(context):
            preferred.append(skill)
        else:
            required.append(skill)
    return required, preferred


def extract_minimum_years(text: str) -> int | None:
    """Minimum years asked for; zero counts as no requirement."""
    match = patterns.EXPERIENCE_YEARS_RE.search(text)
    years = int(match.group(1)) if match else 0
    return years or None


def experience_level_for_years(years: int | None) -> ExperienceLevel:
    if not years:
        return ExperienceLevel.MID
    for upper_bound, level in patterns.EXPERIENCE_LEVEL_THRESHOLDS:
        if years <= upper_bound:
            return ExperienceLevel(level)
    return ExperienceLevel.EXECUTIVE


def extract_education_level(text: str) -> EducationLevel:
    for level, level_re in patterns.JOB_EDUCATION_LEVEL_PATTERNS:
        if level_re.search(text):
            return EducationLevel(level)
    return EducationLevel.BACHELORS


def is_education_required(text: str) -> bool:
    return bool(patterns.EDUCATION_REQUIRED_RE.search(text))


def parse_job_requirements(job_description: str) -> JobRequirements:
    """Parse a job description into structured requirements.

    Never raises on text input; blank text gives empty collections with
    the default ``mid`` experience and ``bachelors`` education levels.
    """
    text = (job_description or "").lower()
    if not text.strip():
        return JobRequirements()

    skills = extract_skills(text)
    required_skills, preferred_skills = classify_skills(text, skills)
    minimum_years = extract_minimum_years(text)

    requirements = JobRequirements(
        required_skills=required_skills,
        preferred_skills=preferred_skills,
        experience=ExperienceRequirement(
            minimum_years=minimum_years,
            level=experience_level_for_years(minimum_years),
            domains=find_keywords(_DOMAIN_RE, text),
        ),
        education=EducationRequirement(
            required=is_education_required(text),
            level=extract_education_level(text),
            fields=find_keywords(_FIELD_RE, text),
        ),
        certifications=find_keywords(_CERT_RE, text),
    )
    logger.debug(
        "Parsed requirements: required=%d preferred=%d level=%s education=%s",
        len(required_skills),
        len(preferred_skills),
        requirements.experience.level.value,
        requirements.education.level.value,
    )
    return requirements
