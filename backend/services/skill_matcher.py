"""Skill matcher: candidate skill list vs. parsed job requirements.

A job skill matches a candidate skill when either is a case-insensitive
substring of the other, or both sit in the same synonym group.
"""

from models.schemas.job_requirements import JobRequirements
from models.schemas.match_score import SkillsMatch
from services import patterns

DEFAULT_REQUIRED_WEIGHT = 0.7
DEFAULT_PREFERRED_WEIGHT = 0.3

# One group per base skill; groups never merge across keys
_SYNONYM_GROUPS: list[frozenset[str]] = [
    frozenset((base, *alternatives)) for base, alternatives in patterns.SKILL_SYNONYMS.items()
]


def are_synonyms(skill_a: str, skill_b: str) -> bool:
    """True when both skills belong to one synonym group."""
    a = skill_a.lower().strip()
    b = skill_b.lower().strip()
    return any(a in group and b in group for group in _SYNONYM_GROUPS)


def overlaps(skill_a: str, skill_b: str) -> bool:
    """Substring test in either direction, case-insensitive."""
    a = skill_a.lower().strip()
    b = skill_b.lower().strip()
    if not a or not b:
        return False
    return a in b or b in a


def skill_matches(job_skill: str, candidate_skills: list[str]) -> bool:
    return any(
        overlaps(job_skill, c) or are_synonyms(job_skill, c)
        for c in candidate_skills
    )


def compute_skills_match(
    candidate_skills: list[str],
    requirements: JobRequirements,
    required_weight: float = DEFAULT_REQUIRED_WEIGHT,
    preferred_weight: float = DEFAULT_PREFERRED_WEIGHT,
) -> SkillsMatch:
    """Score candidate skills against required and preferred job skills.

    No required skills gives full credit on the required term; no
    preferred skills gives zero credit on the preferred term.
    """
    candidates = [s for s in candidate_skills if s and s.strip()]

    required_matched: list[str] = []
    missing: list[str] = []
    for skill in requirements.required_skills:
        if skill_matches(skill, candidates):
            required_matched.append(skill)
        else:
            missing.append(skill)

    preferred_matched = [
        skill for skill in requirements.preferred_skills if skill_matches(skill, candidates)
    ]

    n_required = len(requirements.required_skills)
    n_preferred = len(requirements.preferred_skills)
    required_ratio = len(required_matched) / n_required if n_required > 0 else 1.0
    preferred_ratio = len(preferred_matched) / n_preferred if n_preferred > 0 else 0.0

    score = required_ratio * required_weight + preferred_ratio * preferred_weight
    return SkillsMatch(
        score=min(1.0, score),
        required_matched=required_matched,
        preferred_matched=preferred_matched,
        missing=missing,
    )


def find_additional_strengths(
    candidate_skills: list[str],
    candidate_certifications: list[str],
    requirements: JobRequirements,
    limit: int = 5,
) -> list[str]:
    """Describe candidate skills and certifications beyond the job's asks.

    Uses the plain substring test only; synonyms are not expanded here.
    """
    job_skills = requirements.required_skills + requirements.preferred_skills
    extra = [
        skill for skill in candidate_skills
        if skill and skill.strip() and not any(overlaps(skill, js) for js in job_skills)
    ]

    strengths: list[str] = []
    if extra:
        strengths.append(f"Additional technical skills: {', '.join(extra[:limit])}")
    if candidate_certifications:
        strengths.append(f"Professional certifications: {', '.join(candidate_certifications)}")
    return strengths
