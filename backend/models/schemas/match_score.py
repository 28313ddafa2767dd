"""Per-candidate scoring output of the matching engine."""

from pydantic import BaseModel


class SkillsMatch(BaseModel):
    """Skill matcher output: bounded score plus the match breakdown."""
    score: float = 0.0  # 0.0-1.0
    required_matched: list[str] = []
    preferred_matched: list[str] = []
    missing: list[str] = []  # required skills with no match


class MatchBreakdown(BaseModel):
    required_skills_matched: list[str] = []
    preferred_skills_matched: list[str] = []
    missing_required_skills: list[str] = []
    experience_level: str = ""
    education_level: str = ""
    additional_strengths: list[str] = []


class MatchScore(BaseModel):
    candidate_id: str
    overall_score: float = 0.0
    skills_score: float = 0.0
    experience_score: float = 0.0
    education_score: float = 0.0
    semantic_score: float = 0.0
    breakdown: MatchBreakdown = MatchBreakdown()


class SemanticMatch(BaseModel):
    """Cosine-only match result."""
    candidate_id: str
    score: float = 0.0
