"""Pydantic contracts shared by the matching services."""

from models.schemas.candidate_profile import CandidateProfile, ExtractedFields, ProcessedResume
from models.schemas.job_requirements import (
    EducationLevel,
    EducationRequirement,
    ExperienceLevel,
    ExperienceRequirement,
    JobRequirements,
)
from models.schemas.match_score import MatchBreakdown, MatchScore, SemanticMatch, SkillsMatch

__all__ = [
    "CandidateProfile",
    "EducationLevel",
    "EducationRequirement",
    "ExperienceLevel",
    "ExperienceRequirement",
    "ExtractedFields",
    "JobRequirements",
    "MatchBreakdown",
    "MatchScore",
    "ProcessedResume",
    "SemanticMatch",
    "SkillsMatch",
]
