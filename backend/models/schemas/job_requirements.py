"""Structured requirements parsed from a job description."""

from enum import Enum

from pydantic import BaseModel


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    EXECUTIVE = "executive"


class EducationLevel(str, Enum):
    HIGH_SCHOOL = "high-school"
    ASSOCIATES = "associates"
    BACHELORS = "bachelors"
    MASTERS = "masters"
    PHD = "phd"


class ExperienceRequirement(BaseModel):
    minimum_years: int | None = None
    level: ExperienceLevel = ExperienceLevel.MID
    domains: list[str] = []


class EducationRequirement(BaseModel):
    required: bool = False
    level: EducationLevel = EducationLevel.BACHELORS
    fields: list[str] = []


class JobRequirements(BaseModel):
    """Output of the requirement extractor.

    All string lists are lower-cased and deduplicated, in first-seen order.
    Empty lists mean nothing of that kind was found in the text.
    """
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    experience: ExperienceRequirement = ExperienceRequirement()
    education: EducationRequirement = EducationRequirement()
    certifications: list[str] = []
