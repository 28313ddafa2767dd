"""Education scorer: candidate education lines vs. required level and fields."""

from models.schemas.job_requirements import EducationLevel, JobRequirements
from services import patterns

BASE_WEIGHT = 0.7
FIELD_WEIGHT = 0.3


def detect_degrees(education_text: str) -> dict[str, bool]:
    """Independent degree tests; a master's holder usually also hits 'degree'."""
    return {
        "phd": bool(patterns.CANDIDATE_PHD_RE.search(education_text)),
        "masters": bool(patterns.CANDIDATE_MASTERS_RE.search(education_text)),
        "bachelors": bool(patterns.CANDIDATE_BACHELORS_RE.search(education_text)),
        "associates": bool(patterns.CANDIDATE_ASSOCIATES_RE.search(education_text)),
    }


def level_score(level: EducationLevel, degrees: dict[str, bool]) -> float:
    phd = degrees["phd"]
    masters = phd or degrees["masters"]
    bachelors = masters or degrees["bachelors"]
    associates = bachelors or degrees["associates"]

    if level == EducationLevel.HIGH_SCHOOL:
        return 1.0
    if level == EducationLevel.ASSOCIATES:
        return 1.0 if associates else 0.5
    if level == EducationLevel.BACHELORS:
        if bachelors:
            return 1.0
        return 0.7 if associates else 0.4
    if level == EducationLevel.MASTERS:
        if masters:
            return 1.0
        return 0.8 if bachelors else 0.5
    # phd
    if phd:
        return 1.0
    return 0.7 if masters else 0.5


def score_education(candidate_education: list[str], requirements: JobRequirements) -> float:
    """Score 0.0-1.0; 1.0 when the job does not require education."""
    if not requirements.education.required:
        return 1.0

    text = " ".join(candidate_education).lower()
    score = level_score(requirements.education.level, detect_degrees(text))

    fields = requirements.education.fields
    if fields:
        matched = [f for f in fields if f.lower() in text]
        score = score * BASE_WEIGHT + (len(matched) / len(fields)) * FIELD_WEIGHT

    return min(1.0, score)


def determine_education_level(candidate_education: list[str]) -> str:
    """Human-readable highest degree label for the match breakdown."""
    degrees = detect_degrees(" ".join(candidate_education).lower())
    if degrees["phd"]:
        return "Doctorate"
    if degrees["masters"]:
        return "Masters"
    if degrees["bachelors"]:
        return "Bachelors"
    if degrees["associates"]:
        return "Associates"
    return "Education Not Specified"
