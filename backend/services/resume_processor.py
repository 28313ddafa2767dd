"""Resume text preprocessing for matching.

Turns extracted resume text into the fields the matching engine scores
(skills, experience, education, certifications, summary, contact details)
and a matching-optimised text used for the candidate embedding.
"""

import re

from models.schemas.candidate_profile import ExtractedFields, ProcessedResume
from services import patterns

# Section header patterns and their canonical names. Headers must sit on
# their own line ("Technical Skills", "EXPERIENCE:").
SECTION_PATTERNS: dict[str, list[str]] = {
    "experience": [
        r"(?:work|professional|employment)\s*(?:experience|history)",
        r"experience",
        r"work\s*history",
        r"employment",
        r"career(?:\s*history)?",
    ],
    "skills": [
        r"(?:technical|core|key|professional)?\s*skills",
        r"(?:core\s+)?competencies",
        r"technologies",
    ],
    "education": [
        r"education(?:al)?\s*(?:background|history)?",
        r"academic\s*background",
        r"qualifications",
    ],
    "certifications": [
        r"certific(?:ations?|ates?)",
        r"licen[sc]es?(?:\s*(?:&|and)\s*certific(?:ations?|ates?))?",
    ],
    "summary": [
        r"(?:professional|executive|career)?\s*summary",
        r"(?:career|professional)?\s*objective",
        r"profile",
        r"overview",
    ],
    "other": [
        r"contact(?:\s*information)?",
        r"references",
        r"projects",
    ],
}

_COMPILED: dict[str, re.Pattern] = {
    section: re.compile(rf"^\s*(?:{'|'.join(pats)})\s*:?\s*$", re.IGNORECASE)
    for section, pats in SECTION_PATTERNS.items()
}

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"(?:\+?1[-.\s]?)?\(?([0-9]{3})\)?[-.\s]?([0-9]{3})[-.\s]?([0-9]{4})")
NAME_RE = re.compile(r"^([A-Z][a-z]+ [A-Z][a-z]+(?:[ \t]+[A-Z][a-z]+)*)", re.MULTILINE)

_BULLET_PREFIX_RE = re.compile(r"^[•\-–—►▪*○●■□◆▸]\s*")
_SKILL_SPLIT_RE = re.compile(r"[,;|\n•▪●]|\s[-–]\s")
_TECH_SKILL_RE = patterns.keyword_pattern(patterns.RESUME_TECH_SKILLS)
_NON_TEXT_RE = re.compile(r"[^\w\s.,;:\-()]")

MAX_BULLETS = 10
MIN_BULLET_CHARS = 10
MAX_SKILLS = 20
MAX_SUMMARY_CHARS = 500


def parse_sections(text: str) -> dict[str, str]:
    """Split resume text into named sections.

    Returns a dict mapping section name -> section text content. Text
    before the first header goes into 'header'. A repeated section keeps
    its first occurrence.
    """
    sections: dict[str, str] = {}
    current_section = "header"
    current_lines: list[str] = []

    def flush() -> None:
        content = "\n".join(current_lines).strip()
        if content and current_section not in sections:
            sections[current_section] = content

    for line in text.split("\n"):
        stripped = line.strip()
        matched_section = None
        if stripped:
            for section_name, pattern in _COMPILED.items():
                if pattern.match(stripped):
                    matched_section = section_name
                    break

        if matched_section:
            flush()
            current_section = matched_section
            current_lines = []
        else:
            current_lines.append(line)

    flush()
    return sections


def extract_bullet_points(section: str) -> list[str]:
    """Non-trivial lines of a section, bullet markers stripped."""
    lines = (_BULLET_PREFIX_RE.sub("", line.strip()).strip() for line in section.split("\n"))
    return [line for line in lines if len(line) > MIN_BULLET_CHARS][:MAX_BULLETS]


def extract_skills(section: str) -> list[str]:
    """Skills from list items plus known technology names, deduplicated."""
    candidates = [
        _BULLET_PREFIX_RE.sub("", part.strip()).strip()
        for part in _SKILL_SPLIT_RE.split(section)
    ]
    candidates.extend(m.group(0) for m in _TECH_SKILL_RE.finditer(section))

    seen: set[str] = set()
    skills: list[str] = []
    for skill in candidates:
        key = skill.lower()
        if len(skill) > 1 and key not in seen:
            seen.add(key)
            skills.append(skill)
    return skills[:MAX_SKILLS]


def normalize_text(raw_text: str) -> str:
    text = re.sub(r"\s+", " ", raw_text)
    text = _NON_TEXT_RE.sub("", text)
    return text.lower().strip()


def build_matching_text(fields: ExtractedFields, normalized_text: str) -> str:
    """Embedding input that weights skills 3x and experience 2x."""
    parts: list[str] = []
    if fields.skills:
        skills_text = " ".join(fields.skills)
        parts.append(f"SKILLS: {skills_text} {skills_text} {skills_text}")
    if fields.experience:
        experience_text = " ".join(fields.experience)
        parts.append(f"EXPERIENCE: {experience_text} {experience_text}")
    if fields.education:
        parts.append(f"EDUCATION: {' '.join(fields.education)}")
    if fields.certifications:
        parts.append(f"CERTIFICATIONS: {' '.join(fields.certifications)}")
    if fields.summary:
        parts.append(f"SUMMARY: {fields.summary}")
    parts.append(normalized_text)
    return " ".join(p for p in parts if p)


def extract_fields(raw_text: str) -> ExtractedFields:
    sections = parse_sections(raw_text)

    name_match = NAME_RE.search(raw_text)
    email_match = EMAIL_RE.search(raw_text)
    phone_match = PHONE_RE.search(raw_text)
    summary = sections.get("summary")

    return ExtractedFields(
        name=name_match.group(1) if name_match else None,
        email=email_match.group(0) if email_match else None,
        phone=phone_match.group(0) if phone_match else None,
        experience=extract_bullet_points(sections.get("experience", "")),
        skills=extract_skills(sections.get("skills", "")),
        education=extract_bullet_points(sections.get("education", "")),
        certifications=extract_bullet_points(sections.get("certifications", "")),
        summary=summary[:MAX_SUMMARY_CHARS] if summary else None,
    )


def preprocess_resume_text(raw_text: str) -> ProcessedResume:
    """Extract structured fields and build the matching-optimised text."""
    fields = extract_fields(raw_text)
    return ProcessedResume(
        processed_text=build_matching_text(fields, normalize_text(raw_text)),
        extracted_fields=fields,
    )
