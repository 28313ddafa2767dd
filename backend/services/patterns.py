"""Keyword pattern tables for requirement extraction and candidate scoring.

Kept as plain data so the vocabularies can change without touching the
scoring logic. Every table is matched against lower-cased text.
"""

import re

# ---------------------------------------------------------------------------
# Job description skill vocabularies (three groups, unioned by the extractor)
# ---------------------------------------------------------------------------
PROGRAMMING_SKILLS: tuple[str, ...] = (
    "javascript", "python", "java", "react", "angular", "vue", "node.js",
    "aws", "docker", "kubernetes", "sql", "mongodb", "git", "typescript",
    "c++", "c#", "php", "ruby", "go", "rust", "swift", "kotlin", "html",
    "css", "sass", "bootstrap", "tailwind", "postgresql", "mysql", "redis",
    "graphql", "rest", "api", "microservices", "devops", "ci/cd", "jenkins",
    "github",
)

FRAMEWORK_SKILLS: tuple[str, ...] = (
    "express", "django", "flask", "spring", "laravel", "rails", "tensorflow",
    "pytorch", "pandas", "numpy", "jupyter", "tableau", "power bi", "excel",
    "salesforce", "hubspot", "slack", "jira", "confluence", "figma", "adobe",
    "photoshop", "illustrator", "wordpress", "drupal", "shopify", "firebase",
    "supabase", "vercel", "netlify", "heroku",
)

SOFT_SKILLS: tuple[str, ...] = (
    "leadership", "communication", "teamwork", "problem solving",
    "analytical", "creative", "project management", "agile", "scrum",
    "strategic thinking", "customer service", "sales", "marketing",
    "business development",
)

SKILL_GROUPS: tuple[tuple[str, ...], ...] = (PROGRAMMING_SKILLS, FRAMEWORK_SKILLS, SOFT_SKILLS)

# Context indicators, tested in a window around each skill mention
REQUIRED_INDICATORS: tuple[str, ...] = (
    "required", "must have", "essential", "mandatory", "need", "necessary",
)
PREFERRED_INDICATORS: tuple[str, ...] = (
    "preferred", "nice to have", "bonus", "plus", "desired", "advantageous",
)

SKILL_CONTEXT_WINDOW = 100  # characters either side of a skill mention

# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------
# "5+ years of experience", "3-5 yrs exp", on a single line
EXPERIENCE_YEARS_RE = re.compile(
    r"(\d+)[+\-\s]*(?:years?|yrs?).*(?:experience|exp)",
    re.IGNORECASE,
)

# (upper bound inclusive, level) checked in order; anything above is executive
EXPERIENCE_LEVEL_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (2, "entry"),
    (5, "mid"),
    (8, "senior"),
    (12, "lead"),
)

DOMAINS: tuple[str, ...] = (
    "fintech", "finance", "banking", "healthcare", "medical", "e-commerce",
    "retail", "education", "edtech", "gaming", "entertainment", "automotive",
    "aerospace", "energy", "real estate", "insurance", "legal", "government",
    "non-profit", "startup", "enterprise", "saas", "b2b", "b2c",
)

# Seniority indicators looked for in candidate experience text (substring test)
SENIOR_INDICATORS: tuple[str, ...] = ("senior", "lead", "principal", "architect", "manager", "director")
MID_INDICATORS: tuple[str, ...] = ("developer", "engineer", "analyst", "specialist")
ENTRY_INDICATORS: tuple[str, ...] = ("junior", "intern", "entry", "trainee", "graduate")

# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------
# A degree keyword followed, on the same line, by a requirement keyword
EDUCATION_REQUIRED_RE = re.compile(
    r"\b(?:degree|bachelor|master|phd|education).*\b(?:required|mandatory|must)\b",
    re.IGNORECASE,
)

# Job-side level detection, in priority order (first match wins)
JOB_EDUCATION_LEVEL_PATTERNS: tuple[tuple[str, re.Pattern], ...] = (
    ("phd", re.compile(r"\b(?:ph\.?d|doctorate)\b", re.IGNORECASE)),
    ("masters", re.compile(r"\b(?:master(?:'?s)?|mba)\b", re.IGNORECASE)),
    ("bachelors", re.compile(r"\b(?:bachelor(?:'?s)?|degree)\b", re.IGNORECASE)),
    ("associates", re.compile(r"\b(?:associate(?:'?s)?)\b", re.IGNORECASE)),
)

# Candidate-side degree detection; independent tests, not mutually exclusive
CANDIDATE_PHD_RE = re.compile(r"\b(?:ph\.?d|doctorate|doctoral)\b", re.IGNORECASE)
CANDIDATE_MASTERS_RE = re.compile(r"\b(?:master(?:'?s)?|mba|ms|ma|m\.s\.?|m\.a\.?)\b", re.IGNORECASE)
CANDIDATE_BACHELORS_RE = re.compile(r"\b(?:bachelor(?:'?s)?|bs|ba|b\.s\.?|b\.a\.?|degree)\b", re.IGNORECASE)
CANDIDATE_ASSOCIATES_RE = re.compile(r"\b(?:associate(?:'?s)?|aa|as)\b", re.IGNORECASE)

EDUCATION_FIELDS: tuple[str, ...] = (
    "computer science", "software engineering", "electrical engineering",
    "mechanical engineering", "business", "marketing", "finance", "economics",
    "mathematics", "statistics", "data science", "psychology", "design",
    "arts", "communications", "english", "biology", "chemistry", "physics",
    "medicine", "law",
)

CERTIFICATIONS: tuple[str, ...] = (
    "aws", "azure", "gcp", "pmp", "scrum master", "agile", "cissp", "cisa",
    "cism", "comptia", "cisco", "microsoft", "google", "oracle",
    "salesforce", "hubspot",
)

# ---------------------------------------------------------------------------
# Skill synonyms: each key and its alternatives form one group
# ---------------------------------------------------------------------------
SKILL_SYNONYMS: dict[str, tuple[str, ...]] = {
    "javascript": ("js", "ecmascript", "es6", "es2015"),
    "typescript": ("ts",),
    "react": ("reactjs", "react.js"),
    "node.js": ("nodejs", "node"),
    "python": ("py",),
    "postgresql": ("postgres",),
    "mongodb": ("mongo",),
    "aws": ("amazon web services",),
    "gcp": ("google cloud platform",),
    "azure": ("microsoft azure",),
}

# ---------------------------------------------------------------------------
# Resume processing
# ---------------------------------------------------------------------------
RESUME_TECH_SKILLS: tuple[str, ...] = (
    "javascript", "python", "java", "react", "angular", "vue", "node.js",
    "aws", "docker", "kubernetes", "sql", "mongodb", "git", "typescript",
    "c++", "c#", "php", "ruby", "go", "rust", "swift", "kotlin", "html",
    "css", "sass", "bootstrap", "tailwind", "postgresql", "mysql", "redis",
    "graphql", "rest", "api", "microservices", "devops", "ci/cd", "jenkins",
    "github", "agile", "scrum", "machine learning", "ai", "data science",
    "tensorflow", "pytorch", "pandas", "numpy", "jupyter", "tableau",
    "power bi", "excel", "salesforce", "hubspot", "slack", "jira",
    "confluence", "figma", "adobe", "photoshop", "illustrator", "wordpress",
    "drupal", "shopify", "firebase", "supabase", "vercel", "netlify", "heroku",
)


def keyword_pattern(keywords: tuple[str, ...]) -> re.Pattern:
    """Compile a whole-word alternation over literal keywords.

    Word boundaries are lookarounds on alphanumerics so that terms ending
    in symbols ("c++", "c#", "node.js") still match, and "java" does not
    match inside "javascript". Spaces in a keyword also accept hyphens.
    """
    # Longest first so "power bi" wins over any shorter prefix
    ordered = sorted(keywords, key=len, reverse=True)
    alternation = "|".join(
        r"[\s-]".join(re.escape(part) for part in k.split(" ")) for k in ordered
    )
    return re.compile(rf"(?<![a-z0-9])(?:{alternation})(?![a-z0-9])", re.IGNORECASE)
