"""Shared test configuration, fixtures and pytest markers."""

import pytest

from models.schemas.candidate_profile import CandidateProfile, ExtractedFields
from services.embedding_store import InMemoryEmbeddingStore

SAMPLE_JD = """
Senior Python Developer

Requirements:
- 5+ years of experience with Python
- Django is required
- Experience with PostgreSQL and Redis is a must have

Nice to have:
- Kubernetes is a plus

Education:
- Bachelor's degree in Computer Science required

We work in fintech.
"""

SCENARIO_JD = (
    "5+ years required experience in Python, Django required. "
    "Bachelor's degree required in Computer Science."
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: loads the real sentence-transformers model (slow)"
    )


def make_record(
    embedding: list[float],
    skills: list[str] | None = None,
    experience: list[str] | None = None,
    education: list[str] | None = None,
    certifications: list[str] | None = None,
) -> dict:
    """Raw store record in the JSON store layout."""
    return {
        "embedding": embedding,
        "extracted_fields": {
            "skills": skills or [],
            "experience": experience or [],
            "education": education or [],
            "certifications": certifications or [],
        },
    }


def make_profile(candidate_id: str = "cand-1", embedding: list[float] | None = None, **fields) -> CandidateProfile:
    return CandidateProfile(
        candidate_id=candidate_id,
        embedding=embedding if embedding is not None else [1.0, 0.0, 0.0],
        extracted_fields=ExtractedFields(**fields),
    )


@pytest.fixture
def store() -> InMemoryEmbeddingStore:
    """Store with one job and three candidates of decreasing fit."""
    return InMemoryEmbeddingStore(
        jobs={"job-1": [1.0, 0.0, 0.0]},
        candidates={
            "strong": make_record(
                [1.0, 0.0, 0.0],
                skills=["Python", "Django", "AWS"],
                experience=["Senior Python Developer, 6 years"],
                education=["BS Computer Science"],
            ),
            "partial": make_record(
                [0.6, 0.8, 0.0],
                skills=["Python"],
                experience=["Data Analyst"],
                education=["BA Economics"],
            ),
            "weak": make_record(
                [0.0, 1.0, 0.0],
                skills=["Photoshop"],
                experience=["Barista"],
                education=[],
            ),
        },
    )
