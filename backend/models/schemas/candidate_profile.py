"""Candidate records as read from the embedding store."""

from pydantic import BaseModel


class ExtractedFields(BaseModel):
    """Fields pulled out of a resume by the resume processor."""
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    skills: list[str] = []
    experience: list[str] = []  # free-text lines
    education: list[str] = []
    certifications: list[str] = []
    summary: str | None = None


class CandidateProfile(BaseModel):
    candidate_id: str
    embedding: list[float] = []  # empty when the store has no vector yet
    extracted_fields: ExtractedFields | None = None
    processed_text: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.embedding) and self.extracted_fields is not None


class ProcessedResume(BaseModel):
    processed_text: str = ""
    extracted_fields: ExtractedFields = ExtractedFields()
