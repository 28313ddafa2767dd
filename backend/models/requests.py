from pydantic import BaseModel, Field


class MatchRequest(BaseModel):
    # Blank values are rejected by the matching engine as invalid-argument
    job_id: str = Field("", max_length=256, description="Identifier of the job embedding")
    job_description: str = Field("", description="Job description text")
    candidate_ids: list[str] | None = Field(None, description="Restrict matching to these candidates")


class SemanticMatchRequest(BaseModel):
    job_id: str = Field("", max_length=256)
    candidate_ids: list[str] | None = None


class ParseRequirementsRequest(BaseModel):
    job_description: str = Field(..., description="Job description text")


class ResumeIngestRequest(BaseModel):
    resume_text: str = Field(..., min_length=1, max_length=50000, description="Plain text resume content")


class JobIngestRequest(BaseModel):
    job_description: str = Field(..., min_length=1, description="Job description text")
