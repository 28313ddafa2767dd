from pydantic import BaseModel

from models.schemas.candidate_profile import ExtractedFields
from models.schemas.job_requirements import JobRequirements
from models.schemas.match_score import MatchScore, SemanticMatch


class MatchResponse(BaseModel):
    results: list[MatchScore] = []  # sorted by overall_score, descending
    job_requirements: JobRequirements = JobRequirements()
    total_candidates: int = 0  # scored candidates only


class SemanticMatchResponse(BaseModel):
    results: list[SemanticMatch] = []
    total_candidates: int = 0


class CandidateIngestResponse(BaseModel):
    candidate_id: str
    embedding_dimensions: int = 0
    extracted_fields: ExtractedFields = ExtractedFields()


class JobIngestResponse(BaseModel):
    job_id: str
    embedding_dimensions: int = 0
    job_requirements: JobRequirements = JobRequirements()


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail
