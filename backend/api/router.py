import asyncio
import logging

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import (
    get_embedding_store,
    get_match_weights,
    get_sentence_encoder,
    require_caller,
)
from config import settings
from models.requests import (
    JobIngestRequest,
    MatchRequest,
    ParseRequirementsRequest,
    ResumeIngestRequest,
    SemanticMatchRequest,
)
from models.responses import (
    CandidateIngestResponse,
    JobIngestResponse,
    MatchResponse,
    SemanticMatchResponse,
)
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_requirements import JobRequirements
from services import matching_engine, resume_processor
from services.embedding_store import EmbeddingStore
from services.errors import InvalidArgumentError
from services.matching_engine import MatchWeights
from services.requirement_extractor import parse_job_requirements
from services.similarity import SentenceEncoder

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _check_description_length(job_description: str) -> None:
    if len(job_description) > settings.max_job_description_chars:
        raise InvalidArgumentError(
            f"Job description too long (max {settings.max_job_description_chars} chars)"
        )


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "embedding_store": "json" if settings.embedding_store_path else "memory",
    }


@router.post("/match", response_model=MatchResponse)
@limiter.limit(settings.rate_limit)
async def match(
    request: Request,
    body: MatchRequest,
    caller: str = Depends(require_caller),
    store: EmbeddingStore = Depends(get_embedding_store),
    weights: MatchWeights = Depends(get_match_weights),
):
    _check_description_length(body.job_description)
    return await matching_engine.match_candidates_to_job(
        body, store, weights=weights, max_concurrency=settings.match_concurrency
    )


@router.post("/match/semantic", response_model=SemanticMatchResponse)
async def match_semantic(
    body: SemanticMatchRequest,
    caller: str = Depends(require_caller),
    store: EmbeddingStore = Depends(get_embedding_store),
):
    results = await matching_engine.semantic_match(
        body.job_id,
        store,
        candidate_ids=body.candidate_ids,
        max_concurrency=settings.match_concurrency,
    )
    return SemanticMatchResponse(results=results, total_candidates=len(results))


@router.post("/requirements/parse", response_model=JobRequirements)
async def parse_requirements(
    body: ParseRequirementsRequest,
    caller: str = Depends(require_caller),
):
    _check_description_length(body.job_description)
    return parse_job_requirements(body.job_description)


@router.post("/candidates/{candidate_id}/resume", response_model=CandidateIngestResponse)
async def ingest_resume(
    candidate_id: str,
    body: ResumeIngestRequest,
    caller: str = Depends(require_caller),
    store: EmbeddingStore = Depends(get_embedding_store),
    encoder: SentenceEncoder = Depends(get_sentence_encoder),
):
    processed = resume_processor.preprocess_resume_text(body.resume_text)
    fields = processed.extracted_fields
    logger.info(
        "Processed resume for %s: skills=%d experience=%d education=%d",
        candidate_id, len(fields.skills), len(fields.experience), len(fields.education),
    )

    embedding = await asyncio.to_thread(encoder.encode, processed.processed_text)
    await store.put_candidate(CandidateProfile(
        candidate_id=candidate_id,
        embedding=embedding,
        extracted_fields=fields,
        processed_text=processed.processed_text,
    ))
    return CandidateIngestResponse(
        candidate_id=candidate_id,
        embedding_dimensions=len(embedding),
        extracted_fields=fields,
    )


@router.post("/jobs/{job_id}/embedding", response_model=JobIngestResponse)
async def ingest_job(
    job_id: str,
    body: JobIngestRequest,
    caller: str = Depends(require_caller),
    store: EmbeddingStore = Depends(get_embedding_store),
    encoder: SentenceEncoder = Depends(get_sentence_encoder),
):
    _check_description_length(body.job_description)
    embedding = await asyncio.to_thread(encoder.encode, body.job_description)
    await store.put_job_embedding(job_id, embedding)
    logger.info("Stored job embedding for %s (%d dims)", job_id, len(embedding))
    return JobIngestResponse(
        job_id=job_id,
        embedding_dimensions=len(embedding),
        job_requirements=parse_job_requirements(body.job_description),
    )
