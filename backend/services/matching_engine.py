"""Candidate-to-job matching engine.

Flow per request:
    job_description ─ parse_job_requirements() → JobRequirements
    job_id          ─ store.get_job_embedding() → job vector (absent: not-found)
    candidate_ids   ─ store.get_candidate_embeddings() → profiles (bounded fan-out)
      for each complete profile:
        compute_skills_match() / score_experience() / score_education()
        cosine_similarity(job vector, candidate vector)
        weighted sum → MatchScore
    rank_matches() → results sorted by overall_score, descending

The scoring itself is pure and synchronous; only the store reads are awaited.
"""

import logging

from pydantic import BaseModel

from models.requests import MatchRequest
from models.responses import MatchResponse
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_requirements import JobRequirements
from models.schemas.match_score import MatchBreakdown, MatchScore, SemanticMatch
from services.education_scorer import determine_education_level, score_education
from services.embedding_store import DEFAULT_FETCH_CONCURRENCY, EmbeddingStore
from services.errors import InternalError, InvalidArgumentError, MatchingError, NotFoundError
from services.experience_scorer import determine_experience_level, score_experience
from services.requirement_extractor import parse_job_requirements
from services.similarity import cosine_similarity
from services.skill_matcher import compute_skills_match, find_additional_strengths

logger = logging.getLogger(__name__)


class MatchWeights(BaseModel):
    """Weights of the overall score and of the skills sub-score."""
    skills: float = 0.4
    experience: float = 0.25
    education: float = 0.15
    semantic: float = 0.2
    required_skills: float = 0.7
    preferred_skills: float = 0.3

    @classmethod
    def from_settings(cls, settings) -> "MatchWeights":
        return cls(
            skills=settings.weight_skills,
            experience=settings.weight_experience,
            education=settings.weight_education,
            semantic=settings.weight_semantic,
            required_skills=settings.weight_required_skills,
            preferred_skills=settings.weight_preferred_skills,
        )


DEFAULT_WEIGHTS = MatchWeights()


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


def score_candidate(
    profile: CandidateProfile,
    job_embedding: list[float],
    requirements: JobRequirements,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> MatchScore:
    """Score one complete candidate profile against a job.

    Raises DimensionMismatchError if the embeddings differ in length.
    """
    fields = profile.extracted_fields
    if fields is None:
        raise InternalError(f"Candidate {profile.candidate_id} has no extracted fields")

    # Negative cosine is reported as 0 so every component stays in [0, 1]
    semantic_score = max(0.0, cosine_similarity(job_embedding, profile.embedding))

    skills = compute_skills_match(
        fields.skills,
        requirements,
        required_weight=weights.required_skills,
        preferred_weight=weights.preferred_skills,
    )
    experience_score = score_experience(fields.experience, requirements)
    education_score = score_education(fields.education, requirements)

    overall = (
        skills.score * weights.skills
        + experience_score * weights.experience
        + education_score * weights.education
        + semantic_score * weights.semantic
    )

    return MatchScore(
        candidate_id=profile.candidate_id,
        overall_score=_clamp01(overall),
        skills_score=skills.score,
        experience_score=experience_score,
        education_score=education_score,
        semantic_score=semantic_score,
        breakdown=MatchBreakdown(
            required_skills_matched=skills.required_matched,
            preferred_skills_matched=skills.preferred_matched,
            missing_required_skills=skills.missing,
            experience_level=determine_experience_level(fields.experience),
            education_level=determine_education_level(fields.education),
            additional_strengths=find_additional_strengths(
                fields.skills, fields.certifications, requirements
            ),
        ),
    )


def rank_matches(scores: list[MatchScore]) -> list[MatchScore]:
    """Sort by overall_score descending; ties keep their input order."""
    return sorted(scores, key=lambda s: s.overall_score, reverse=True)


def validate_request(request: MatchRequest) -> None:
    if not request.job_id.strip() or not request.job_description.strip():
        raise InvalidArgumentError("job_id and job_description are required.")


async def _fetch_job_embedding(store: EmbeddingStore, job_id: str) -> list[float]:
    embedding = await store.get_job_embedding(job_id)
    if not embedding:
        raise NotFoundError(f"Job description embedding not found for job_id: {job_id}")
    return embedding


async def match_candidates_to_job(
    request: MatchRequest,
    store: EmbeddingStore,
    weights: MatchWeights = DEFAULT_WEIGHTS,
    max_concurrency: int = DEFAULT_FETCH_CONCURRENCY,
) -> MatchResponse:
    """Score and rank candidates for a job.

    Request-level problems (blank fields, unknown job, store outage,
    dimension mismatch) fail the call. Candidates that are missing from the
    store or lack an embedding/extracted fields are skipped with a warning.
    """
    validate_request(request)

    try:
        requirements = parse_job_requirements(request.job_description)
        logger.info(
            "Parsed job %s: required=%s preferred=%s level=%s",
            request.job_id,
            requirements.required_skills,
            requirements.preferred_skills,
            requirements.experience.level.value,
        )

        job_embedding = await _fetch_job_embedding(store, request.job_id)
        profiles = await store.get_candidate_embeddings(
            request.candidate_ids, max_concurrency=max_concurrency
        )

        scores: list[MatchScore] = []
        for profile in profiles:
            if not profile.is_complete:
                logger.warning("Incomplete candidate data for %s, skipping", profile.candidate_id)
                continue
            scores.append(score_candidate(profile, job_embedding, requirements, weights))

    except MatchingError:
        raise
    except Exception as e:
        logger.exception("Matching engine error for job %s", request.job_id)
        raise InternalError("Matching engine error") from e

    results = rank_matches(scores)
    logger.info("Matched job %s: scored=%d fetched=%d", request.job_id, len(results), len(profiles))
    return MatchResponse(
        results=results,
        job_requirements=requirements,
        total_candidates=len(results),
    )


async def semantic_match(
    job_id: str,
    store: EmbeddingStore,
    candidate_ids: list[str] | None = None,
    max_concurrency: int = DEFAULT_FETCH_CONCURRENCY,
) -> list[SemanticMatch]:
    """Rank candidates by embedding cosine similarity alone."""
    if not job_id.strip():
        raise InvalidArgumentError("job_id is required.")

    job_embedding = await _fetch_job_embedding(store, job_id)
    profiles = await store.get_candidate_embeddings(candidate_ids, max_concurrency=max_concurrency)

    results: list[SemanticMatch] = []
    for profile in profiles:
        if not profile.embedding:
            logger.warning("Candidate embedding vector is missing for %s, skipping", profile.candidate_id)
            continue
        results.append(SemanticMatch(
            candidate_id=profile.candidate_id,
            score=cosine_similarity(job_embedding, profile.embedding),
        ))

    return sorted(results, key=lambda r: r.score, reverse=True)
