"""Shared dependencies for API routes."""

from functools import lru_cache

from fastapi import Header

from config import settings
from services.embedding_store import EmbeddingStore, create_store
from services.errors import UnauthenticatedError
from services.matching_engine import MatchWeights
from services.similarity import SentenceEncoder, get_encoder


@lru_cache(maxsize=1)
def get_embedding_store() -> EmbeddingStore:
    return create_store(settings.embedding_store_path)


def get_match_weights() -> MatchWeights:
    return MatchWeights.from_settings(settings)


def get_sentence_encoder() -> SentenceEncoder:
    return get_encoder()


def require_caller(authorization: str | None = Header(default=None)) -> str:
    """Resolve the caller from an ``Authorization: Bearer <token>`` header."""
    scheme, _, token = (authorization or "").partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise UnauthenticatedError("Must be authenticated.")
    if settings.api_tokens and token not in settings.api_tokens:
        raise UnauthenticatedError("Invalid credentials.")
    return token
