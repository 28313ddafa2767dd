"""Embedding similarity and the sentence-embedding encoder."""

import logging
from collections.abc import Sequence

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine

from config import settings
from services.errors import DimensionMismatchError, EncoderUnavailableError

logger = logging.getLogger(__name__)

# Lazy-loaded sentence-transformers model (loaded on first use)
# TechWolf/JobBERT-v2 by default: trained on job postings, 1024-dim embeddings
_sbert_model = None


def _get_sbert_model():
    """Load the sentence-transformers model lazily on first call."""
    global _sbert_model
    if _sbert_model is None:
        try:
            from sentence_transformers import SentenceTransformer

            _sbert_model = SentenceTransformer(settings.embedding_model)
            logger.info("Embedding model %s loaded successfully", settings.embedding_model)
        except Exception as e:
            logger.warning("Failed to load embedding model %s: %s", settings.embedding_model, e)
    return _sbert_model


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """Cosine of the angle between two embeddings, in [-1, 1].

    Raises DimensionMismatchError when the lengths differ. Returns 0.0 when
    either vector has zero magnitude.
    """
    if len(vec_a) != len(vec_b):
        raise DimensionMismatchError(len(vec_a), len(vec_b))

    a = np.asarray(vec_a, dtype=np.float64).reshape(1, -1)
    b = np.asarray(vec_b, dtype=np.float64).reshape(1, -1)
    if a.size == 0 or not np.any(a) or not np.any(b):
        return 0.0

    score = float(sklearn_cosine(a, b)[0][0])
    return max(-1.0, min(1.0, score))


class SentenceEncoder:
    """Turns text into an embedding vector with the shared sentence model."""

    def __init__(self, model=None) -> None:
        self._model = model

    def encode(self, text: str) -> list[float]:
        model = self._model or _get_sbert_model()
        if model is None:
            raise EncoderUnavailableError("Embedding model is not available")
        embedding = model.encode([text], convert_to_numpy=True)[0]
        return [float(x) for x in embedding]


def get_encoder() -> SentenceEncoder:
    return SentenceEncoder()
