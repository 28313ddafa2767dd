"""Keyed embedding store: job vectors and candidate profiles.

The matching engine only reads from a store; the ingestion endpoints write
to it. Two implementations:
    InMemoryEmbeddingStore   dicts, for tests and ephemeral runs
    JsonFileEmbeddingStore   a single JSON document on disk

Stored JSON layout:
    {
      "jobs": {"<job_id>": [0.1, ...]},
      "candidates": {
        "<candidate_id>": {"embedding": [...], "extracted_fields": {...}, "processed_text": "..."}
      }
    }
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from models.schemas.candidate_profile import CandidateProfile
from services.errors import EmbeddingStoreUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_FETCH_CONCURRENCY = 8


class EmbeddingStore(ABC):
    """Read/write interface over job and candidate embeddings."""

    @abstractmethod
    async def get_job_embedding(self, job_id: str) -> list[float] | None:
        """Job vector, or None when the job has no embedding."""

    @abstractmethod
    async def list_candidate_ids(self) -> list[str]:
        """All candidate ids, in store order."""

    @abstractmethod
    async def get_candidate(self, candidate_id: str) -> CandidateProfile | None:
        """Candidate profile, or None when absent or unreadable."""

    @abstractmethod
    async def put_job_embedding(self, job_id: str, embedding: list[float]) -> None:
        """Create or replace a job vector."""

    @abstractmethod
    async def put_candidate(self, profile: CandidateProfile) -> None:
        """Create or replace a candidate profile."""

    async def get_candidate_embeddings(
        self,
        candidate_ids: Sequence[str] | None = None,
        max_concurrency: int = DEFAULT_FETCH_CONCURRENCY,
    ) -> list[CandidateProfile]:
        """Fetch candidate profiles concurrently, in request order.

        With no ids, every stored candidate is fetched. Unknown ids are
        logged and left out. Store outages propagate to the caller.
        """
        ids = list(dict.fromkeys(candidate_ids)) if candidate_ids else await self.list_candidate_ids()
        sem = asyncio.Semaphore(max(1, max_concurrency))

        async def fetch(candidate_id: str) -> CandidateProfile | None:
            async with sem:
                return await self.get_candidate(candidate_id)

        tasks = [asyncio.ensure_future(fetch(cid)) for cid in ids]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        profiles: list[CandidateProfile] = []
        for candidate_id, profile in zip(ids, results):
            if profile is None:
                logger.warning("No embedding record for candidate %s, skipping", candidate_id)
                continue
            profiles.append(profile)
        return profiles


def _to_profile(candidate_id: str, record: Any) -> CandidateProfile | None:
    if not isinstance(record, dict):
        logger.warning("Malformed record for candidate %s, skipping", candidate_id)
        return None
    try:
        return CandidateProfile(candidate_id=candidate_id, **{
            k: v for k, v in record.items() if k != "candidate_id"
        })
    except ValidationError as e:
        logger.warning("Invalid record for candidate %s: %s", candidate_id, e)
        return None


class InMemoryEmbeddingStore(EmbeddingStore):
    def __init__(
        self,
        jobs: dict[str, list[float]] | None = None,
        candidates: dict[str, dict] | None = None,
    ) -> None:
        self._jobs: dict[str, list[float]] = dict(jobs or {})
        self._candidates: dict[str, dict] = dict(candidates or {})

    async def get_job_embedding(self, job_id: str) -> list[float] | None:
        embedding = self._jobs.get(job_id)
        return list(embedding) if embedding else None

    async def list_candidate_ids(self) -> list[str]:
        return list(self._candidates)

    async def get_candidate(self, candidate_id: str) -> CandidateProfile | None:
        record = self._candidates.get(candidate_id)
        if record is None:
            return None
        return _to_profile(candidate_id, record)

    async def put_job_embedding(self, job_id: str, embedding: list[float]) -> None:
        self._jobs[job_id] = list(embedding)

    async def put_candidate(self, profile: CandidateProfile) -> None:
        self._candidates[profile.candidate_id] = profile.model_dump(exclude={"candidate_id"})


class JsonFileEmbeddingStore(InMemoryEmbeddingStore):
    """Store persisted as one JSON document, loaded on first access."""

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self.path = Path(path)
        self._loaded = False
        self._lock = asyncio.Lock()

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise EmbeddingStoreUnavailableError(f"Cannot read embedding store {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise EmbeddingStoreUnavailableError(f"Embedding store {self.path} is not a JSON object")
        return data

    def _write(self, jobs: dict, candidates: dict) -> None:
        payload = {"jobs": jobs, "candidates": candidates}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload), encoding="utf-8")
        except OSError as e:
            raise EmbeddingStoreUnavailableError(f"Cannot write embedding store {self.path}: {e}") from e

    async def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        async with self._lock:
            if self._loaded:
                return
            data = await asyncio.to_thread(self._read)
            self._jobs = dict(data.get("jobs") or {})
            self._candidates = dict(data.get("candidates") or {})
            self._loaded = True
            logger.info(
                "Embedding store loaded from %s: jobs=%d candidates=%d",
                self.path, len(self._jobs), len(self._candidates),
            )

    async def get_job_embedding(self, job_id: str) -> list[float] | None:
        await self._ensure_loaded()
        return await super().get_job_embedding(job_id)

    async def list_candidate_ids(self) -> list[str]:
        await self._ensure_loaded()
        return await super().list_candidate_ids()

    async def get_candidate(self, candidate_id: str) -> CandidateProfile | None:
        await self._ensure_loaded()
        return await super().get_candidate(candidate_id)

    async def put_job_embedding(self, job_id: str, embedding: list[float]) -> None:
        await self._ensure_loaded()
        async with self._lock:
            jobs = {**self._jobs, job_id: list(embedding)}
            await asyncio.to_thread(self._write, jobs, self._candidates)
            self._jobs = jobs

    async def put_candidate(self, profile: CandidateProfile) -> None:
        await self._ensure_loaded()
        async with self._lock:
            record = profile.model_dump(exclude={"candidate_id"})
            candidates = {**self._candidates, profile.candidate_id: record}
            await asyncio.to_thread(self._write, self._jobs, candidates)
            self._candidates = candidates


def create_store(path: str = "") -> EmbeddingStore:
    """JSON-backed store when a path is configured, in-memory otherwise."""
    if path:
        return JsonFileEmbeddingStore(path)
    return InMemoryEmbeddingStore()
