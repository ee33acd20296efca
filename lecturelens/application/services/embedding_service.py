"""
Embedding service orchestrator.

Runs the embedding batch manager for one session and persists the full
record collection. Only one run per session may be in flight.

Dependencies: asyncio, lecturelens.core.ingestion, lecturelens.boundary.storage
System role: Embedding use case orchestration
"""

import asyncio
import logging

from lecturelens.boundary.storage import SessionStore
from lecturelens.configs.embedding import EmbeddingSettings
from lecturelens.core.exceptions import EmbeddingInProgressError, SessionNotFoundError
from lecturelens.core.ingestion import EmbeddingRunResult, IngestionPipeline
from lecturelens.core.ingestion.rate_limiter import FixedDelayRateLimiter
from lecturelens.core.ingestion.tasks import EmbedFn

logger = logging.getLogger(__name__)


class EmbeddingService:
    """Embed a session's documents with a single writer per session."""

    def __init__(
        self,
        pipeline: IngestionPipeline,
        store: SessionStore,
        embed_fn: EmbedFn,
        settings: EmbeddingSettings | None = None,
        rate_limiter: FixedDelayRateLimiter | None = None,
    ) -> None:
        """
        Initialize embedding service.

        Args:
            pipeline: Ingestion pipeline (owns the chunker)
            store: Session store
            embed_fn: Async embedding provider
            settings: Batching, pacing and backoff settings
            rate_limiter: Pacing policy override
        """
        self.pipeline = pipeline
        self.store = store
        self.embed_fn = embed_fn
        self.settings = settings or EmbeddingSettings()
        self.rate_limiter = rate_limiter
        self._locks: dict[str, asyncio.Lock] = {}

    def is_running(self, session_id: str) -> bool:
        lock = self._locks.get(session_id)
        return lock is not None and lock.locked()

    def forget(self, session_id: str) -> None:
        """Drop the session's lock once the session is gone. No-op while a run holds it."""
        lock = self._locks.get(session_id)
        if lock is not None and not lock.locked():
            del self._locks[session_id]

    async def embed(self, session_id: str) -> EmbeddingRunResult:
        """
        Embed every document chunk the session does not have yet.

        Args:
            session_id: Session to embed

        Returns:
            EmbeddingRunResult: Full record collection and run statistics

        Raises:
            SessionNotFoundError: If the session does not exist
            EmbeddingInProgressError: If a run for this session is already active
            DimensionMismatchError: If stored records have mixed dimensions
        """
        if not self.store.has_session(session_id):
            raise SessionNotFoundError(session_id)

        lock = self._locks.setdefault(session_id, asyncio.Lock())
        if lock.locked():
            raise EmbeddingInProgressError(session_id)

        async with lock:
            documents = self.store.get_documents(session_id)
            existing = self.store.get_records(session_id)
            logger.info(
                f"{__name__}:embed - Session {session_id}: {len(documents)} documents, "
                f"{len(existing)} existing records"
            )

            result = await self.pipeline.embed_session(
                documents,
                existing,
                self.embed_fn,
                settings=self.settings,
                rate_limiter=self.rate_limiter,
            )
            self.store.replace_records(session_id, result.records)

        logger.info(
            f"{__name__}:embed - Session {session_id}: generated {result.generated}, "
            f"total {len(result.records)}, failures {len(result.failures)}"
        )
        return result
