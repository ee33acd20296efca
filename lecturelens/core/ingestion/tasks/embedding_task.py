"""
Embedding batch manager.

Drives a session's documents through an external embedding function,
producing EmbeddingRecords. Survives partial completion (resumable at chunk
granularity) and external rate limits (fixed pacing plus backoff).

Dependencies: tenacity, lecturelens.core.ingestion, lecturelens.observability
System role: Third stage of subtitle ingestion pipeline
"""

import logging
from collections.abc import Awaitable, Callable, Sequence

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from lecturelens.configs.embedding import EmbeddingSettings
from lecturelens.core.exceptions import (
    DimensionMismatchError,
    EmbeddingCallError,
    RateLimitError,
)
from lecturelens.core.ingestion.models import (
    Document,
    DocumentChunk,
    EmbeddingFailure,
    EmbeddingRecord,
    EmbeddingRunResult,
    TaskType,
)
from lecturelens.core.ingestion.rate_limiter import FixedDelayRateLimiter
from lecturelens.core.ingestion.tasks.chunking_task import ChunkingTask
from lecturelens.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

EmbedFn = Callable[[str, TaskType], Awaitable[list[float]]]


def dedupe_records(records: Sequence[EmbeddingRecord]) -> list[EmbeddingRecord]:
    """
    Drop records whose id was already seen, keeping the first occurrence.

    Args:
        records: Records in collection order

    Returns:
        list[EmbeddingRecord]: Records with unique ids, order preserved
    """
    seen: set[str] = set()
    unique = []
    for record in records:
        if record.id in seen:
            logger.warning(f"{__name__}:dedupe_records - Dropping duplicate record {record.id}")
            continue
        seen.add(record.id)
        unique.append(record)
    return unique


def session_dimension(records: Sequence[EmbeddingRecord]) -> int | None:
    """
    Embedding dimensionality shared by all records.

    Args:
        records: Existing session records

    Returns:
        int | None: The common dimension, or None when there are no records

    Raises:
        DimensionMismatchError: When records disagree (malformed session state)
    """
    if not records:
        return None
    expected = records[0].dimension
    for record in records:
        if record.dimension != expected:
            raise DimensionMismatchError(expected, record.dimension, record_id=record.id)
    return expected


class EmbeddingBatchTask:
    """Embed documents chunk by chunk in paced, resumable batches."""

    def __init__(
        self,
        embed_fn: EmbedFn,
        chunking_task: ChunkingTask | None = None,
        settings: EmbeddingSettings | None = None,
        rate_limiter: FixedDelayRateLimiter | None = None,
    ) -> None:
        """
        Initialize batch manager.

        Args:
            embed_fn: Async embedding provider taking (text, task_type)
            chunking_task: Splitter for oversized documents (25,000 chars if None)
            settings: Batching and backoff settings (defaults if None)
            rate_limiter: Pacing policy (built from settings if None)
        """
        self._embed_fn = embed_fn
        self._chunking_task = chunking_task or ChunkingTask()
        self._settings = settings or EmbeddingSettings()
        self._rate_limiter = rate_limiter or FixedDelayRateLimiter(
            item_delay=self._settings.item_delay_seconds,
            batch_delay=self._settings.batch_delay_seconds,
        )

    async def run(
        self,
        documents: Sequence[Document],
        existing_records: Sequence[EmbeddingRecord] = (),
    ) -> EmbeddingRunResult:
        """
        Embed every chunk not already present in existing_records.

        Args:
            documents: Session documents in ingestion order
            existing_records: Records from previous runs

        Returns:
            EmbeddingRunResult: existing ++ new records, plus run statistics

        Raises:
            DimensionMismatchError: When existing records have mixed dimensions
        """
        existing = dedupe_records(existing_records)
        known_ids = {record.id for record in existing}
        dimension = session_dimension(existing)

        pending: list[tuple[Document, list[DocumentChunk]]] = []
        skipped = 0
        for document in documents:
            chunks = [c for c in self._chunking_task.split(document) if c.id not in known_ids]
            if chunks:
                pending.append((document, chunks))
            else:
                skipped += 1

        logger.info(
            f"{__name__}:run - {len(existing)} existing records, "
            f"{skipped} documents already embedded, {len(pending)} to process"
        )

        batch_size = self._settings.batch_size
        total_batches = (len(pending) + batch_size - 1) // batch_size
        new_records: list[EmbeddingRecord] = []
        failures: list[EmbeddingFailure] = []

        for start in range(0, len(pending), batch_size):
            batch = pending[start:start + batch_size]
            logger.info(
                f"{__name__}:run - Processing batch {start // batch_size + 1}/{total_batches}"
            )

            for document, chunks in batch:
                for chunk in chunks:
                    if chunk.id in known_ids:
                        logger.warning(f"{__name__}:run - Skipping duplicate chunk id {chunk.id}")
                        continue

                    try:
                        vector = await self._embed_with_backoff(chunk)
                        dimension = self._check_dimension(vector, dimension, chunk)
                    except Exception as e:
                        log_exception_with_context(
                            logger,
                            f"{__name__}:run - Failed to embed {chunk.id}",
                            e,
                            document_id=document.id,
                            chunk_id=chunk.id,
                        )
                        failures.append(
                            EmbeddingFailure(
                                document_id=document.id,
                                chunk_id=chunk.id,
                                error_type=type(e).__name__,
                                message=str(e),
                            )
                        )
                    else:
                        new_records.append(
                            EmbeddingRecord(
                                id=chunk.id,
                                content=chunk.content,
                                metadata=chunk.metadata,
                                embedding=vector,
                            )
                        )
                        known_ids.add(chunk.id)
                        log_with_context(
                            logger,
                            logging.INFO,
                            f"{__name__}:run - Embedded {chunk.id} "
                            f"(chunk {chunk.metadata.chunk_index + 1}/{chunk.metadata.total_chunks})",
                            document_id=document.id,
                            chunk_id=chunk.id,
                            embedding=vector,
                        )

                    await self._rate_limiter.after_item()

            await self._rate_limiter.after_batch()

        logger.info(
            f"{__name__}:run - Generated {len(new_records)} new records, "
            f"{len(failures)} failures, total {len(existing) + len(new_records)}"
        )

        return EmbeddingRunResult(
            records=existing + new_records,
            generated=len(new_records),
            skipped_documents=skipped,
            failures=failures,
        )

    async def _embed_with_backoff(self, chunk: DocumentChunk) -> list[float]:
        """Call the provider, retrying with exponential backoff on RateLimitError."""
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(RateLimitError),
            stop=stop_after_attempt(self._settings.max_attempts),
            wait=wait_exponential_jitter(
                initial=self._settings.backoff_initial_seconds,
                max=self._settings.backoff_max_seconds,
                jitter=self._settings.backoff_jitter_seconds,
            ),
            sleep=self._rate_limiter.clock.sleep,
            before_sleep=self._log_retry,
            reraise=True,
        )
        return await retrying(self._embed_fn, chunk.content, TaskType.RETRIEVAL_DOCUMENT)

    def _log_retry(self, retry_state: RetryCallState) -> None:
        logger.warning(
            f"{__name__}:_embed_with_backoff - Rate limited, retry "
            f"{retry_state.attempt_number}/{self._settings.max_attempts}"
        )

    @staticmethod
    def _check_dimension(
        vector: list[float],
        dimension: int | None,
        chunk: DocumentChunk,
    ) -> int:
        """Validate a returned vector against the session dimension and return it."""
        if not vector:
            raise EmbeddingCallError("Provider returned an empty embedding", chunk_id=chunk.id)
        if dimension is not None and len(vector) != dimension:
            raise EmbeddingCallError(
                f"Provider returned {len(vector)} dimensions, session uses {dimension}",
                chunk_id=chunk.id,
            )
        return len(vector)
