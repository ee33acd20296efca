"""
Subtitle ingestion pipeline orchestrator.

Coordinates parsing and document construction for an upload, and hands
documents to the embedding batch manager.

Dependencies: All task modules, configs
System role: Pipeline orchestration (coordinates only)
"""

import logging
import re
from collections.abc import Sequence
from pathlib import PurePosixPath

from lecturelens.configs.embedding import EmbeddingSettings
from lecturelens.configs.ingestion import IngestionSettings

from .models import (
    Document,
    DocumentMetadata,
    EmbeddingRecord,
    EmbeddingRunResult,
    IngestResult,
    RawFile,
)
from .rate_limiter import FixedDelayRateLimiter
from .tasks import ChunkingTask, EmbedFn, EmbeddingBatchTask, SubtitleParsingTask

logger = logging.getLogger(__name__)

UNKNOWN_COURSE = "Unknown Course"
UNKNOWN_CHAPTER = "Unknown Chapter"

_ID_UNSAFE = re.compile(r"[^a-zA-Z0-9_]")


def split_course_path(relative_path: str) -> tuple[str, str, str]:
    """
    Derive (course, chapter, filename) from a relative upload path.

    Course is the first directory, chapter the second. Missing levels fall
    back to "Unknown Course" / "Unknown Chapter".

    Args:
        relative_path: Path such as "NodeCourse/01-Intro/lesson1.srt"

    Returns:
        tuple[str, str, str]: course, chapter, filename
    """
    parts = [part for part in relative_path.replace("\\", "/").split("/") if part]
    if not parts:
        return UNKNOWN_COURSE, UNKNOWN_CHAPTER, relative_path
    filename = parts[-1]
    directories = parts[:-1]
    course = directories[0] if len(directories) >= 1 else UNKNOWN_COURSE
    chapter = directories[1] if len(directories) >= 2 else UNKNOWN_CHAPTER
    return course, chapter, filename


def make_document_id(course: str, chapter: str, filename: str) -> str:
    """Build an id-safe key from course, chapter and filename."""
    return _ID_UNSAFE.sub("_", f"{course}_{chapter}_{filename}")


class IngestionPipeline:
    """Orchestrate ingestion: raw files -> documents -> embedding records."""

    def __init__(
        self,
        settings: IngestionSettings | None = None,
        parsing_task: SubtitleParsingTask | None = None,
        chunking_task: ChunkingTask | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration.

        Args:
            settings: Ingestion settings (uses defaults if None)
            parsing_task: Subtitle normalizer (built from settings if None)
            chunking_task: Chunker (built from settings if None)
        """
        self._settings = settings or IngestionSettings()
        self._parsing_task = parsing_task or SubtitleParsingTask(
            supported_extensions=self._settings.supported_extensions,
        )
        self._chunking_task = chunking_task or ChunkingTask(
            max_chunk_size=self._settings.max_chunk_size,
        )

    @property
    def chunking_task(self) -> ChunkingTask:
        return self._chunking_task

    def ingest(self, raw_files: Sequence[RawFile]) -> IngestResult:
        """
        Normalize uploaded subtitle files into documents.

        Non-subtitle files are skipped. Files that normalize to empty text
        are counted as processed but produce no document.

        Args:
            raw_files: Uploaded files with their relative paths

        Returns:
            IngestResult: Documents in upload order plus course structure
        """
        result = IngestResult()
        used_ids: set[str] = set()

        for raw_file in raw_files:
            if not self._parsing_task.is_supported(raw_file.path):
                logger.info(f"{__name__}:ingest - Skipping non-subtitle file: {raw_file.path}")
                result.files_skipped += 1
                continue

            result.files_processed += 1
            content = self._parsing_task.normalize(raw_file.content, raw_file.path)
            if not content.strip():
                logger.warning(f"{__name__}:ingest - No text extracted from {raw_file.path}")
                continue

            course, chapter, filename = split_course_path(raw_file.path)
            document_id = self._unique_id(make_document_id(course, chapter, filename), used_ids)

            result.documents.append(
                Document(
                    id=document_id,
                    content=content,
                    metadata=DocumentMetadata(
                        course=course,
                        chapter=chapter,
                        filename=filename,
                        original_path=raw_file.path,
                        type=PurePosixPath(filename).suffix.lower(),
                    ),
                )
            )
            result.course_structure.setdefault(course, {}).setdefault(chapter, []).append(filename)

        logger.info(
            f"{__name__}:ingest - Processed {result.files_processed} files, "
            f"generated {len(result.documents)} documents"
        )
        return result

    async def embed_session(
        self,
        documents: Sequence[Document],
        existing_records: Sequence[EmbeddingRecord],
        embed_fn: EmbedFn,
        settings: EmbeddingSettings | None = None,
        rate_limiter: FixedDelayRateLimiter | None = None,
    ) -> EmbeddingRunResult:
        """
        Embed a session's documents, resuming after existing records.

        Args:
            documents: Session documents
            existing_records: Records persisted by earlier runs
            embed_fn: Async embedding provider
            settings: Batching, pacing and backoff settings
            rate_limiter: Pacing policy override

        Returns:
            EmbeddingRunResult: Full updated record collection and statistics
        """
        task = EmbeddingBatchTask(
            embed_fn=embed_fn,
            chunking_task=self._chunking_task,
            settings=settings,
            rate_limiter=rate_limiter,
        )
        return await task.run(documents, existing_records)

    @staticmethod
    def _unique_id(candidate: str, used_ids: set[str]) -> str:
        document_id = candidate
        suffix = 2
        while document_id in used_ids:
            document_id = f"{candidate}_{suffix}"
            suffix += 1
        used_ids.add(document_id)
        return document_id
