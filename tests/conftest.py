"""
Shared test fixtures and configuration for entire test suite.

Provides: fake clock, fake embedding provider, document/record factories
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

from collections.abc import Callable

import pytest

from lecturelens.core.exceptions import RateLimitError
from lecturelens.core.ingestion.models import (
    ChunkMetadata,
    Document,
    DocumentMetadata,
    EmbeddingRecord,
    TaskType,
)


class FakeClock:
    """Clock that records sleeps instead of waiting."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeEmbedder:
    """
    Deterministic async embed function.

    Vectors come from `vectors` when the text is mapped there, otherwise
    from the text length. Texts in `fail_on` raise, and the first
    `rate_limit_times` calls raise RateLimitError.
    """

    def __init__(
        self,
        dimension: int = 3,
        vectors: dict[str, list[float]] | None = None,
        fail_on: set[str] | None = None,
        rate_limit_times: int = 0,
    ) -> None:
        self.dimension = dimension
        self.vectors = vectors or {}
        self.fail_on = fail_on or set()
        self.rate_limit_times = rate_limit_times
        self.calls: list[tuple[str, TaskType]] = []

    async def __call__(self, text: str, task_type: TaskType) -> list[float]:
        self.calls.append((text, task_type))
        if self.rate_limit_times > 0:
            self.rate_limit_times -= 1
            raise RateLimitError("429 RESOURCE_EXHAUSTED")
        if text in self.fail_on:
            raise RuntimeError(f"provider exploded on {text!r}")
        if text in self.vectors:
            return list(self.vectors[text])
        return [float(len(text))] + [1.0] * (self.dimension - 1)

    @property
    def embedded_texts(self) -> list[str]:
        return [text for text, _ in self.calls]


@pytest.fixture
def fake_clock() -> FakeClock:
    """Provide a clock that never really sleeps."""
    return FakeClock()


@pytest.fixture
def fake_embedder() -> FakeEmbedder:
    """Provide a 3-dimensional deterministic embedder."""
    return FakeEmbedder()


@pytest.fixture
def make_document() -> Callable[..., Document]:
    """Factory for documents with course/chapter metadata."""

    def _make(
        doc_id: str = "NodeCourse_Intro_lesson1_srt",
        content: str = "Hello world",
        course: str = "NodeCourse",
        chapter: str = "Intro",
        filename: str = "lesson1.srt",
    ) -> Document:
        return Document(
            id=doc_id,
            content=content,
            metadata=DocumentMetadata(
                course=course,
                chapter=chapter,
                filename=filename,
                original_path=f"{course}/{chapter}/{filename}",
                type=".srt",
            ),
        )

    return _make


@pytest.fixture
def make_record() -> Callable[..., EmbeddingRecord]:
    """Factory for embedding records."""

    def _make(
        record_id: str = "rec",
        embedding: list[float] | None = None,
        content: str = "passage",
        course: str = "NodeCourse",
        chapter: str = "Intro",
        filename: str = "lesson1.srt",
    ) -> EmbeddingRecord:
        return EmbeddingRecord(
            id=record_id,
            content=content,
            embedding=embedding if embedding is not None else [1.0, 0.0, 0.0],
            metadata=ChunkMetadata(
                course=course,
                chapter=chapter,
                filename=filename,
                original_path=f"{course}/{chapter}/{filename}",
                type=".srt",
                is_chunk=False,
                chunk_index=0,
                total_chunks=1,
            ),
        )

    return _make
