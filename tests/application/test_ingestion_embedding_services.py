"""
Test suite for IngestionService and EmbeddingService.

Uses the in-memory store, a fake embedder and a fake clock.

System role: Verification of upload and embedding orchestration
"""

import asyncio

import pytest

from lecturelens.application.services import EmbeddingService, IngestionService
from lecturelens.boundary.storage import InMemorySessionStore
from lecturelens.configs.embedding import EmbeddingSettings
from lecturelens.core.exceptions import EmbeddingInProgressError, SessionNotFoundError
from lecturelens.core.ingestion import IngestionPipeline, RawFile
from lecturelens.core.ingestion.rate_limiter import FixedDelayRateLimiter


def _srt(text: str) -> bytes:
    return f"1\n00:00:01,000 --> 00:00:02,000\n{text}\n".encode()


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def pipeline() -> IngestionPipeline:
    return IngestionPipeline()


@pytest.fixture
def embedding_service(pipeline, store, fake_embedder, fake_clock) -> EmbeddingService:
    return EmbeddingService(
        pipeline=pipeline,
        store=store,
        embed_fn=fake_embedder,
        settings=EmbeddingSettings(batch_size=5),
        rate_limiter=FixedDelayRateLimiter(clock=fake_clock),
    )


class TestIngestionService:
    """Test upload orchestration."""

    @pytest.mark.asyncio
    async def test_upload_creates_session(self, pipeline, store) -> None:
        service = IngestionService(pipeline=pipeline, store=store)

        session_id, result = await service.upload([
            RawFile(content=_srt("Welcome"), path="Course/Ch1/a.srt"),
            RawFile(content=_srt("Second"), path="Course/Ch1/b.srt"),
        ])

        assert store.has_session(session_id)
        assert [d.id for d in store.get_documents(session_id)] == [d.id for d in result.documents]
        assert len(result.documents) == 2

    @pytest.mark.asyncio
    async def test_upload_without_documents_still_creates_session(self, pipeline, store) -> None:
        service = IngestionService(pipeline=pipeline, store=store)

        session_id, result = await service.upload([RawFile(content=b"x", path="notes.txt")])

        assert store.has_session(session_id)
        assert result.documents == []

    @pytest.mark.asyncio
    async def test_each_upload_gets_new_session(self, pipeline, store) -> None:
        service = IngestionService(pipeline=pipeline, store=store)

        first, _ = await service.upload([])
        second, _ = await service.upload([])

        assert first != second


class TestEmbeddingService:
    """Test embedding orchestration and the single-writer rule."""

    @pytest.mark.asyncio
    async def test_embed_persists_records(self, store, make_document, embedding_service) -> None:
        store.create_session("s1", [make_document(doc_id="A"), make_document(doc_id="B")])

        result = await embedding_service.embed("s1")

        assert result.generated == 2
        assert [r.id for r in store.get_records("s1")] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_embed_resumes_from_stored_records(
        self, store, make_document, make_record, fake_embedder, embedding_service
    ) -> None:
        store.create_session("s1", [make_document(doc_id="A"), make_document(doc_id="B", content="beta")])
        store.replace_records("s1", [make_record(record_id="A", embedding=[1.0, 1.0, 1.0])])

        result = await embedding_service.embed("s1")

        assert fake_embedder.embedded_texts == ["beta"]
        assert [r.id for r in store.get_records("s1")] == ["A", "B"]
        assert result.skipped_documents == 1

    @pytest.mark.asyncio
    async def test_unknown_session(self, embedding_service) -> None:
        with pytest.raises(SessionNotFoundError):
            await embedding_service.embed("missing")

    @pytest.mark.asyncio
    async def test_concurrent_run_is_rejected(self, store, make_document, pipeline) -> None:
        """Should refuse a second run while the first is still embedding."""
        store.create_session("s1", [make_document(doc_id="A")])
        started = asyncio.Event()
        release = asyncio.Event()

        async def slow_embed(text, task_type):
            started.set()
            await release.wait()
            return [1.0, 0.0, 0.0]

        service = EmbeddingService(
            pipeline=pipeline,
            store=store,
            embed_fn=slow_embed,
            rate_limiter=FixedDelayRateLimiter(item_delay=0, batch_delay=0),
        )

        first = asyncio.create_task(service.embed("s1"))
        await started.wait()

        assert service.is_running("s1")
        with pytest.raises(EmbeddingInProgressError):
            await service.embed("s1")

        release.set()
        result = await first

        assert result.generated == 1
        assert not service.is_running("s1")

    @pytest.mark.asyncio
    async def test_forget_drops_idle_lock(self, store, make_document, embedding_service) -> None:
        store.create_session("s1", [make_document(doc_id="A")])
        await embedding_service.embed("s1")
        assert "s1" in embedding_service._locks

        embedding_service.forget("s1")
        embedding_service.forget("never-embedded")

        assert embedding_service._locks == {}

    @pytest.mark.asyncio
    async def test_forget_keeps_lock_while_running(self, store, make_document, pipeline) -> None:
        """Should keep the single-writer lock for a run still in flight."""
        store.create_session("s1", [make_document(doc_id="A")])
        started = asyncio.Event()
        release = asyncio.Event()

        async def slow_embed(text, task_type):
            started.set()
            await release.wait()
            return [1.0, 0.0, 0.0]

        service = EmbeddingService(
            pipeline=pipeline,
            store=store,
            embed_fn=slow_embed,
            rate_limiter=FixedDelayRateLimiter(item_delay=0, batch_delay=0),
        )

        first = asyncio.create_task(service.embed("s1"))
        await started.wait()

        service.forget("s1")

        assert service.is_running("s1")
        with pytest.raises(EmbeddingInProgressError):
            await service.embed("s1")

        release.set()
        await first
