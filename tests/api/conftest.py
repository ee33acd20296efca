"""
API test fixtures.

Wires the real services over an in-memory store, a fake embedder and a
mocked answer generator into the app via dependency_overrides.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from lecturelens.api.deps import (
    get_chat_service,
    get_embedding_service,
    get_ingestion_service,
    get_search_service,
    get_session_store_dependency,
)
from lecturelens.api.main import create_app
from lecturelens.application.services import (
    ChatService,
    EmbeddingService,
    IngestionService,
    SearchService,
)
from lecturelens.boundary.storage import InMemorySessionStore
from lecturelens.core.ingestion import IngestionPipeline
from lecturelens.core.ingestion.rate_limiter import FixedDelayRateLimiter
from lecturelens.core.retrieval import QueryEngine


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def mock_generator() -> MagicMock:
    generator = MagicMock()
    generator.generate = AsyncMock(return_value="Generated answer")
    return generator


@pytest.fixture
def services(store, fake_embedder, fake_clock, mock_generator) -> dict:
    """Build real services around test doubles."""
    pipeline = IngestionPipeline()
    query_engine = QueryEngine(fake_embedder)
    return {
        "ingestion": IngestionService(pipeline=pipeline, store=store),
        "embedding": EmbeddingService(
            pipeline=pipeline,
            store=store,
            embed_fn=fake_embedder,
            rate_limiter=FixedDelayRateLimiter(clock=fake_clock),
        ),
        "search": SearchService(query_engine=query_engine, store=store),
        "chat": ChatService(query_engine=query_engine, generator=mock_generator, store=store),
    }


@pytest.fixture
def client(store, services) -> TestClient:
    """Provide TestClient for the assembled app with overridden dependencies."""
    app = create_app()
    app.dependency_overrides[get_session_store_dependency] = lambda: store
    app.dependency_overrides[get_ingestion_service] = lambda: services["ingestion"]
    app.dependency_overrides[get_embedding_service] = lambda: services["embedding"]
    app.dependency_overrides[get_search_service] = lambda: services["search"]
    app.dependency_overrides[get_chat_service] = lambda: services["chat"]
    return TestClient(app)


@pytest.fixture
def embedded_session(store, make_document, make_record) -> str:
    """Create a session with two embedded passages and return its id."""
    store.create_session("s1", [make_document(doc_id="a"), make_document(doc_id="b")])
    store.replace_records("s1", [
        make_record(record_id="a", content="Event loop", embedding=[1.0, 0.0, 0.0]),
        make_record(record_id="b", content="Closures", embedding=[0.0, 1.0, 0.0]),
    ])
    return "s1"
