"""
Test suite for the embeddings endpoint.

Tests POST /sessions/{id}/embeddings including resumption and status mapping.
"""

from unittest.mock import AsyncMock, MagicMock

from lecturelens.api.deps import get_embedding_service
from lecturelens.core.exceptions import EmbeddingInProgressError


class TestGenerateEmbeddings:
    """Test embedding runs over HTTP."""

    def test_should_embed_session(self, client, store, make_document) -> None:
        store.create_session("s1", [make_document(doc_id="A"), make_document(doc_id="B")])

        response = client.post("/api/v1/sessions/s1/embeddings")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["embeddingsGenerated"] == 2
        assert body["totalEmbeddings"] == 2
        assert body["sessionId"] == "s1"
        assert body["failures"] == []

    def test_second_call_resumes(self, client, store, make_document) -> None:
        store.create_session("s1", [make_document(doc_id="A")])
        client.post("/api/v1/sessions/s1/embeddings")

        response = client.post("/api/v1/sessions/s1/embeddings")

        assert response.json()["embeddingsGenerated"] == 0
        assert response.json()["totalEmbeddings"] == 1

    def test_should_report_failures(self, client, store, make_document, fake_embedder) -> None:
        fake_embedder.fail_on = {"bad content"}
        store.create_session("s1", [
            make_document(doc_id="A"),
            make_document(doc_id="B", content="bad content"),
        ])

        body = client.post("/api/v1/sessions/s1/embeddings").json()

        assert body["embeddingsGenerated"] == 1
        assert body["failures"][0]["chunkId"] == "B"
        assert body["failures"][0]["errorType"] == "RuntimeError"

    def test_unknown_session(self, client) -> None:
        response = client.post("/api/v1/sessions/missing/embeddings")

        assert response.status_code == 404

    def test_run_in_progress_returns_conflict(self, client) -> None:
        busy = MagicMock()
        busy.embed = AsyncMock(side_effect=EmbeddingInProgressError("s1"))
        client.app.dependency_overrides[get_embedding_service] = lambda: busy

        response = client.post("/api/v1/sessions/s1/embeddings")

        assert response.status_code == 409
