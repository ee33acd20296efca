"""
Test suite for the search endpoint.

Tests POST /sessions/{id}/search ranking, payload shape and status mapping.
"""

from unittest.mock import AsyncMock

from lecturelens.api.deps import get_search_service
from lecturelens.application.services import SearchService
from lecturelens.core.exceptions import EmbeddingCallError
from lecturelens.core.retrieval import QueryEngine


class TestSearch:
    """Test semantic search over HTTP."""

    def test_should_return_ranked_results(self, client, fake_embedder, embedded_session) -> None:
        fake_embedder.vectors = {"event loop": [1.0, 0.2, 0.0]}

        response = client.post(
            f"/api/v1/sessions/{embedded_session}/search",
            json={"query": "event loop", "limit": 1},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["query"] == "event loop"
        assert [r["id"] for r in body["results"]] == ["a"]
        result = body["results"][0]
        assert result["content"] == "Event loop"
        assert result["metadata"]["course"] == "NodeCourse"
        assert result["metadata"]["originalPath"] == "NodeCourse/Intro/lesson1.srt"
        assert 0.9 < result["score"] <= 1.0

    def test_default_limit(self, client, embedded_session) -> None:
        response = client.post(
            f"/api/v1/sessions/{embedded_session}/search", json={"query": "anything"},
        )

        assert len(response.json()["results"]) == 2

    def test_unknown_session(self, client) -> None:
        response = client.post("/api/v1/sessions/missing/search", json={"query": "x"})

        assert response.status_code == 404

    def test_blank_query(self, client, embedded_session) -> None:
        response = client.post(
            f"/api/v1/sessions/{embedded_session}/search", json={"query": "   "},
        )

        assert response.status_code == 422

    def test_invalid_limit(self, client, embedded_session) -> None:
        response = client.post(
            f"/api/v1/sessions/{embedded_session}/search", json={"query": "x", "limit": 0},
        )

        assert response.status_code == 422

    def test_dimension_mismatch_is_server_error(self, client, fake_embedder, embedded_session) -> None:
        fake_embedder.vectors = {"short": [1.0, 0.0]}

        response = client.post(
            f"/api/v1/sessions/{embedded_session}/search", json={"query": "short"},
        )

        assert response.status_code == 500
        assert "dimension" in response.json()["detail"].lower()

    def test_provider_failure(self, client, store, embedded_session) -> None:
        failing = AsyncMock(side_effect=EmbeddingCallError("provider down"))
        client.app.dependency_overrides[get_search_service] = lambda: SearchService(
            query_engine=QueryEngine(failing), store=store,
        )

        response = client.post(
            f"/api/v1/sessions/{embedded_session}/search", json={"query": "x"},
        )

        assert response.status_code == 502
