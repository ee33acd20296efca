"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: lecturelens.configs, lecturelens.application, lecturelens.boundary
System role: DI container for service injection
"""

from lecturelens.application.services import (
    ChatService,
    EmbeddingService,
    IngestionService,
    SearchService,
)
from lecturelens.boundary.storage import SessionStore
from lecturelens.configs import Settings, get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._session_store = None
        self._pipeline = None
        self._embedding_provider = None
        self._query_engine = None
        self._answer_generator = None
        self._embedding_service = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def session_store(self) -> SessionStore:
        """Get cached session store."""
        if self._session_store is None:
            from lecturelens.boundary.storage import get_session_store
            self._session_store = get_session_store(self.settings.storage)
        return self._session_store

    @property
    def pipeline(self):
        """Get cached ingestion pipeline."""
        if self._pipeline is None:
            from lecturelens.core.ingestion import IngestionPipeline
            self._pipeline = IngestionPipeline(settings=self.settings.ingestion)
        return self._pipeline

    @property
    def embedding_provider(self):
        """Get cached Gemini embedding provider."""
        if self._embedding_provider is None:
            from lecturelens.boundary.embeddings import GeminiEmbeddingProvider
            self._embedding_provider = GeminiEmbeddingProvider(
                model=self.settings.embedding.model,
                output_dimensionality=self.settings.embedding.dimension,
            )
        return self._embedding_provider

    @property
    def query_engine(self):
        """Get cached query engine."""
        if self._query_engine is None:
            from lecturelens.core.retrieval import QueryEngine, SimilaritySearchEngine
            self._query_engine = QueryEngine(
                embed_fn=self.embedding_provider,
                search_engine=SimilaritySearchEngine(
                    default_top_k=self.settings.retrieval.default_top_k,
                ),
            )
        return self._query_engine

    @property
    def answer_generator(self):
        """Get cached answer generator."""
        if self._answer_generator is None:
            from lecturelens.core.agent import AnswerGenerator
            chat = self.settings.chat
            self._answer_generator = AnswerGenerator(
                model=chat.model,
                temperature=chat.temperature,
                max_output_tokens=chat.max_output_tokens,
            )
        return self._answer_generator

    @property
    def embedding_service(self) -> EmbeddingService:
        """Get cached embedding service (holds the per-session run locks)."""
        if self._embedding_service is None:
            self._embedding_service = EmbeddingService(
                pipeline=self.pipeline,
                store=self.session_store,
                embed_fn=self.embedding_provider,
                settings=self.settings.embedding,
            )
        return self._embedding_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._session_store = None
        self._pipeline = None
        self._embedding_provider = None
        self._query_engine = None
        self._answer_generator = None
        self._embedding_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_session_store_dependency() -> SessionStore:
    """
    Get session store instance.

    Returns:
        SessionStore: Backend selected by STORAGE_BACKEND
    """
    return get_service_cache().session_store


def get_ingestion_service() -> IngestionService:
    """
    Get ingestion service instance.

    Returns:
        IngestionService: Upload orchestration over the cached pipeline and store
    """
    cache = get_service_cache()
    return IngestionService(pipeline=cache.pipeline, store=cache.session_store)


def get_embedding_service() -> EmbeddingService:
    """
    Get embedding service instance.

    The instance is shared so concurrent requests see the same session locks.

    Returns:
        EmbeddingService: Cached embedding service
    """
    return get_service_cache().embedding_service


def get_search_service() -> SearchService:
    """
    Get search service instance.

    Returns:
        SearchService: Semantic search over the cached store
    """
    cache = get_service_cache()
    return SearchService(query_engine=cache.query_engine, store=cache.session_store)


def get_chat_service() -> ChatService:
    """
    Get chat service instance with answer generator.

    Returns:
        ChatService: Chat service grounded on chat_top_k passages
    """
    cache = get_service_cache()
    return ChatService(
        query_engine=cache.query_engine,
        generator=cache.answer_generator,
        store=cache.session_store,
        top_k=cache.settings.retrieval.chat_top_k,
    )
