"""Service orchestrators."""

from .chat_service import ChatService
from .embedding_service import EmbeddingService
from .ingestion_service import IngestionService
from .search_service import SearchService

__all__ = [
    "ChatService",
    "EmbeddingService",
    "IngestionService",
    "SearchService",
]
