"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chat_service,
    get_embedding_service,
    get_ingestion_service,
    get_search_service,
    get_service_cache,
    get_session_store_dependency,
)

__all__ = [
    "get_chat_service",
    "get_embedding_service",
    "get_ingestion_service",
    "get_search_service",
    "get_service_cache",
    "get_session_store_dependency",
]
