"""API routers."""

from .chat import router as chat_router
from .embeddings import router as embeddings_router
from .health import router as health_router
from .search import router as search_router
from .sessions import router as sessions_router

__all__ = [
    "chat_router",
    "embeddings_router",
    "health_router",
    "search_router",
    "sessions_router",
]
