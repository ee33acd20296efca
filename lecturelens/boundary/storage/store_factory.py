"""
Session store factory for selecting between JSON files (dev) and memory (tests).

Depends on STORAGE_BACKEND environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: lecturelens.boundary.storage, lecturelens.configs
System role: Session store instantiation and selection
"""

import logging

from lecturelens.boundary.storage.json_store import JsonSessionStore
from lecturelens.boundary.storage.memory_store import InMemorySessionStore
from lecturelens.boundary.storage.session_store import SessionStore
from lecturelens.configs.storage import StorageSettings

logger = logging.getLogger(__name__)


def get_session_store(settings: StorageSettings | None = None) -> SessionStore:
    """
    Factory function to get session store based on configuration.

    Args:
        settings: Storage settings (loaded from environment if None)

    Returns:
        SessionStore: JsonSessionStore or InMemorySessionStore

    Raises:
        ValueError: If STORAGE_BACKEND is invalid
    """
    settings = settings or StorageSettings()
    backend = settings.backend.lower()

    if backend == "json":
        logger.info(f"{__name__}:get_session_store - Using JSON store at {settings.data_dir}")
        return JsonSessionStore(data_dir=settings.data_dir)
    if backend == "memory":
        logger.info(f"{__name__}:get_session_store - Using in-memory store")
        return InMemorySessionStore()

    raise ValueError(f"Invalid STORAGE_BACKEND: {settings.backend}. Use 'json' or 'memory'.")
