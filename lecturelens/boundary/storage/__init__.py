"""
Session storage boundary layer.

Keeps each session's two collections (documents, embedding records) with
read/replace-whole-collection semantics.

Dependencies: pydantic
System role: Session artifact persistence
"""

from lecturelens.boundary.storage.json_store import JsonSessionStore
from lecturelens.boundary.storage.memory_store import InMemorySessionStore
from lecturelens.boundary.storage.session_store import SessionStore
from lecturelens.boundary.storage.store_factory import get_session_store

__all__ = [
    "SessionStore",
    "InMemorySessionStore",
    "JsonSessionStore",
    "get_session_store",
]
