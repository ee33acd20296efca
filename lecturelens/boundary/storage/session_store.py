"""
Session store interface.

A session is created on first ingest, updated on embed and read during
query. No automatic eviction; deletion is explicit.

Dependencies: lecturelens.core.ingestion.models
System role: Storage contract shared by all session store backends
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from lecturelens.core.ingestion.models import Document, EmbeddingRecord


class SessionStore(ABC):
    """Mapping from session id to its documents and embedding records."""

    @abstractmethod
    def create_session(self, session_id: str, documents: Sequence[Document]) -> None:
        """
        Create a session with its ingested documents and no embeddings.

        Args:
            session_id: New session identifier
            documents: Documents in ingestion order

        Raises:
            ValidationError: When the session id is invalid or already exists
        """

    @abstractmethod
    def has_session(self, session_id: str) -> bool:
        """Return True when the session exists."""

    @abstractmethod
    def get_documents(self, session_id: str) -> list[Document]:
        """
        Get a snapshot of the session's documents.

        Raises:
            SessionNotFoundError: When the session does not exist
        """

    @abstractmethod
    def get_records(self, session_id: str) -> list[EmbeddingRecord]:
        """
        Get a snapshot of the session's embedding records ([] before the first run).

        Raises:
            SessionNotFoundError: When the session does not exist
        """

    @abstractmethod
    def replace_records(self, session_id: str, records: Sequence[EmbeddingRecord]) -> None:
        """
        Replace the session's whole embedding record collection.

        Raises:
            SessionNotFoundError: When the session does not exist
        """

    @abstractmethod
    def delete_session(self, session_id: str) -> None:
        """
        Remove a session and both of its collections.

        Raises:
            SessionNotFoundError: When the session does not exist
        """

    @abstractmethod
    def list_sessions(self) -> list[str]:
        """Return known session ids, sorted."""
