"""
In-process session store.

Dependencies: lecturelens.boundary.storage.session_store
System role: Session store for tests and single-process development
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from lecturelens.boundary.storage.session_store import SessionStore
from lecturelens.core.exceptions import SessionNotFoundError, ValidationError
from lecturelens.core.ingestion.models import Document, EmbeddingRecord


@dataclass
class _SessionData:
    documents: list[Document] = field(default_factory=list)
    records: list[EmbeddingRecord] = field(default_factory=list)


class InMemorySessionStore(SessionStore):
    """Dict-backed session store. Lost on restart."""

    def __init__(self) -> None:
        self._sessions: dict[str, _SessionData] = {}

    def create_session(self, session_id: str, documents: Sequence[Document]) -> None:
        if not session_id:
            raise ValidationError("Session id must not be empty", field="session_id")
        if session_id in self._sessions:
            raise ValidationError(f"Session already exists: {session_id}", field="session_id")
        self._sessions[session_id] = _SessionData(documents=list(documents))

    def has_session(self, session_id: str) -> bool:
        return session_id in self._sessions

    def get_documents(self, session_id: str) -> list[Document]:
        return list(self._get(session_id).documents)

    def get_records(self, session_id: str) -> list[EmbeddingRecord]:
        return list(self._get(session_id).records)

    def replace_records(self, session_id: str, records: Sequence[EmbeddingRecord]) -> None:
        self._get(session_id).records = list(records)

    def delete_session(self, session_id: str) -> None:
        self._get(session_id)
        del self._sessions[session_id]

    def list_sessions(self) -> list[str]:
        return sorted(self._sessions)

    def _get(self, session_id: str) -> _SessionData:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None
