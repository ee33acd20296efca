"""
Local JSON persistence for session artifacts.

Stores each session as two flat JSON arrays in one directory:
documents_<session_id>.json and embeddings_<session_id>.json.
Field names follow the persisted layout (camelCase metadata).

Dependencies: json, pathlib, pydantic
System role: File-backed session store for local development
"""

import json
import logging
import os
import re
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from lecturelens.boundary.storage.session_store import SessionStore
from lecturelens.core.exceptions import SessionNotFoundError, ValidationError
from lecturelens.core.ingestion.models import Document, EmbeddingRecord

logger = logging.getLogger(__name__)

_SESSION_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

_documents_adapter = TypeAdapter(list[Document])
_records_adapter = TypeAdapter(list[EmbeddingRecord])


class JsonSessionStore(SessionStore):
    """Save session collections to local JSON files."""

    def __init__(self, data_dir: str) -> None:
        """
        Initialize store with its data directory.

        Args:
            data_dir: Directory path for JSON artifacts

        Creates directory if it does not exist.
        """
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)

    def create_session(self, session_id: str, documents: Sequence[Document]) -> None:
        if self.has_session(session_id):
            raise ValidationError(f"Session already exists: {session_id}", field="session_id")
        self._write(self._documents_path(session_id), _documents_adapter.dump_python(
            list(documents), mode="json", by_alias=True,
        ))
        logger.info(
            f"{__name__}:create_session - Saved {len(documents)} documents for {session_id}"
        )

    def has_session(self, session_id: str) -> bool:
        return self._documents_path(session_id).exists()

    def get_documents(self, session_id: str) -> list[Document]:
        path = self._documents_path(session_id)
        if not path.exists():
            raise SessionNotFoundError(session_id)
        return self._read(path, _documents_adapter)

    def get_records(self, session_id: str) -> list[EmbeddingRecord]:
        if not self.has_session(session_id):
            raise SessionNotFoundError(session_id)
        path = self._records_path(session_id)
        if not path.exists():
            return []
        return self._read(path, _records_adapter)

    def replace_records(self, session_id: str, records: Sequence[EmbeddingRecord]) -> None:
        if not self.has_session(session_id):
            raise SessionNotFoundError(session_id)
        self._write(self._records_path(session_id), _records_adapter.dump_python(
            list(records), mode="json", by_alias=True,
        ))
        logger.info(
            f"{__name__}:replace_records - Saved {len(records)} records for {session_id}"
        )

    def delete_session(self, session_id: str) -> None:
        if not self.has_session(session_id):
            raise SessionNotFoundError(session_id)
        for path in (self._records_path(session_id), self._documents_path(session_id)):
            path.unlink(missing_ok=True)
        logger.info(f"{__name__}:delete_session - Removed artifacts for {session_id}")

    def list_sessions(self) -> list[str]:
        prefix = "documents_"
        return sorted(
            path.stem[len(prefix):]
            for path in self._data_dir.glob(f"{prefix}*.json")
        )

    def _documents_path(self, session_id: str) -> Path:
        return self._data_dir / f"documents_{self._checked(session_id)}.json"

    def _records_path(self, session_id: str) -> Path:
        return self._data_dir / f"embeddings_{self._checked(session_id)}.json"

    @staticmethod
    def _checked(session_id: str) -> str:
        """Reject ids that could escape the data directory."""
        if not _SESSION_ID_PATTERN.match(session_id or ""):
            raise ValidationError(f"Invalid session id: {session_id!r}", field="session_id")
        return session_id

    @staticmethod
    def _read(path: Path, adapter: TypeAdapter) -> list:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return adapter.validate_python(json.load(f))
        except (json.JSONDecodeError, PydanticValidationError) as e:
            raise ValidationError(
                f"Corrupt session artifact {path.name}: {e}",
                details={"path": str(path)},
            ) from e

    def _write(self, path: Path, data: list[dict[str, Any]]) -> None:
        """Write JSON atomically: temp file in the same directory, then rename."""
        fd, tmp_name = tempfile.mkstemp(dir=self._data_dir, prefix=f".{path.stem}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
