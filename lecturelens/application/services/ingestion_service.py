"""
Ingestion service orchestrator.

Turns an upload into a new session: normalizes subtitle files into
documents and persists them.

Dependencies: lecturelens.core.ingestion, lecturelens.boundary.storage
System role: Upload use case orchestration
"""

import logging
import uuid
from collections.abc import Sequence

from lecturelens.boundary.storage import SessionStore
from lecturelens.core.ingestion import IngestionPipeline, IngestResult, RawFile

logger = logging.getLogger(__name__)


class IngestionService:
    """Create sessions from uploaded subtitle files."""

    def __init__(self, pipeline: IngestionPipeline, store: SessionStore) -> None:
        """
        Initialize ingestion service.

        Args:
            pipeline: Subtitle ingestion pipeline
            store: Session store for the resulting documents
        """
        self.pipeline = pipeline
        self.store = store

    async def upload(self, raw_files: Sequence[RawFile]) -> tuple[str, IngestResult]:
        """
        Ingest an upload into a fresh session.

        The session is created even when no documents were produced, so the
        caller always gets a usable session id back.

        Args:
            raw_files: Uploaded files with relative paths

        Returns:
            tuple[str, IngestResult]: New session id and ingestion outcome
        """
        result = self.pipeline.ingest(raw_files)
        session_id = uuid.uuid4().hex
        self.store.create_session(session_id, result.documents)

        logger.info(
            f"{__name__}:upload - Created session {session_id} with "
            f"{len(result.documents)} documents from {len(raw_files)} files"
        )
        return session_id, result
