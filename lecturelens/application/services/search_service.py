"""
Search service orchestrator.

Dependencies: lecturelens.core.retrieval, lecturelens.boundary.storage
System role: Semantic search use case orchestration
"""

import logging

from lecturelens.boundary.storage import SessionStore
from lecturelens.core.retrieval import QueryEngine, RetrievalContext

logger = logging.getLogger(__name__)


class SearchService:
    """Semantic search over one session's embeddings."""

    def __init__(self, query_engine: QueryEngine, store: SessionStore) -> None:
        self.query_engine = query_engine
        self.store = store

    async def search(self, session_id: str, query: str, limit: int | None = None) -> RetrievalContext:
        """
        Rank the session's passages against a query.

        Args:
            session_id: Session to search
            query: Free-text query
            limit: Maximum number of results (engine default if None)

        Returns:
            RetrievalContext: Ranked results with context block and citations

        Raises:
            SessionNotFoundError: If the session does not exist
            ValidationError: If the query is blank or limit < 1
            DimensionMismatchError: If query and stored vectors disagree
            EmbeddingCallError: If the provider fails to embed the query
        """
        records = self.store.get_records(session_id)
        logger.info(
            f"{__name__}:search - Session {session_id}: searching {len(records)} records"
        )
        return await self.query_engine.query(query, records, top_k=limit)
