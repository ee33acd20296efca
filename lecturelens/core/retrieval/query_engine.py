"""
Query-time retrieval.

Embeds a user query, searches a session's records and assembles the
grounding context.

Dependencies: lecturelens.core.retrieval, lecturelens.core.ingestion
System role: RAG query orchestration
"""

import logging
from collections.abc import Sequence

from lecturelens.core.exceptions import ValidationError
from lecturelens.core.ingestion.models import EmbeddingRecord, TaskType
from lecturelens.core.ingestion.tasks import EmbedFn
from lecturelens.core.retrieval.context_assembler import ContextAssembler
from lecturelens.core.retrieval.models import RetrievalContext
from lecturelens.core.retrieval.similarity import SimilaritySearchEngine

logger = logging.getLogger(__name__)


class QueryEngine:
    """Answer-grounding retrieval for one query."""

    def __init__(
        self,
        embed_fn: EmbedFn,
        search_engine: SimilaritySearchEngine | None = None,
        assembler: ContextAssembler | None = None,
    ) -> None:
        """
        Initialize query engine.

        Args:
            embed_fn: Async embedding provider
            search_engine: Similarity search (default top-k 5 if None)
            assembler: Context assembler (default delimiter if None)
        """
        self._embed_fn = embed_fn
        self._search_engine = search_engine or SimilaritySearchEngine()
        self._assembler = assembler or ContextAssembler()

    async def query(
        self,
        text: str,
        session_records: Sequence[EmbeddingRecord],
        top_k: int | None = None,
    ) -> RetrievalContext:
        """
        Retrieve grounding context for a query.

        Returns an empty context without calling the provider when the
        session has no embeddings yet, so callers can fall back to an
        ungrounded answer.

        Args:
            text: User query
            session_records: Snapshot of the session's embedding records
            top_k: Maximum number of passages

        Returns:
            RetrievalContext: Context block and citations (empty if nothing indexed)

        Raises:
            ValidationError: When the query is blank
            DimensionMismatchError: When query and records disagree on dimension
            EmbeddingCallError: When the provider fails to embed the query
        """
        if not text or not text.strip():
            raise ValidationError("Query must not be empty", field="query")

        records = list(session_records)
        if not records:
            logger.info(f"{__name__}:query - No embeddings available, returning empty context")
            return RetrievalContext()

        query_embedding = await self._embed_fn(text, TaskType.RETRIEVAL_QUERY)
        results = self._search_engine.search(query_embedding, records, top_k)

        logger.info(f"{__name__}:query - Found {len(results)} relevant passages")
        return self._assembler.assemble(results)
