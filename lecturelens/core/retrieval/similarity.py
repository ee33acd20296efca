"""
Brute-force cosine similarity search.

Ranks every record of a session against a query embedding with a linear
scan. Read-only: works on a snapshot of the record collection and never
mutates it, so concurrent queries never block each other.

Dependencies: numpy, lecturelens.core.exceptions
System role: RAG retrieval business logic
"""

import logging
from collections.abc import Sequence

import numpy as np

from lecturelens.core.exceptions import DimensionMismatchError, InvalidInputError
from lecturelens.core.ingestion.models import EmbeddingRecord
from lecturelens.core.retrieval.models import ScoredRecord

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 5


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine similarity between two vectors.

    Args:
        a: First vector
        b: Second vector

    Returns:
        float: dot(a, b) / (|a| * |b|), or 0.0 when either norm is zero

    Raises:
        DimensionMismatchError: When the vectors have different lengths
    """
    vec_a = np.asarray(a, dtype=np.float64)
    vec_b = np.asarray(b, dtype=np.float64)
    if vec_a.shape != vec_b.shape:
        raise DimensionMismatchError(vec_a.size, vec_b.size)

    norm_a = float(np.linalg.norm(vec_a))
    norm_b = float(np.linalg.norm(vec_b))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    return float(np.dot(vec_a, vec_b) / (norm_a * norm_b))


class SimilaritySearchEngine:
    """Rank embedding records by cosine similarity to a query."""

    def __init__(self, default_top_k: int = DEFAULT_TOP_K) -> None:
        """
        Initialize search engine.

        Args:
            default_top_k: Results returned when search() gets no top_k

        Raises:
            InvalidInputError: When default_top_k is smaller than 1
        """
        if default_top_k < 1:
            raise InvalidInputError("default_top_k must be at least 1", field="top_k")
        self._default_top_k = default_top_k

    def search(
        self,
        query_embedding: Sequence[float],
        records: Sequence[EmbeddingRecord],
        top_k: int | None = None,
    ) -> list[ScoredRecord]:
        """
        Return the top_k records most similar to the query.

        Ties keep collection order, so repeated queries over unchanged
        records yield identical output.

        Args:
            query_embedding: Query vector
            records: Session embedding records
            top_k: Maximum number of results (default_top_k if None)

        Returns:
            list[ScoredRecord]: Results sorted by descending score

        Raises:
            InvalidInputError: Empty query vector or top_k < 1
            DimensionMismatchError: When any record's length differs from the query's
        """
        k = self._default_top_k if top_k is None else top_k
        if k < 1:
            raise InvalidInputError(f"top_k must be at least 1, got {k}", field="top_k")

        query = np.asarray(query_embedding, dtype=np.float64)
        if query.ndim != 1 or query.size == 0:
            raise InvalidInputError("Query embedding must be a non-empty vector", field="embedding")

        snapshot = list(records)
        if not snapshot:
            return []

        for record in snapshot:
            if record.dimension != query.size:
                raise DimensionMismatchError(query.size, record.dimension, record_id=record.id)

        matrix = np.asarray([record.embedding for record in snapshot], dtype=np.float64)
        dots = matrix @ query
        norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)

        # Zero-norm vectors score 0 instead of dividing by zero
        scores = np.zeros(len(snapshot), dtype=np.float64)
        nonzero = norms != 0.0
        scores[nonzero] = dots[nonzero] / norms[nonzero]

        order = np.argsort(-scores, kind="stable")[:k]

        logger.debug(
            f"{__name__}:search - Ranked {len(snapshot)} records, returning {len(order)}"
        )

        return [
            ScoredRecord(
                id=snapshot[i].id,
                content=snapshot[i].content,
                metadata=snapshot[i].metadata,
                score=float(scores[i]),
            )
            for i in order
        ]
