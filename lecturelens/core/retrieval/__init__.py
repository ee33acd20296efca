"""
Retrieval over a session's embedding records.

Exports: SimilaritySearchEngine, cosine_similarity, ContextAssembler, QueryEngine
"""

from .context_assembler import ContextAssembler
from .models import Citation, RetrievalContext, ScoredRecord
from .query_engine import QueryEngine
from .similarity import SimilaritySearchEngine, cosine_similarity

__all__ = [
    "SimilaritySearchEngine",
    "cosine_similarity",
    "ContextAssembler",
    "QueryEngine",
    "Citation",
    "RetrievalContext",
    "ScoredRecord",
]
