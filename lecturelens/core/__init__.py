"""
Core business logic module.

Contains the RAG pipeline (ingestion, retrieval, answer generation) and the
exception hierarchy. All business rules and domain-specific logic reside here.
"""

from lecturelens.core.exceptions import (
    LectureLensException,
    ValidationError,
    InvalidInputError,
    DimensionMismatchError,
    SessionNotFoundError,
    DocumentProcessingError,
    ParsingError,
    EmbeddingCallError,
    RateLimitError,
    EmbeddingInProgressError,
    GenerationError,
)

__all__ = [
    "LectureLensException",
    "ValidationError",
    "InvalidInputError",
    "DimensionMismatchError",
    "SessionNotFoundError",
    "DocumentProcessingError",
    "ParsingError",
    "EmbeddingCallError",
    "RateLimitError",
    "EmbeddingInProgressError",
    "GenerationError",
]
