"""
Models for the subtitle ingestion pipeline.

Exports: RawFile, Document, DocumentMetadata, ChunkMetadata, DocumentChunk,
EmbeddingRecord, TaskType, EmbeddingFailure, EmbeddingRunResult, IngestResult
"""

from .document import Document, DocumentMetadata, RawFile
from .embedding_record import ChunkMetadata, DocumentChunk, EmbeddingRecord, TaskType
from .pipeline_result import EmbeddingFailure, EmbeddingRunResult, IngestResult

__all__ = [
    "RawFile",
    "Document",
    "DocumentMetadata",
    "ChunkMetadata",
    "DocumentChunk",
    "EmbeddingRecord",
    "TaskType",
    "EmbeddingFailure",
    "EmbeddingRunResult",
    "IngestResult",
]
