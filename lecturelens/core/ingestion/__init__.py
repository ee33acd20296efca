"""
Subtitle ingestion pipeline.

Normalizes uploaded subtitle files into documents and embeds them in
resumable, rate-limited batches.

Dependencies: pydantic, tenacity
System role: Ingestion pipeline entrypoint
"""

from .entrypoint import IngestionPipeline
from .models import (
    Document,
    DocumentMetadata,
    EmbeddingRecord,
    EmbeddingRunResult,
    IngestResult,
    RawFile,
    TaskType,
)

__all__ = [
    "IngestionPipeline",
    "Document",
    "DocumentMetadata",
    "EmbeddingRecord",
    "EmbeddingRunResult",
    "IngestResult",
    "RawFile",
    "TaskType",
]
