"""
Task modules for the subtitle ingestion pipeline.

Exports: SubtitleParsingTask, ChunkingTask, EmbeddingBatchTask
"""

from .chunking_task import ChunkingTask, chunk_text
from .embedding_task import EmbedFn, EmbeddingBatchTask
from .parsing_task import SubtitleParsingTask, normalize_subtitles

__all__ = [
    "SubtitleParsingTask",
    "normalize_subtitles",
    "ChunkingTask",
    "chunk_text",
    "EmbeddingBatchTask",
    "EmbedFn",
]
