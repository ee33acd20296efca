"""
Fixed-size text chunking task.

Splits oversized documents into contiguous, non-overlapping slices that fit
the embedding payload limit. No semantic boundary awareness: splits may fall
mid-sentence.

Dependencies: lecturelens.core.ingestion.models
System role: Second stage of subtitle ingestion pipeline
"""

from lecturelens.core.ingestion.models import ChunkMetadata, Document, DocumentChunk


def chunk_text(text: str, max_size: int) -> list[str]:
    """
    Split text into consecutive slices of at most max_size characters.

    Pure function: concatenating the result in order reproduces the input.

    Args:
        text: Text to split
        max_size: Maximum slice length in characters

    Returns:
        list[str]: [text] when it fits, otherwise full-size slices plus a remainder

    Raises:
        ValueError: When max_size is smaller than 1
    """
    if max_size < 1:
        raise ValueError(f"max_size must be at least 1, got {max_size}")

    if len(text) <= max_size:
        return [text]

    return [text[i:i + max_size] for i in range(0, len(text), max_size)]


def chunk_id(document_id: str, index: int, total: int) -> str:
    """Chunk identifier: the document id itself unless the document was split."""
    if total > 1:
        return f"{document_id}_chunk_{index}"
    return document_id


class ChunkingTask:
    """Split Documents into embeddable chunks."""

    def __init__(self, max_chunk_size: int = 25000) -> None:
        """
        Initialize chunking task.

        Args:
            max_chunk_size: Maximum chunk size in characters

        Raises:
            ValueError: When max_chunk_size is smaller than 1
        """
        if max_chunk_size < 1:
            raise ValueError(f"max_chunk_size must be at least 1, got {max_chunk_size}")
        self._max_chunk_size = max_chunk_size

    @property
    def max_chunk_size(self) -> int:
        return self._max_chunk_size

    def split(self, document: Document) -> list[DocumentChunk]:
        """
        Split a document into chunks with derived ids and metadata.

        Args:
            document: Normalized document

        Returns:
            list[DocumentChunk]: Chunks in original order
        """
        pieces = chunk_text(document.content, self._max_chunk_size)
        total = len(pieces)
        base_metadata = document.metadata.model_dump()

        return [
            DocumentChunk(
                id=chunk_id(document.id, index, total),
                document_id=document.id,
                content=piece,
                metadata=ChunkMetadata(
                    **base_metadata,
                    is_chunk=total > 1,
                    chunk_index=index,
                    total_chunks=total,
                ),
            )
            for index, piece in enumerate(pieces)
        ]
