"""
Chunk and embedding record models.

A DocumentChunk is a bounded slice of a Document's content. An EmbeddingRecord
is a chunk together with its embedding vector, the sole artifact consumed by
similarity search.

Dependencies: pydantic
System role: Data structures for the embedding stage of ingestion
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .document import DocumentMetadata


class TaskType(str, Enum):
    """Provider-side hint distinguishing indexing from querying."""

    RETRIEVAL_DOCUMENT = "RETRIEVAL_DOCUMENT"
    RETRIEVAL_QUERY = "RETRIEVAL_QUERY"


class ChunkMetadata(DocumentMetadata):
    """Parent document metadata plus chunk position."""

    is_chunk: bool = Field(alias="isChunk", description="True when the parent was split")
    chunk_index: int = Field(alias="chunkIndex", ge=0)
    total_chunks: int = Field(alias="totalChunks", ge=1)


class DocumentChunk(BaseModel):
    """Embeddable unit produced by the chunker."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="{documentId}_chunk_{index} when split, else the document id")
    document_id: str = Field(description="Parent document id")
    content: str
    metadata: ChunkMetadata


class EmbeddingRecord(BaseModel):
    """Embedded chunk. Immutable once written."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Chunk id, primary key within a session")
    content: str = Field(description="Text that was embedded")
    metadata: ChunkMetadata
    embedding: list[float] = Field(min_length=1, description="Embedding vector")

    @property
    def dimension(self) -> int:
        return len(self.embedding)
