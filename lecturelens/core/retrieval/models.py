"""
Retrieval result schemas.

Dependencies: pydantic, lecturelens.core.ingestion.models
System role: Type definitions for search results and assembled context
"""

from pydantic import BaseModel, Field

from lecturelens.core.ingestion.models import ChunkMetadata


class ScoredRecord(BaseModel):
    """Single result from similarity search."""

    id: str = Field(description="Record (chunk) identifier")
    content: str = Field(description="Chunk text content")
    metadata: ChunkMetadata
    score: float = Field(description="Cosine similarity to the query (-1.0 to 1.0)")


class Citation(BaseModel):
    """Source attribution for one retrieved passage."""

    course: str
    chapter: str
    filename: str
    score: float


class RetrievalContext(BaseModel):
    """Context block and citations handed to answer generation."""

    context_block: str = Field(default="", description="Delimited passages in rank order")
    citations: list[Citation] = Field(default_factory=list)
    results: list[ScoredRecord] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.results
