"""
Embedding run schemas.

Dependencies: pydantic
System role: Embedding API contracts
"""

from pydantic import Field

from lecturelens.models.common import CamelModel


class EmbeddingFailureResponse(CamelModel):
    """A chunk that could not be embedded in this run."""

    document_id: str
    chunk_id: str
    error_type: str
    message: str


class EmbeddingResponse(CamelModel):
    """Response schema for an embedding run."""

    success: bool = True
    embeddings_generated: int = Field(description="Records created in this run")
    total_embeddings: int = Field(description="Records stored for the session")
    skipped_documents: int = Field(default=0, description="Documents already fully embedded")
    session_id: str
    failures: list[EmbeddingFailureResponse] = Field(default_factory=list)
