"""
Pipeline result models for subtitle ingestion and embedding runs.

Dependencies: pydantic
System role: Return types for IngestionPipeline operations
"""

from pydantic import BaseModel, Field

from .document import Document
from .embedding_record import EmbeddingRecord


class IngestResult(BaseModel):
    """Outcome of normalizing one upload of raw subtitle files."""

    documents: list[Document] = Field(default_factory=list)
    files_processed: int = Field(default=0, description="Subtitle files parsed")
    files_skipped: int = Field(default=0, description="Non-subtitle files ignored")
    course_structure: dict[str, dict[str, list[str]]] = Field(
        default_factory=dict,
        description="course -> chapter -> filenames, in upload order",
    )


class EmbeddingFailure(BaseModel):
    """A chunk whose embedding call failed during a run."""

    document_id: str
    chunk_id: str
    error_type: str
    message: str


class EmbeddingRunResult(BaseModel):
    """Outcome of one embedding batch run."""

    records: list[EmbeddingRecord] = Field(
        default_factory=list,
        description="Existing records followed by newly generated ones",
    )
    generated: int = Field(default=0, description="Records created in this run")
    skipped_documents: int = Field(default=0, description="Documents already fully embedded")
    failures: list[EmbeddingFailure] = Field(default_factory=list)
