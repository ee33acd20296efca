"""
Document domain models for subtitle ingestion.

Represents an uploaded file and the normalized text document built from it.
Serialized field names follow the persisted JSON layout (camelCase metadata).

Dependencies: pydantic
System role: Data structures for the first stage of ingestion
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RawFile(BaseModel):
    """Uploaded file content plus its logical relative path."""

    content: bytes = Field(description="Raw file bytes")
    path: str = Field(description="Relative path, e.g. Course/Chapter/lesson.srt")


class DocumentMetadata(BaseModel):
    """Source metadata attached to a Document. Immutable once created."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    course: str = Field(description="Course name (first path segment)")
    chapter: str = Field(description="Chapter name (second path segment)")
    filename: str = Field(description="Subtitle file name")
    original_path: str = Field(alias="originalPath", description="Uploaded relative path")
    type: str = Field(description="Lower-case file extension, e.g. .srt")


class Document(BaseModel):
    """Normalized subtitle transcript ready for chunking and embedding."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Session-unique key derived from course, chapter and filename")
    content: str = Field(description="Normalized plain text")
    metadata: DocumentMetadata

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Document content must not be empty")
        return value
