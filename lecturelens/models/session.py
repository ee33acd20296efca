"""
Session upload schemas.

Dependencies: pydantic
System role: Upload API contracts
"""

from pydantic import Field

from lecturelens.models.common import CamelModel


class UploadResponse(CamelModel):
    """Response schema for a subtitle folder upload."""

    success: bool = True
    files_processed: int = Field(description="Subtitle files parsed")
    documents_generated: int = Field(description="Documents with non-empty text")
    session_id: str = Field(description="Session holding the uploaded documents")
    course_structure: dict[str, dict[str, list[str]]] = Field(
        default_factory=dict,
        description="course -> chapter -> filenames",
    )
