"""
Semantic search schemas.

Dependencies: pydantic
System role: Search API contracts
"""

from pydantic import BaseModel, Field

from lecturelens.core.retrieval.models import ScoredRecord


class SearchRequest(BaseModel):
    """Request schema for semantic search."""

    query: str = Field(description="Free-text query")
    limit: int = Field(default=5, description="Maximum number of results")


class SearchResponse(BaseModel):
    """Response schema for semantic search."""

    success: bool = True
    query: str
    results: list[ScoredRecord] = Field(default_factory=list)
