"""
Chat schemas.

Request/response schemas for chat operations.

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import BaseModel, Field

from lecturelens.core.agent.answer_schema import ChatTurn
from lecturelens.core.retrieval.models import Citation


class ChatRequest(BaseModel):
    """Request schema for chat messages."""

    messages: list[ChatTurn] = Field(min_length=1, description="Conversation so far, oldest first")


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    answer: str
    citations: list[Citation] = Field(default_factory=list)
    grounded: bool = Field(description="True when course content grounded the answer")
