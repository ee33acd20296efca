"""
Chat answer schemas.

Defines conversation turns passed to the answer generator and the
grounded answer returned to callers.

Dependencies: pydantic
System role: Agent input/output schema definitions
"""

from typing import Literal

from pydantic import BaseModel, Field

from lecturelens.core.retrieval.models import Citation


class ChatTurn(BaseModel):
    """One message in a chat conversation."""

    role: Literal["user", "assistant", "system"] = Field(description="Message author")
    content: str = Field(description="Message text")


class ChatAnswer(BaseModel):
    """Answer to the latest user message with its sources."""

    answer: str = Field(description="Generated answer text")
    citations: list[Citation] = Field(
        default_factory=list,
        description="Course passages used to ground the answer, in rank order",
    )
    grounded: bool = Field(
        default=False,
        description="True when retrieved course content was given to the model",
    )
