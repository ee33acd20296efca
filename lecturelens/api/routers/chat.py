"""Chat API endpoints.

Routes:
- POST /sessions/{session_id}/chat - Answer the latest message with course context

Dependencies: lecturelens.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from lecturelens.api.deps import get_chat_service
from lecturelens.api.routers.router_utils import handle_session_errors
from lecturelens.application.services import ChatService
from lecturelens.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["chat"])


@router.post("/{session_id}/chat", response_model=ChatResponse)
@handle_session_errors
async def chat(
    session_id: str,
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Send chat messages to a session.

    Retrieval problems (unknown session, nothing embedded yet, provider
    errors) do not fail the request; the answer is just not grounded.

    Args:
        session_id: Session whose course content grounds the answer
        request: ChatRequest with the conversation
        chat_service: Injected ChatService

    Returns:
        ChatResponse: Answer with citations and grounding flag

    Raises:
        HTTPException(422): No user message in the conversation
        HTTPException(502): Chat model failure
    """
    answer = await chat_service.chat(session_id, request.messages)
    logger.info(
        f"{__name__}:chat - Answered for session {session_id}, "
        f"grounded={answer.grounded}, citations={len(answer.citations)}"
    )
    return ChatResponse(
        answer=answer.answer,
        citations=answer.citations,
        grounded=answer.grounded,
    )
