"""
Embedding API endpoints.

Routes:
- POST /sessions/{session_id}/embeddings - Embed the session's documents (resumable)

Dependencies: lecturelens.application.services.embedding_service
System role: Embedding generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from lecturelens.api.deps import get_embedding_service
from lecturelens.api.routers.router_utils import handle_session_errors
from lecturelens.application.services import EmbeddingService
from lecturelens.models.embedding import EmbeddingFailureResponse, EmbeddingResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["embeddings"])


@router.post("/{session_id}/embeddings", response_model=EmbeddingResponse)
@handle_session_errors
async def generate_embeddings(
    session_id: str,
    embedding_service: EmbeddingService = Depends(get_embedding_service),
) -> EmbeddingResponse:
    """Generate embeddings for every chunk the session does not have yet.

    Calling again after a partial run resumes where it stopped.

    Raises:
        HTTPException(404): Session not found
        HTTPException(409): Another run for this session is in progress
    """
    result = await embedding_service.embed(session_id)

    return EmbeddingResponse(
        embeddings_generated=result.generated,
        total_embeddings=len(result.records),
        skipped_documents=result.skipped_documents,
        session_id=session_id,
        failures=[
            EmbeddingFailureResponse(**failure.model_dump())
            for failure in result.failures
        ],
    )
