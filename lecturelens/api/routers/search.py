"""
Search API endpoints.

Routes:
- POST /sessions/{session_id}/search - Semantic search over session embeddings

Dependencies: lecturelens.application.services.search_service
System role: Semantic search HTTP API
"""

from fastapi import APIRouter, Depends

from lecturelens.api.deps import get_search_service
from lecturelens.api.routers.router_utils import handle_session_errors
from lecturelens.application.services import SearchService
from lecturelens.models.search import SearchRequest, SearchResponse

router = APIRouter(prefix="/sessions", tags=["search"])


@router.post("/{session_id}/search", response_model=SearchResponse)
@handle_session_errors
async def search(
    session_id: str,
    request: SearchRequest,
    search_service: SearchService = Depends(get_search_service),
) -> SearchResponse:
    """Rank the session's passages against a query.

    Raises:
        HTTPException(404): Session not found
        HTTPException(422): Blank query, limit < 1 or embedding dimension mismatch
        HTTPException(502): Embedding provider failure
    """
    context = await search_service.search(session_id, request.query, request.limit)
    return SearchResponse(query=request.query, results=context.results)
