"""
Health check API endpoint.

Routes: GET /health

Dependencies: fastapi, lecturelens.boundary.storage
System role: Liveness and session store reachability
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from lecturelens.api.deps import get_session_store_dependency
from lecturelens.boundary.storage import SessionStore

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    message: str
    sessions: int = Field(description="Sessions currently held by the store")


@router.get("", response_model=HealthResponse)
async def health_check(
    store: SessionStore = Depends(get_session_store_dependency),
) -> HealthResponse:
    """Report liveness and that the session store can be listed."""
    return HealthResponse(
        status="healthy",
        message="Server Healthy",
        sessions=len(store.list_sessions()),
    )
