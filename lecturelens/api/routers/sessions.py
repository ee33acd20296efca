"""
Session API endpoints.

Routes:
- POST /sessions/upload - Upload a folder of subtitle files as a new session
- DELETE /sessions/{session_id} - Remove a session and its embeddings

Dependencies: lecturelens.application.services.ingestion_service, lecturelens.boundary.storage
System role: Session lifecycle HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile, status

from lecturelens.api.deps import (
    get_embedding_service,
    get_ingestion_service,
    get_session_store_dependency,
)
from lecturelens.api.routers.router_utils import handle_session_errors
from lecturelens.application.services import EmbeddingService, IngestionService
from lecturelens.boundary.storage import SessionStore
from lecturelens.core.exceptions import EmbeddingInProgressError
from lecturelens.core.ingestion import RawFile
from lecturelens.models.session import UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("/upload", response_model=UploadResponse)
@handle_session_errors
async def upload_folder(
    files: list[UploadFile] | None = File(default=None),
    paths: list[str] | None = Form(default=None),
    ingestion_service: IngestionService = Depends(get_ingestion_service),
) -> UploadResponse:
    """Upload subtitle files and create a session.

    Each file's course and chapter come from its relative path
    (course/chapter/file.srt). Paths are taken from the parallel `paths`
    form field when given, otherwise from the uploaded filename.

    Args:
        files: Uploaded files (multipart form)
        paths: Relative paths, one per file, in the same order
        ingestion_service: Injected IngestionService

    Returns:
        UploadResponse: Session id, counts and course structure

    Raises:
        HTTPException(400): No files uploaded
    """
    if not files:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No files uploaded")

    raw_files = []
    for index, upload in enumerate(files):
        path = paths[index] if paths and index < len(paths) and paths[index] else upload.filename
        raw_files.append(RawFile(content=await upload.read(), path=path or f"file_{index}"))

    logger.info(f"{__name__}:upload_folder - Received {len(raw_files)} files")

    session_id, result = await ingestion_service.upload(raw_files)

    return UploadResponse(
        files_processed=result.files_processed,
        documents_generated=len(result.documents),
        session_id=session_id,
        course_structure=result.course_structure,
    )


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
@handle_session_errors
async def delete_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store_dependency),
    embedding_service: EmbeddingService = Depends(get_embedding_service),
) -> Response:
    """Delete a session's documents and embeddings.

    Raises:
        HTTPException(404): Session not found
        HTTPException(409): Embedding run in progress for the session
    """
    if embedding_service.is_running(session_id):
        raise EmbeddingInProgressError(session_id)

    store.delete_session(session_id)
    embedding_service.forget(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
