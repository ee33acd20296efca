"""
LectureLens API application factory.

create_app(settings) builds the app: CORS from settings, correlation and
request logging middleware, and every router under API_PREFIX. The lifespan
installs logging and builds the store and pipeline before the first request.

Run locally with `python -m lecturelens.api.main`.

Dependencies: fastapi, uvicorn, lecturelens.api.routers, lecturelens.configs
System role: API entry point
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lecturelens.api.deps.dependencies import get_service_cache
from lecturelens.configs import Settings, get_settings
from lecturelens.observability import configure_logging
from lecturelens.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import (
    chat_router,
    embeddings_router,
    health_router,
    search_router,
    sessions_router,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

ROUTERS = (health_router, sessions_router, embeddings_router, search_router, chat_router)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)

    services = get_service_cache()
    store = services.session_store
    pipeline = services.pipeline
    logger.info(
        f"{__name__}:lifespan - Ready: {type(pipeline).__name__} over {type(store).__name__} "
        f"({len(store.list_sessions())} sessions)"
    )

    yield

    services.clear()
    logger.info(f"{__name__}:lifespan - Services released")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the LectureLens FastAPI application.

    Args:
        settings: Application settings (get_settings() if None)

    Returns:
        FastAPI: App with middleware and all routers under API_PREFIX
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="LectureLens RAG API",
        description="Semantic search and grounded chat over course subtitle folders",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it runs first and the request log carries the correlation id
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    for router in ROUTERS:
        app.include_router(router, prefix=API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("lecturelens.api.main:app", host=settings.host, port=settings.port)
