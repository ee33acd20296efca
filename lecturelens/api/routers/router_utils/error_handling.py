"""
Session error handling utilities.

Provides a decorator for consistent mapping of domain exceptions to HTTP
responses across session endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from lecturelens.core.exceptions import (
    DimensionMismatchError,
    EmbeddingCallError,
    EmbeddingInProgressError,
    GenerationError,
    SessionNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_session_errors(func: F) -> F:
    """
    Decorator to handle domain errors and transform them into HTTPExceptions.

    Mapping:
    - SessionNotFoundError -> 404
    - EmbeddingInProgressError -> 409
    - DimensionMismatchError (stored and query embedding models differ) -> 500
    - ValidationError (blank query, bad top_k) -> 422
    - EmbeddingCallError, GenerationError (upstream provider) -> 502
    - anything else -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except SessionNotFoundError as e:
            logger.warning(f"{func.__name__} - Session not found: {e.session_id}")
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except EmbeddingInProgressError as e:
            logger.warning(f"{func.__name__} - {e.message}")
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)

        except DimensionMismatchError as e:
            logger.error(f"{func.__name__} - Embedding dimension mismatch: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message,
            )

        except ValidationError as e:
            logger.warning(f"{func.__name__} - Invalid request: {e}")
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.message,
            )

        except (EmbeddingCallError, GenerationError) as e:
            logger.error(f"{func.__name__} - Upstream provider failure: {e}")
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

        except Exception as e:
            logger.exception(f"{func.__name__} - Unexpected failure: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred: {str(e)}",
            )

    return wrapper  # type: ignore
