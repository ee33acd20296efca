"""
Structured logging helpers.

Context values are attached to the log record as attributes. Embedding
vectors are reduced to their dimension so a 768-float list never lands in
a log line.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

MAX_VALUE_LENGTH = 200


def context_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render one context value for a log record.

    Args:
        value: Value to render
        max_length: Longest string kept before truncation

    Returns:
        str: "vector[<dim>]" for numeric sequences, otherwise str(value)
    """
    if isinstance(value, (list, tuple)) and all(isinstance(v, (int, float)) for v in value):
        return f"vector[{len(value)}]"

    text = str(value)
    if len(text) > max_length:
        return f"{text[:max_length]}...({len(text)} chars)"
    return text


def _context(context: dict[str, Any]) -> dict[str, str]:
    return {key: context_value(val) for key, val in context.items()}


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """Log a message with rendered context attributes."""
    logger.log(level, message, extra=_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context: Any,
) -> None:
    """
    Log a caught exception at error level with its type and message.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being handled
        **context: Ids identifying the failed item
    """
    extra = _context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = str(exc)
    logger.error(f"{message}: {type(exc).__name__}: {exc}", exc_info=exc, extra=extra)
