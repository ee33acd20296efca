"""
Request correlation IDs.

One ID per request, held in a ContextVar so it follows the request through
awaits and `asyncio.to_thread` calls. Client-supplied IDs are accepted only
when they are short, printable tokens; anything else is replaced.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import re
import uuid
from contextvars import ContextVar

CORRELATION_HEADER = "X-Correlation-ID"

_VALID_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(candidate: str | None = None) -> str:
    """
    Bind a correlation ID to the current context.

    Args:
        candidate: ID taken from the request header, if any

    Returns:
        str: The candidate when it is a valid token, otherwise a new uuid4 hex
    """
    value = candidate.strip() if candidate else ""
    if not _VALID_ID.match(value):
        value = uuid.uuid4().hex
    _correlation_id.set(value)
    return value


def get_correlation_id() -> str:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set("")
