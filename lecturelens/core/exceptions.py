"""
LectureLens exception hierarchy.

Every error carries a message plus a `details` dict of the ids involved
(session, document, chunk, field). Keyword context passed to a constructor
is folded into `details`; None values are dropped.

    LectureLensException
    ├── ValidationError
    │   └── InvalidInputError
    │       └── DimensionMismatchError
    ├── SessionNotFoundError
    ├── DocumentProcessingError
    │   ├── ParsingError
    │   └── EmbeddingCallError
    │       └── RateLimitError
    ├── EmbeddingInProgressError
    └── GenerationError

Dependencies: None (pure domain layer)
System role: Domain errors shared by every layer
"""

from typing import Any


class LectureLensException(Exception):
    """Base for all LectureLens errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        **context: Any,
    ) -> None:
        self.message = message
        self.details = dict(details or {})
        self.details.update({key: val for key, val in context.items() if val is not None})
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} | Details: {self.details}"


class ValidationError(LectureLensException):
    """Request or stored data failed validation. `field` names the culprit."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
        **context: Any,
    ) -> None:
        super().__init__(message, details, field=field, **context)


class InvalidInputError(ValidationError):
    """A core operation got structurally invalid input (empty vector, top_k < 1)."""

    pass


class DimensionMismatchError(InvalidInputError):
    """
    Two embedding vectors that must be compared have different lengths.

    Means the index and the query were embedded with different models or
    output dimensions. Callers must surface it, never skip the record.
    """

    def __init__(self, expected: int, actual: int, record_id: str | None = None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Embedding dimension mismatch: expected {expected}, got {actual}",
            field="embedding",
            expected=expected,
            actual=actual,
            record_id=record_id,
        )


class SessionNotFoundError(LectureLensException):
    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}", session_id=session_id)


class DocumentProcessingError(LectureLensException):
    """Failure while turning one document into text or embeddings."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
        **context: Any,
    ) -> None:
        super().__init__(message, details, document_id=document_id, **context)


class ParsingError(DocumentProcessingError):
    """Subtitle text could not be parsed. Caught inside the normalizer."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        file_type: str | None = None,
    ) -> None:
        super().__init__(message, document_id, file_type=file_type)


class EmbeddingCallError(DocumentProcessingError):
    """One embedding provider call failed or returned an unusable vector."""

    def __init__(self, message: str, chunk_id: str | None = None) -> None:
        super().__init__(message, chunk_id=chunk_id)


class RateLimitError(EmbeddingCallError):
    """Provider rejected the call for quota reasons; safe to retry later."""

    pass


class EmbeddingInProgressError(LectureLensException):
    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(
            f"Embedding already in progress for session: {session_id}",
            session_id=session_id,
        )


class GenerationError(LectureLensException):
    """The chat model call failed."""

    pass
