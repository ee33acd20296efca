"""Shared router helpers."""

from .error_handling import handle_session_errors

__all__ = ["handle_session_errors"]
