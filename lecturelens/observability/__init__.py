"""
Observability module.

Provides structured logging helpers and correlation ID tracking.
"""

from lecturelens.observability.logger import configure_logging

__all__ = ["configure_logging"]
