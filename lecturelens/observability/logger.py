"""
Root logging setup for the API process.

One stdout handler, tagged with the correlation ID of the request being
served. Calling configure_logging again swaps that handler and leaves any
other root handlers alone.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

from lecturelens.observability.correlation import get_correlation_id

HANDLER_NAME = "lecturelens.stdout"

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(correlation_id)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

QUIET_LOGGERS = ("urllib3", "httpx", "httpcore", "google")


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


def configure_logging(level: str = "INFO") -> logging.Handler:
    """
    Install the LectureLens stdout handler on the root logger.

    Args:
        level: Root level name; unknown names fall back to INFO

    Returns:
        logging.Handler: The installed handler
    """
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler
