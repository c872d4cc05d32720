import logging
import os
import sys

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "meeting-processor"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
_SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def _resolve_level() -> int:
    """Reads LOG_LEVEL from the environment, falling back to INFO."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging():
    """
    Routes all service and Uvicorn logs to stdout as JSON.

    Every record carries the service name plus the ddtrace trace_id/span_id
    fields. Existing handlers are replaced, so repeated calls from each module
    leave exactly one handler in place.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(
        LOG_FORMAT, static_fields={"service": SERVICE_NAME}
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    level = _resolve_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.setLevel(level)
        server_logger.handlers = [handler]
        server_logger.propagate = False

    return root_logger
