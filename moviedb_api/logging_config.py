"""
Request-aware logging for the API.

The API logger shares the file/console handlers of ``moviedb.utils`` and
tags every line with the id of the request being served.
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Optional

from moviedb.config import Config
from moviedb.utils import setup_logger
from moviedb_api.dependencies import get_config

API_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] - %(message)s"

# Id of the request being handled; "-" outside a request
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class RequestIdFilter(logging.Filter):
    """Add request_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


def setup_api_logger(config: Config, name: str = "moviedb_api") -> logging.Logger:
    """
    Set up the API logger in the configured log directory.

    API_DEBUG lowers the level to DEBUG. Handlers come from
    ``setup_logger``; this adds the request id to their format.
    """
    level = logging.DEBUG if config.api_debug else logging.INFO
    logger = setup_logger(name, config.log_dir, level=level)

    formatter = logging.Formatter(API_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for handler in logger.handlers:
        if not any(isinstance(f, RequestIdFilter) for f in handler.filters):
            handler.addFilter(RequestIdFilter())
            handler.setFormatter(formatter)
    return logger


def generate_request_id() -> str:
    """Short unique id for one HTTP request."""
    return uuid.uuid4().hex[:8]


def set_request_id(request_id: str) -> None:
    request_id_var.set(request_id)


logger = setup_api_logger(get_config())
