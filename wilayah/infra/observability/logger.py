"""Observability layer: one logging setup shared by the API, dataset loads and URL state."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
ACCESS_LOGGER = "wilayah.access"
ACCESS_FORMAT = "%(asctime)s | access | %(message)s"
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger, route server loggers through it, give access lines their own handler."""
    normalized = level.strip().upper() or "INFO"
    logging.basicConfig(level=normalized, format=LOG_FORMAT, force=True)
    for name in SERVER_LOGGERS:
        routed = logging.getLogger(name)
        routed.handlers.clear()
        routed.setLevel(normalized)
        routed.propagate = True

    access = logging.getLogger(ACCESS_LOGGER)
    access.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(ACCESS_FORMAT))
    access.addHandler(handler)
    access.setLevel(normalized)
    access.propagate = False


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
