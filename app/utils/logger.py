"""Logging for the `app` package: one stdout handler, level from LOG_LEVEL."""
from __future__ import annotations

import logging
import sys

from app.config import get_settings

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def _init_logging() -> None:
    """Attach one stdout handler to the `app` logger tree."""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    app_logger = logging.getLogger("app")
    app_logger.setLevel(getattr(logging, get_settings().LOG_LEVEL, logging.INFO))
    app_logger.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """Logger under the `app` tree; pass `__name__`."""
    _init_logging()
    return logging.getLogger(name)
