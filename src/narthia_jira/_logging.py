"""Centralize logger creation for the Jira client.

'why': one package logger shared by every client; its level changes only when a caller asks
"""
from __future__ import annotations

import logging
from typing import Final

from ._models import LogLevel


_LOGGER_NAME: Final[str] = "narthia_jira"
_LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s narthia_jira: %(message)s"


def get_logger() -> logging.Logger:
    """Return the package logger, attaching its stream handler on first use."""

    logger = logging.getLogger(_LOGGER_NAME)
    if not any(getattr(handler, "_narthia_jira", False) for handler in logger.handlers):
        logger.addHandler(_stream_handler())
        logger.propagate = False
    return logger


def set_log_level(level: LogLevel) -> None:
    """Apply `level` to the package logger; level names match the `logging` module's."""

    get_logger().setLevel(level.value)


def _stream_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT))
    setattr(handler, "_narthia_jira", True)
    return handler
