"""Optional debug logging capability."""

from __future__ import annotations

import logging
from typing import Any, Protocol

LOGGER_NAME = "frugal_id"
LOG_PREFIX = "[frugal-id]"


class DebugLogger(Protocol):
    def log(self, message: str, *args: Any) -> None: ...


class LoggingDebugLogger:
    """Default implementation: forwards to the ``frugal_id`` stdlib logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    def log(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)
