"""Status reporting for publishing runs."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from devto_publisher.utils.logging import get_logger


class Notifier(Protocol):
    """Receives the user-facing progress notices of a run."""

    def info(self, message: str, **context: Any) -> None: ...

    def warning(self, message: str, **context: Any) -> None: ...

    def error(self, message: str, **context: Any) -> None: ...

    def summary(self, message: str, **context: Any) -> None: ...


class LoggingNotifier:
    """Forwards notices to a :mod:`logging` logger.

    Keyword context ends up in the record's ``extra`` so the JSON formatter
    prints it as fields.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or get_logger("devto_publisher.run")

    def info(self, message: str, **context: Any) -> None:
        self._logger.info(message, extra=context)

    def warning(self, message: str, **context: Any) -> None:
        self._logger.warning(message, extra=context)

    def error(self, message: str, **context: Any) -> None:
        self._logger.error(message, extra=context)

    def summary(self, message: str, **context: Any) -> None:
        self._logger.info(message, extra={"event": "run.summary", **context})


__all__ = ["LoggingNotifier", "Notifier"]
