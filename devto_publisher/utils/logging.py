"""Logging helpers."""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any

_RESERVED_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
    "asctime",
}

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_ANNOTATION_COMMANDS = {
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


class JsonFormatter(logging.Formatter):
    """Render log records as compact JSON."""

    default_time_format = "%Y-%m-%dT%H:%M:%S"
    default_msec_format = "%s.%03dZ"

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.default_time_format),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
        }

        extras = {
            key: value for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS
        }
        if extras:
            data.update(extras)

        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)

        return json.dumps(data, ensure_ascii=False, default=str)


class ActionsFormatter(logging.Formatter):
    """Emit warnings and errors as GitHub Actions workflow commands.

    Records below WARNING are delegated to ``fallback`` so regular progress
    lines keep their usual shape; everything else becomes an ``::error::`` or
    ``::warning::`` annotation on the workflow run.
    """

    def __init__(self, fallback: logging.Formatter) -> None:
        super().__init__()
        self._fallback = fallback

    def format(self, record: logging.LogRecord) -> str:
        command = _ANNOTATION_COMMANDS.get(record.levelno)
        if command is None:
            return self._fallback.format(record)
        return f"::{command}::{_escape_annotation(record.getMessage())}"


def _escape_annotation(message: str) -> str:
    # Workflow commands are line oriented; percent-encode per the runner's rules.
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def running_in_actions(env: dict[str, str] | None = None) -> bool:
    source = os.environ if env is None else env
    return source.get("GITHUB_ACTIONS", "").lower() == "true"


def configure_logging(
    *,
    level: int = logging.INFO,
    structured: bool | None = None,
    annotations: bool | None = None,
) -> None:
    """Configure root logging with optional JSON output and Actions annotations."""

    root = logging.getLogger()
    root.setLevel(level)

    if annotations is None:
        annotations = running_in_actions()

    if root.handlers and structured is None:
        return

    formatter: logging.Formatter
    if structured:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(_PLAIN_FORMAT)
    if annotations:
        formatter = ActionsFormatter(formatter)

    if root.handlers:
        for handler in root.handlers:
            handler.setFormatter(formatter)
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["ActionsFormatter", "JsonFormatter", "configure_logging", "get_logger", "running_in_actions"]
