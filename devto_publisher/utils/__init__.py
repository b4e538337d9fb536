"""Utility helpers."""

from .file_helper import discover_markdown_files, read_text, write_text
from .logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "discover_markdown_files",
    "get_logger",
    "read_text",
    "write_text",
]
