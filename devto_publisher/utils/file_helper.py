"""Filesystem helpers."""

from __future__ import annotations

from pathlib import Path


def read_text(path: Path, *, encoding: str = "utf-8") -> str:
    with path.open("r", encoding=encoding) as fp:
        return fp.read()


def write_text(path: Path, data: str, *, encoding: str = "utf-8") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding=encoding) as fp:
        fp.write(data)


def discover_markdown_files(root: Path, *, suffix: str = ".md") -> list[Path]:
    """Return every file under ``root`` ending in ``suffix``, in walk order.

    The order is whatever ``Path.rglob`` yields; callers must not rely on it
    being sorted.
    """
    return [path for path in root.rglob(f"*{suffix}") if path.is_file()]
