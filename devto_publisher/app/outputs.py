"""Expose run results as GitHub Actions step outputs and JSON reports."""

from __future__ import annotations

import json
import os
import sys
import uuid
from pathlib import Path
from typing import Any, Mapping, TextIO

from ..services.publish_models import BatchReport
from ..utils.file_helper import write_text

OUTPUT_ENV_VAR = "GITHUB_OUTPUT"


def _serialise(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)


class ActionOutputs:
    """Writes ``name=value`` outputs to the file named by ``GITHUB_OUTPUT``.

    Outside a workflow (no output file) the same lines go to ``stream``.
    """

    def __init__(self, output_path: Path | None = None, *, stream: TextIO | None = None) -> None:
        self._output_path = output_path
        self._stream = stream

    @classmethod
    def from_env(
        cls, env: Mapping[str, str] | None = None, *, stream: TextIO | None = None
    ) -> "ActionOutputs":
        source = os.environ if env is None else env
        value = source.get(OUTPUT_ENV_VAR)
        return cls(Path(value) if value else None, stream=stream)

    @property
    def output_path(self) -> Path | None:
        return self._output_path

    def set_output(self, name: str, value: Any) -> None:
        text = _serialise(value)
        if "\n" in text:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            entry = f"{name}<<{delimiter}\n{text}\n{delimiter}\n"
        else:
            entry = f"{name}={text}\n"

        if self._output_path is None:
            stream = self._stream or sys.stdout
            stream.write(entry)
            return
        self._output_path.parent.mkdir(parents=True, exist_ok=True)
        with self._output_path.open("a", encoding="utf-8") as fp:
            fp.write(entry)

    def write_report(self, report: BatchReport) -> None:
        self.set_output("published-count", report.published_count)
        self.set_output("articles", report.articles_as_dicts())


def save_report(path: Path, report: BatchReport) -> Path:
    write_text(path, json.dumps(report.as_dict(), ensure_ascii=False, indent=2, default=str))
    return path


__all__ = ["ActionOutputs", "OUTPUT_ENV_VAR", "save_report"]
