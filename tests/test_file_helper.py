from __future__ import annotations

from pathlib import Path

from devto_publisher.utils.file_helper import discover_markdown_files, read_text, write_text


def test_discovery_is_recursive_and_filters_suffix(tmp_path: Path) -> None:
    write_text(tmp_path / "a.md", "a")
    write_text(tmp_path / "nested" / "deeper" / "b.md", "b")
    write_text(tmp_path / "notes.txt", "c")
    (tmp_path / "folder.md").mkdir()

    found = discover_markdown_files(tmp_path)

    assert sorted(path.relative_to(tmp_path).as_posix() for path in found) == [
        "a.md",
        "nested/deeper/b.md",
    ]


def test_read_text_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "post.md"
    write_text(path, "héllo")
    assert read_text(path) == "héllo"
