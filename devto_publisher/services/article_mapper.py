"""Map markdown documents with front-matter onto the dev.to article schema."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import PurePath
from typing import Any, Mapping

import frontmatter

from devto_publisher.platforms import ArticlePayload, is_empty

_WORD_START = re.compile(r"\b\w")
_BLOCK = re.compile(
    r"\A---[ \t]*\r?\n(?P<yaml>.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)
_YAML = frontmatter.YAMLHandler()


@dataclass(slots=True)
class FrontMatter:
    """Open-ended metadata block of a document.

    Every key is optional; lookups go through :meth:`first` so fallback chains
    read the same way for every field.
    """

    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "FrontMatter":
        return cls(data=dict(raw or {}))

    def first(self, *keys: str, default: Any = "") -> Any:
        """Return the value of the first key that is present and non-empty."""
        for key in keys:
            value = self.data.get(key)
            if not is_empty(value):
                return value
        return default

    def __contains__(self, key: object) -> bool:
        return key in self.data


def split_document(raw_document: str) -> tuple[FrontMatter, str]:
    """Separate the YAML block from the markdown body.

    A block is only recognised when ``---`` is the very first line. Anything
    else yields empty front-matter and the document untouched as body. Blank
    lines between the closing delimiter and the body are dropped; the body's
    own indentation is kept. Malformed YAML raises.
    """
    match = _BLOCK.match(raw_document)
    if match is None:
        return FrontMatter(), raw_document

    metadata = _YAML.load(match.group("yaml")) if match.group("yaml").strip() else None
    if not isinstance(metadata, Mapping):
        metadata = None
    body = raw_document[match.end():].lstrip("\r\n")
    return FrontMatter.from_mapping(metadata), body


def derive_title(filename_hint: str) -> str:
    """Build a title from a file name: ``my-awesome-article.md`` -> ``My Awesome Article``.

    Only the first character of each word is uppercased; the rest is kept as
    written, and consecutive hyphens become consecutive spaces.
    """
    stem = PurePath(filename_hint).stem
    spaced = stem.replace("-", " ")
    return _WORD_START.sub(lambda match: match.group(0).upper(), spaced)


def resolve_published(publish_override: bool, front_matter: FrontMatter) -> bool:
    if publish_override:
        return True
    return _as_bool(front_matter.data.get("published"))


def resolve_tags(front_matter: FrontMatter) -> list[str]:
    raw = front_matter.first("tags", default=[])
    if isinstance(raw, str):
        return [tag.strip() for tag in raw.split(",") if tag.strip()]
    if isinstance(raw, (list, tuple)):
        return [str(tag) for tag in raw if not is_empty(tag)]
    return [str(raw)]


def resolve_timestamp(front_matter: FrontMatter, *keys: str) -> str:
    value = front_matter.first(*keys)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return _as_text(value)


def build_article(
    raw_document: str,
    filename_hint: str,
    publish_override: bool = False,
) -> ArticlePayload:
    """Turn one markdown document into an :class:`ArticlePayload`.

    Args:
        raw_document: Full file content, front-matter included.
        filename_hint: File name used to derive a title when none is given.
        publish_override: Forces ``published`` to true. A false override
            leaves the front-matter value in charge.

    Returns:
        The payload; call :meth:`ArticlePayload.as_dict` for the pruned
        request body.
    """
    front_matter, body = split_document(raw_document)

    title = front_matter.first("title")
    if is_empty(title):
        title = derive_title(filename_hint)

    return ArticlePayload(
        title=_as_text(title),
        body_markdown=body,
        published=resolve_published(publish_override, front_matter),
        tags=resolve_tags(front_matter),
        description=_as_text(front_matter.first("description")),
        canonical_url=_as_text(front_matter.first("canonical_url")),
        main_image=_as_text(front_matter.first("cover_image", "main_image")),
        series=_as_text(front_matter.first("series")),
        organization_id=front_matter.first("organization_id", "organization"),
        created_at=resolve_timestamp(front_matter, "created_at", "date"),
        edited_at=resolve_timestamp(front_matter, "edited_at", "updated"),
    )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
    return bool(value)


__all__ = [
    "FrontMatter",
    "build_article",
    "derive_title",
    "resolve_published",
    "resolve_tags",
    "resolve_timestamp",
    "split_document",
]
