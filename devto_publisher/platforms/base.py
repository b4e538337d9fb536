"""Base contracts for article publishing platforms."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Protocol


class PlatformError(RuntimeError):
    """Raised when a platform rejects or fails to receive an article."""

    def __init__(
        self,
        message: str,
        *,
        api_message: str | None = None,
        status: int | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.api_message = api_message
        self.status = status
        self.details = dict(details or {})

    def __str__(self) -> str:
        base = super().__str__()
        if not self.details:
            return base
        try:
            detail_repr = json.dumps(self.details, ensure_ascii=False)
        except TypeError:
            detail_repr = str(self.details)
        return f"{base} | details: {detail_repr}"


def is_empty(value: Any) -> bool:
    """True for the values the platform treats as "not provided"."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


@dataclass(slots=True)
class ArticlePayload:
    """The article body submitted to the platform."""

    title: str
    body_markdown: str
    published: bool = False
    tags: list[str] = field(default_factory=list)
    description: str = ""
    canonical_url: str = ""
    main_image: str = ""
    series: str = ""
    organization_id: Any = ""
    created_at: str = ""
    edited_at: str = ""

    def as_dict(self) -> dict[str, Any]:
        """Return the payload with empty strings and empty sequences pruned.

        ``False`` and ``0`` are real values for the API and are kept.
        """
        data: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, (str, list, tuple)) and is_empty(value):
                continue
            data[item.name] = list(value) if isinstance(value, tuple) else value
        return data


@dataclass(slots=True)
class PublishedArticle:
    """Article as acknowledged by the remote platform."""

    url: str
    title: str
    id: Any
    published: bool

    def as_dict(self) -> dict[str, Any]:
        return {"url": self.url, "title": self.title, "id": self.id, "published": self.published}


class ArticlePublisher(ABC):
    """Submits article payloads to a concrete platform."""

    @abstractmethod
    def publish(self, payload: ArticlePayload) -> PublishedArticle:
        """Create the article remotely and return the platform's view of it."""

    def close(self) -> None:
        """Release any pooled connections."""


class PlatformFactory(Protocol):
    """Factory interface for retrieving platform-specific publishers."""

    def create(self, platform: str, api_key: str) -> ArticlePublisher:
        """Return a publisher for ``platform`` authenticated with ``api_key``."""
