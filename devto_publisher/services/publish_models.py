"""Result types produced by a publishing run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from devto_publisher.platforms import PublishedArticle

DRY_RUN_URL = "dry-run-url"
DRY_RUN_ID = "dry-run"


@dataclass(slots=True)
class DryRunArticle:
    """Placeholder for an article that would have been submitted."""

    title: str
    payload: dict[str, Any]
    url: str = DRY_RUN_URL
    id: str = DRY_RUN_ID

    def as_dict(self) -> dict[str, Any]:
        return {"url": self.url, "title": self.title, "id": self.id}


@dataclass(slots=True)
class PublishFailure:
    filename: str
    message: str

    def as_dict(self) -> dict[str, Any]:
        return {"filename": self.filename, "error": self.message}


PublishResult = Union[PublishedArticle, DryRunArticle, PublishFailure]


@dataclass(slots=True)
class BatchReport:
    """Outcome of a run: successful articles in processing order.

    Failures are kept apart and never counted.
    """

    articles: list[PublishedArticle | DryRunArticle] = field(default_factory=list)
    failures: list[PublishFailure] = field(default_factory=list)

    @property
    def published_count(self) -> int:
        return len(self.articles)

    def record(self, result: PublishResult) -> None:
        if isinstance(result, PublishFailure):
            self.failures.append(result)
        else:
            self.articles.append(result)

    def articles_as_dicts(self) -> list[dict[str, Any]]:
        return [article.as_dict() for article in self.articles]

    def as_dict(self) -> dict[str, Any]:
        return {
            "published_count": self.published_count,
            "articles": self.articles_as_dicts(),
            "failures": [failure.as_dict() for failure in self.failures],
        }
