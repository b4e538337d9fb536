"""Platform integration package."""

from __future__ import annotations

from .base import (
    ArticlePayload,
    ArticlePublisher,
    PlatformError,
    PlatformFactory,
    PublishedArticle,
    is_empty,
)
from .factory import DictPlatformFactory

__all__ = [
    "ArticlePayload",
    "ArticlePublisher",
    "DictPlatformFactory",
    "PlatformError",
    "PlatformFactory",
    "PublishedArticle",
    "is_empty",
]
