"""Article mapping and batch publishing services."""

from .article_mapper import FrontMatter, build_article, derive_title
from .publish_models import BatchReport, DryRunArticle, PublishFailure, PublishResult
from .publishing_service import PublishOrchestrator, describe_error
from .reporting import LoggingNotifier, Notifier

__all__ = [
    "BatchReport",
    "DryRunArticle",
    "FrontMatter",
    "LoggingNotifier",
    "Notifier",
    "PublishFailure",
    "PublishOrchestrator",
    "PublishResult",
    "build_article",
    "derive_title",
    "describe_error",
]
