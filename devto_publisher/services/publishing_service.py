"""High-level orchestration for publishing a directory of articles."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Sequence

from devto_publisher.core import RateLimiter
from devto_publisher.platforms import ArticlePublisher, PlatformError
from devto_publisher.services.article_mapper import build_article
from devto_publisher.services.publish_models import (
    BatchReport,
    DryRunArticle,
    PublishFailure,
    PublishResult,
)
from devto_publisher.services.reporting import LoggingNotifier, Notifier
from devto_publisher.settings import PublishConfig
from devto_publisher.utils.file_helper import discover_markdown_files, read_text


def describe_error(exc: BaseException) -> str:
    """Prefer the platform's own error message over the generic one."""
    if isinstance(exc, PlatformError) and exc.api_message:
        return exc.api_message
    return str(exc) or type(exc).__name__


class PublishOrchestrator:
    """Publishes every markdown file of a directory, one at a time.

    A failing file is reported and skipped; only configuration errors stop
    the run.
    """

    def __init__(
        self,
        publisher_factory: Callable[[str], ArticlePublisher],
        *,
        notifier: Notifier | None = None,
        rate_limiter: RateLimiter | None = None,
        discover: Callable[[Path], Sequence[Path]] = discover_markdown_files,
        reader: Callable[[Path], str] = read_text,
    ) -> None:
        self._publisher_factory = publisher_factory
        self._notifier = notifier or LoggingNotifier()
        self._rate_limiter = rate_limiter or RateLimiter()
        self._discover = discover
        self._reader = reader

    def run(self, config: PublishConfig) -> BatchReport:
        config.validate()
        report = BatchReport()
        directory = config.posts_directory

        self._notifier.info(f"Looking for markdown files in: {directory}", event="run.discover")

        if not directory.is_dir():
            self._notifier.warning(
                f"Posts directory '{directory}' not found", event="run.missing_directory"
            )
            return report

        files = list(self._discover(directory))
        if not files:
            self._notifier.info("No markdown files found", event="run.empty")
            return report

        self._notifier.info(f"Found {len(files)} markdown file(s)", event="run.discovered", count=len(files))

        publisher = None if config.dry_run else self._publisher_factory(config.api_key)
        try:
            for index, path in enumerate(files):
                result = self._process(path, publisher, config)
                report.record(result)
                remaining = index < len(files) - 1
                if publisher is not None and remaining and not isinstance(result, PublishFailure):
                    self._rate_limiter.sleep()
        finally:
            if publisher is not None:
                publisher.close()

        self._notifier.summary(
            f"Successfully processed {report.published_count} articles",
            count=report.published_count,
            failed=len(report.failures),
        )
        return report

    def publish_file(self, path: Path, config: PublishConfig) -> PublishResult:
        """Publish a single file outside of a batch."""
        config.validate()
        publisher = None if config.dry_run else self._publisher_factory(config.api_key)
        try:
            return self._process(path, publisher, config)
        finally:
            if publisher is not None:
                publisher.close()

    def _process(
        self,
        path: Path,
        publisher: ArticlePublisher | None,
        config: PublishConfig,
    ) -> PublishResult:
        try:
            content = self._reader(path)
            payload = build_article(content, path.name, config.publish_override)

            if publisher is None:
                body = payload.as_dict()
                self._notifier.info(f"[DRY RUN] Would publish: {payload.title}", event="article.dry_run")
                self._notifier.info(
                    f"[DRY RUN] Article data: {json.dumps(body, indent=2, ensure_ascii=False, default=str)}",
                    event="article.dry_run_payload",
                )
                return DryRunArticle(title=payload.title, payload=body)

            article = publisher.publish(payload)
        except Exception as exc:
            message = describe_error(exc)
            self._notifier.error(
                f"Failed to publish {path.name}: {message}",
                event="article.failed",
                file=str(path),
            )
            return PublishFailure(filename=path.name, message=message)

        self._notifier.info(f"Successfully published: {payload.title}", event="article.published")
        self._notifier.info(f"Article URL: {article.url}", event="article.url", url=article.url)
        return article


__all__ = ["PublishOrchestrator", "describe_error"]
