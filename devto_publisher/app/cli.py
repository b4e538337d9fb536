"""Command-line interface for publishing markdown posts to dev.to."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Callable, Sequence

from ..core import RateLimiter
from ..platforms import DictPlatformFactory
from ..platforms.devto import DevToApiClient
from ..services import LoggingNotifier, PublishOrchestrator, build_article
from ..settings import AppConfig, load_config
from ..utils.file_helper import read_text
from ..utils.logging import configure_logging, get_logger
from .outputs import ActionOutputs, save_report

LOGGER = get_logger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(structured=not args.log_plain)

    handler: Callable[[argparse.Namespace], int] | None = getattr(args, "handler", None)
    if handler is None:
        parser.print_help(sys.stderr)
        return 1
    return handler(args)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devto-publish", description="Publish markdown articles to dev.to"
    )
    parser.add_argument("--config", help="Path to configuration file", default=None)
    parser.add_argument(
        "--log-plain",
        action="store_true",
        help="Use plain-text logs instead of JSON",
    )

    subparsers = parser.add_subparsers(dest="command")
    _add_publish_command(subparsers)
    _add_preview_command(subparsers)
    return parser


def _add_publish_command(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    publish_parser = subparsers.add_parser("publish", help="Publish every markdown file of a directory")
    publish_parser.add_argument("--api-key", dest="api_key", default=None, help="dev.to API key")
    publish_parser.add_argument(
        "--posts-directory",
        dest="posts_directory",
        default=None,
        help="Directory searched recursively for .md files (default: posts)",
    )
    publish_parser.add_argument(
        "--published",
        action="store_const",
        const=True,
        default=None,
        help="Publish every article regardless of its front-matter",
    )
    publish_parser.add_argument(
        "--dry-run",
        dest="dry_run",
        action="store_const",
        const=True,
        default=None,
        help="Build payloads without calling the API",
    )
    publish_parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Also write the run report as JSON to this path",
    )
    publish_parser.set_defaults(handler=_handle_publish)


def _add_preview_command(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    preview_parser = subparsers.add_parser("preview", help="Print the payload built for one file")
    preview_parser.add_argument("path", type=Path, help="Markdown file to map")
    preview_parser.add_argument(
        "--published",
        action="store_true",
        help="Apply the publish override",
    )
    preview_parser.set_defaults(handler=_handle_preview)


def build_platform_factory(config: AppConfig) -> DictPlatformFactory:
    http = config.http
    return DictPlatformFactory(
        {
            "devto": lambda api_key: DevToApiClient(
                api_key, base_url=http.base_url, timeout=http.timeout
            ),
        }
    )


def build_orchestrator(config: AppConfig) -> PublishOrchestrator:
    factory = build_platform_factory(config)
    return PublishOrchestrator(
        lambda api_key: factory.create(config.platform, api_key),
        notifier=LoggingNotifier(),
        rate_limiter=RateLimiter(min_delay=config.http.min_delay, max_delay=config.http.max_delay),
    )


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    return {
        "api_key": args.api_key,
        "posts_directory": args.posts_directory,
        "published": args.published,
        "dry_run": args.dry_run,
    }


def _handle_publish(args: argparse.Namespace) -> int:
    try:
        config = load_config(args.config, overrides=_overrides(args))
        LOGGER.info(
            "Publish run started",
            extra={
                "event": "cli.command",
                "command": "publish",
                "posts_directory": str(config.publish.posts_directory),
                "dry_run": config.publish.dry_run,
            },
        )
        report = build_orchestrator(config).run(config.publish)
    except Exception as exc:
        LOGGER.error(
            "Action failed: %s",
            exc,
            extra={"event": "cli.failed", "command": "publish", "error_type": type(exc).__name__},
        )
        return 1

    ActionOutputs.from_env().write_report(report)
    if args.report is not None:
        path = save_report(args.report, report)
        LOGGER.info("Report written", extra={"event": "cli.report", "path": str(path)})
    return 0


def _handle_preview(args: argparse.Namespace) -> int:
    path: Path = args.path
    try:
        payload = build_article(read_text(path), path.name, args.published)
    except Exception as exc:
        LOGGER.error(
            "Could not map %s: %s",
            path,
            exc,
            extra={"event": "cli.failed", "command": "preview"},
        )
        return 1
    print(json.dumps({"article": payload.as_dict()}, ensure_ascii=False, indent=2, default=str))
    return 0


__all__ = ["build_orchestrator", "build_platform_factory", "main"]
