"""Factory helpers for platform publishers."""

from __future__ import annotations

from typing import Callable, Mapping

from devto_publisher.platforms.base import ArticlePublisher, PlatformFactory


class DictPlatformFactory(PlatformFactory):
    """Simple registry-backed factory."""

    def __init__(self, builders: Mapping[str, Callable[[str], ArticlePublisher]]) -> None:
        self._builders = {key.lower(): value for key, value in builders.items()}

    @property
    def platforms(self) -> list[str]:
        return sorted(self._builders)

    def create(self, platform: str, api_key: str) -> ArticlePublisher:
        key = platform.lower()
        try:
            builder = self._builders[key]
        except KeyError as exc:
            raise ValueError(f"Unsupported platform: {platform}") from exc
        return builder(api_key)
