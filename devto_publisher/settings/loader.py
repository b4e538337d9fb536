"""Helpers for loading the publishing configuration."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from ..utils.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_CONFIG_NAME = "config.toml"
CONFIG_ENV_VAR = "DEVTO_PUBLISH_CONFIG"
API_KEY_ENV_VAR = "DEVTO_API_KEY"
DEFAULT_POSTS_DIRECTORY = "posts"
DEFAULT_PLATFORM = "devto"
DEFAULT_BASE_URL = "https://dev.to/api"


class ConfigurationError(RuntimeError):
    """Raised when the run cannot start because its inputs are invalid."""


@dataclass(slots=True)
class HttpSettings:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    min_delay: float = 1.0
    max_delay: float = 1.0


@dataclass(slots=True)
class PublishConfig:
    """Inputs of a single publishing run."""

    api_key: str
    posts_directory: Path = field(default_factory=lambda: Path(DEFAULT_POSTS_DIRECTORY))
    publish_override: bool = False
    dry_run: bool = False

    def validate(self) -> None:
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError("Input required and not supplied: api-key")


@dataclass(slots=True)
class AppConfig:
    publish: PublishConfig
    http: HttpSettings
    platform: str = DEFAULT_PLATFORM
    source: Path | None = None


def action_input(name: str, env: Mapping[str, str] | None = None) -> str | None:
    """Read a GitHub Actions input (``INPUT_<NAME>``) from the environment.

    Blank values count as missing, the same way the runner treats them.
    """
    source = os.environ if env is None else env
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    value = source.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_bool(value: Any, *, name: str, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if not text:
        return default
    if text == "true":
        return True
    if text == "false":
        return False
    LOGGER.warning(
        "Input '%s' must be 'true' or 'false', got %r; using %s",
        name,
        value,
        str(default).lower(),
        extra={"event": "invalid_boolean_input"},
    )
    return default


def _config_path(
    explicit: str | os.PathLike[str] | None, env: Mapping[str, str]
) -> tuple[Path, bool]:
    if explicit:
        return Path(explicit), True
    env_value = env.get(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value), True
    return Path.cwd() / DEFAULT_CONFIG_NAME, False


def _load_toml(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise ConfigurationError(f"Config file not found: {path}")
        return {}
    try:
        with path.open("rb") as fp:
            return tomllib.load(fp)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Could not read config file {path}: {exc}") from exc


def _first_set(*candidates: Any) -> Any:
    for candidate in candidates:
        if candidate is not None and candidate != "":
            return candidate
    return None


def _build_http(section: Mapping[str, Any]) -> HttpSettings:
    try:
        min_delay = float(section.get("min_delay", 1.0))
        max_delay = float(section.get("max_delay", min_delay))
        timeout = float(section.get("timeout", 30))
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid [http] setting: {exc}") from exc
    return HttpSettings(
        base_url=str(section.get("base_url", DEFAULT_BASE_URL)),
        timeout=timeout,
        min_delay=min_delay,
        max_delay=max_delay,
    )


def load_config(
    config_path: str | os.PathLike[str] | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> AppConfig:
    """Resolve the run configuration.

    Each value is taken from, in order: ``overrides`` (CLI flags), the
    ``INPUT_*`` variables GitHub Actions exports, ``DEVTO_API_KEY`` for the
    credential, the TOML file and finally the built-in default. The API key
    is not validated here; the orchestrator rejects a missing one.
    """
    env = os.environ if env is None else env
    overrides = overrides or {}
    path, required = _config_path(config_path, env)
    data = _load_toml(path, required=required)

    publish_section = data.get("publish", {})
    http_section = data.get("http", {})

    api_key = _first_set(
        overrides.get("api_key"),
        action_input("api-key", env),
        env.get(API_KEY_ENV_VAR),
        publish_section.get("api_key"),
    )
    posts_directory = _first_set(
        overrides.get("posts_directory"),
        action_input("posts-directory", env),
        publish_section.get("posts_directory"),
        DEFAULT_POSTS_DIRECTORY,
    )
    published = _first_set(
        overrides.get("published"),
        action_input("published", env),
        publish_section.get("published"),
    )
    dry_run = _first_set(
        overrides.get("dry_run"),
        action_input("dry-run", env),
        publish_section.get("dry_run"),
    )
    platform = _first_set(
        overrides.get("platform"),
        data.get("platform"),
        DEFAULT_PLATFORM,
    )

    publish = PublishConfig(
        api_key=str(api_key or ""),
        posts_directory=Path(posts_directory),
        publish_override=parse_bool(published, name="published"),
        dry_run=parse_bool(dry_run, name="dry-run"),
    )
    return AppConfig(
        publish=publish,
        http=_build_http(http_section),
        platform=str(platform),
        source=path if data else None,
    )
