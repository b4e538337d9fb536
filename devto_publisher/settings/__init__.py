"""Settings package exports."""

from .loader import (
    AppConfig,
    ConfigurationError,
    HttpSettings,
    PublishConfig,
    action_input,
    load_config,
    parse_bool,
)

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "HttpSettings",
    "PublishConfig",
    "action_input",
    "load_config",
    "parse_bool",
]
