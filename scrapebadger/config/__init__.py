"""Configuration for the ScrapeBadger SDK."""

from scrapebadger.config.logging_config import remove_logging, setup_logging
from scrapebadger.config.settings import (
    API_KEY_ENV_VAR,
    ResolvedConfig,
    Settings,
    get_api_key_from_env,
    resolve_config,
)

__all__ = [
    "API_KEY_ENV_VAR",
    "ResolvedConfig",
    "Settings",
    "get_api_key_from_env",
    "remove_logging",
    "resolve_config",
    "setup_logging",
]
