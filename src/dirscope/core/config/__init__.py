"""Configuration loading for dirscope.

Configuration is loaded once at startup, either from a dict (CLI options,
tests) or from a YAML file, and is then available process-wide through
get_config().

Usage:
    from dirscope.core.config import get_config, load_config_file

    load_config_file(Path("dirscope.yaml"), overrides={"port": 9000})
    config = get_config()
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from dirscope.core.config.models import DEFAULT_BASE_DIRECTORY, BrowserConfig
from dirscope.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

_config: BrowserConfig | None = None


def load_config(config_data: dict[str, Any] | None = None) -> BrowserConfig:
    """Validate config data and install it as the process-wide config.

    Args:
        config_data: Raw config values. None or {} yields all defaults.

    Returns:
        The validated BrowserConfig.

    Raises:
        ConfigError: If validation fails.

    """
    global _config

    try:
        config = BrowserConfig.model_validate(config_data or {})
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    _config = config
    logger.debug("Config loaded: base_directory=%s", config.base_directory)
    return config


def load_config_file(
    path: Path,
    overrides: dict[str, Any] | None = None,
) -> BrowserConfig:
    """Load config from a YAML file, then apply overrides.

    Override values of None are ignored so unset CLI options do not mask
    file values.

    Args:
        path: YAML config file.
        overrides: Values taking precedence over the file.

    Returns:
        The validated BrowserConfig.

    Raises:
        ConfigError: If the file cannot be read, is not a YAML mapping,
            or fails validation.

    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # Empty file
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    merged = {**data, **{k: v for k, v in (overrides or {}).items() if v is not None}}
    return load_config(merged)


def get_config() -> BrowserConfig:
    """Return the loaded config.

    Raises:
        ConfigError: If no config has been loaded yet.

    """
    if _config is None:
        raise ConfigError("Config not loaded. Call load_config() first.")
    return _config


def _reset_config() -> None:
    """Reset the config singleton (for tests)."""
    global _config
    _config = None


__all__ = [
    "DEFAULT_BASE_DIRECTORY",
    "BrowserConfig",
    "get_config",
    "load_config",
    "load_config_file",
]
