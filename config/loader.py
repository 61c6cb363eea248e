"""
Configuration loader.

Loads configuration from:
1. Default values (built-in)
2. TOML config file (stockta.toml or ~/.config/stockta/config.toml)
3. Environment variables

Priority: env vars > config file > defaults
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .schema import IndicatorConfig

logger = logging.getLogger(__name__)

# Config file search paths (in priority order)
CONFIG_PATHS = [
    Path("stockta.toml"),                          # Current directory
    Path(".stockta.toml"),                         # Hidden in current directory
    Path.home() / ".config" / "stockta" / "config.toml",  # User config
    Path("/etc/stockta/config.toml"),              # System config
]

# Environment variable prefix
ENV_PREFIX = "STOCKTA_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(Exception):
    """Indicator settings could not be read or did not validate.

    ``source`` names the file or environment variable involved and ``field``
    the dotted setting path (``rsi.period``), when known.
    """

    def __init__(self, message: str, source: str | None = None, field: str | None = None):
        self.source = source
        self.field = field
        super().__init__(message)

    def __str__(self) -> str:
        context = [f"field {self.field}"] if self.field else []
        if self.source:
            context.append(f"from {self.source}")
        message = super().__str__()
        return f"{message} ({', '.join(context)})" if context else message


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load TOML file if it exists."""
    if not path.exists():
        return {}

    try:
        import tomllib
    except ImportError:
        # Python < 3.11
        import tomli as tomllib

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        logger.info(f"Loaded config from: {path}")
        return data
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to parse TOML: {e}", source=str(path))


def _find_config_file() -> Path | None:
    """Return the first of CONFIG_PATHS present on disk, if any."""
    return next((path for path in CONFIG_PATHS if path.exists()), None)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean: {raw!r}", source=name)


def _load_env_overrides() -> dict[str, Any]:
    """Load indicator overrides from environment variables."""
    overrides: dict[str, Any] = {}

    if rsi_period := os.environ.get(f"{ENV_PREFIX}RSI_PERIOD"):
        overrides["rsi"] = {"period": rsi_period}
    if stoch_period := os.environ.get(f"{ENV_PREFIX}STOCHASTIC_PERIOD"):
        overrides["stochastic"] = {"period": stoch_period}
    if strict := os.environ.get(f"{ENV_PREFIX}STRICT"):
        overrides["strict"] = _parse_bool(f"{ENV_PREFIX}STRICT", strict)

    return overrides


def _apply_overrides(settings: dict, overrides: dict) -> dict:
    """Layer overrides onto settings, section by section.

    A ``[rsi]`` override only replaces the keys it names, so a file's
    ``overbought`` survives an environment ``STOCKTA_RSI_PERIOD``.
    """
    merged = dict(settings)
    for key, value in overrides.items():
        section = merged.get(key)
        if isinstance(section, dict) and isinstance(value, dict):
            merged[key] = _apply_overrides(section, value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Path | str | None = None) -> IndicatorConfig:
    """
    Load and validate configuration.

    Args:
        config_path: Explicit path to config file (optional)

    Returns:
        Validated IndicatorConfig

    Raises:
        ConfigError: If configuration is invalid
    """
    config_data: dict[str, Any] = {}

    # Load from config file
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}", source=str(path))
        config_data = _load_toml_file(path)
    else:
        found_path = _find_config_file()
        if found_path:
            config_data = _load_toml_file(found_path)

    env_overrides = _load_env_overrides()
    if env_overrides:
        config_data = _apply_overrides(config_data, env_overrides)
        logger.debug(f"Applied {len(env_overrides)} override(s) from environment")

    # Validate and create config
    try:
        config = IndicatorConfig(**config_data)
    except ValidationError as e:
        errors = e.errors()
        if errors:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", []))
            msg = first_error.get("msg", "Validation error")
            raise ConfigError(f"Invalid configuration: {msg}", field=field)
        raise ConfigError(f"Invalid configuration: {e}")

    return config


@lru_cache
def get_config() -> IndicatorConfig:
    """Settings from the default search paths and environment, read on first use."""
    return load_config()


def reload_config(config_path: Path | str | None = None) -> IndicatorConfig:
    """
    Force reload configuration.

    Clears the cache and reloads from file/environment. An explicit path is
    loaded directly and not cached.
    """
    get_config.cache_clear()
    if config_path:
        return load_config(config_path)
    return get_config()
