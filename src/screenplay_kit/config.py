"""screenplay-kit configuration management.

Handles persistent configuration stored in ~/.screenplay/config.yaml.
Supports environment variable overrides.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .cast import DEFAULT_PERSONAS
from .errors import ConfigError
from .shared import paths

# Default values
DEFAULT_CACHE_ACTORS = True
DEFAULT_LOG_LEVEL = "warning"

CONFIG_KEYS = ("personas", "cache_actors", "log_level")
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")

# Environment variable mappings
ENV_VARS = {
    "personas": "SCREENPLAY_PERSONAS",
    "cache_actors": "SCREENPLAY_CACHE_ACTORS",
    "log_level": "SCREENPLAY_LOG_LEVEL",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class ScreenplayConfig:
    """Roster and behaviour settings for casts."""

    personas: tuple[str, ...] = DEFAULT_PERSONAS
    cache_actors: bool = DEFAULT_CACHE_ACTORS
    log_level: str = DEFAULT_LOG_LEVEL

    # Track where each value came from
    _sources: dict[str, str] = field(default_factory=dict)

    def get_source(self, key: str) -> str:
        """Get the source of a config value."""
        return self._sources.get(key, "default")

    def to_dict(self) -> dict[str, Any]:
        return {
            "personas": list(self.personas),
            "cache_actors": self.cache_actors,
            "log_level": self.log_level,
        }


def get_config_path() -> Path:
    """Get the config file path.

    Returns:
        Path to ~/.screenplay/config.yaml
    """
    return paths.CONFIG_FILE


def parse_personas(value: Any) -> tuple[str, ...]:
    """Normalise a persona list from YAML (list) or the environment (comma string)."""
    if isinstance(value, str):
        names = [part.strip() for part in value.split(",")]
    elif isinstance(value, (list, tuple)):
        names = [str(part).strip() for part in value]
    else:
        raise ConfigError(message=f"personas must be a list of names, got {value!r}")

    names = [n for n in names if n]
    if not names:
        raise ConfigError(message="personas must name at least one actor")
    if len(set(names)) != len(names):
        raise ConfigError(message=f"personas contains duplicates: {', '.join(names)}")
    return tuple(names)


def parse_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(message=f"{key} must be a boolean, got {value!r}")


def parse_log_level(value: Any) -> str:
    level = str(value).strip().lower()
    if level not in LOG_LEVELS:
        raise ConfigError(
            message=f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}"
        )
    return level


def parse_value(key: str, value: Any) -> Any:
    """Validate and convert a raw value for ``key``.

    Raises:
        ConfigError: If the key is unknown or the value is invalid
    """
    if key == "personas":
        return parse_personas(value)
    if key == "cache_actors":
        return parse_bool(key, value)
    if key == "log_level":
        return parse_log_level(value)
    raise ConfigError(
        message=f"Unknown config key '{key}'. Valid keys: {', '.join(CONFIG_KEYS)}",
        data={"key": key},
    )


def _read_config_file(config_path: Path) -> dict[str, Any]:
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(
            message=f"Cannot parse {config_path}: {e}", data={"path": str(config_path)}
        ) from e
    if not isinstance(data, dict):
        raise ConfigError(
            message=f"{config_path} must contain a mapping", data={"path": str(config_path)}
        )
    return data


def load_config() -> ScreenplayConfig:
    """Load configuration.

    Precedence (highest to lowest):
    1. Environment variables
    2. Config file (~/.screenplay/config.yaml)
    3. Defaults

    Returns:
        ScreenplayConfig with values and sources

    Raises:
        ConfigError: If the file is malformed or a value is invalid
    """
    config = ScreenplayConfig()
    sources: dict[str, str] = {key: "default" for key in CONFIG_KEYS}

    config_path = get_config_path()
    if config_path.exists():
        file_config = _read_config_file(config_path)
        for key in CONFIG_KEYS:
            if key in file_config:
                setattr(config, key, parse_value(key, file_config[key]))
                sources[key] = "config file"

    for key, env_var in ENV_VARS.items():
        if os.environ.get(env_var):
            setattr(config, key, parse_value(key, os.environ[env_var]))
            sources[key] = "environment"

    config._sources = sources
    return config


def save_config(key: str, value: Any) -> None:
    """Save a config value to the config file.

    Args:
        key: Config key (personas, cache_actors, log_level)
        value: Raw value; validated before writing

    Raises:
        ConfigError: If the key or value is invalid
    """
    parsed = parse_value(key, value)
    if isinstance(parsed, tuple):
        parsed = list(parsed)

    config_path = get_config_path()
    existing: dict[str, Any] = {}
    if config_path.exists():
        existing = _read_config_file(config_path)

    existing[key] = parsed

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.safe_dump(existing, f, default_flow_style=False)


def unset_config(key: str) -> bool:
    """Remove a config value from the config file.

    Args:
        key: Config key to remove

    Returns:
        True if key was removed, False if not found
    """
    config_path = get_config_path()
    if not config_path.exists():
        return False

    existing = _read_config_file(config_path)
    if key not in existing:
        return False

    del existing[key]

    with open(config_path, "w") as f:
        yaml.safe_dump(existing, f, default_flow_style=False)

    return True
