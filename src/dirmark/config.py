"""Configuration loading utilities for dirmark."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

import yaml
from pydantic import ValidationError

from dirmark.models import DEFAULT_HOME_DIRNAME, DirmarkConfig

CONFIG_FILENAME: Final[str] = "config.yml"

EnvMapping = Mapping[str, str]

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


class ConfigError(RuntimeError):
    """Raised when configuration cannot be loaded or parsed."""


def default_config_path() -> Path:
    """Return the per-user configuration file location."""
    return Path.home() / DEFAULT_HOME_DIRNAME / CONFIG_FILENAME


def load_config(
    config_path: Path | None = None,
    *,
    env: EnvMapping | None = None,
    base: DirmarkConfig | None = None,
) -> DirmarkConfig:
    """Load the YAML configuration file and apply environment overrides.

    A missing configuration file is not an error; defaults are used instead.

    Args:
        config_path: Explicit configuration file. Defaults to `~/.bm/config.yml`.
        env: Environment mapping used for overrides. Defaults to `os.environ`.
        base: Configuration providing the environment prefix.

    Returns:
        Validated DirmarkConfig instance.

    Raises:
        ConfigError: If the file cannot be parsed or values fail validation.
    """
    path = (config_path or default_config_path()).expanduser()
    raw_data = _load_yaml_mapping(path) if path.exists() else {}
    env_mapping = os.environ if env is None else env
    merged = {**raw_data, **_extract_env_overrides(env_mapping, base)}

    try:
        return DirmarkConfig(**merged)
    except ValidationError as exc:
        msg = f"Invalid configuration: {exc}"
        raise ConfigError(msg) from exc


def _load_yaml_mapping(config_path: Path) -> dict[str, Any]:
    """Load YAML data from disk ensuring a mapping result."""
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        msg = f"Unable to parse {config_path.name}: {exc}"
        raise ConfigError(msg) from exc
    except OSError as exc:
        msg = f"Unable to read {config_path}: {exc}"
        raise ConfigError(msg) from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        msg = f"{config_path.name} must contain a YAML mapping"
        raise ConfigError(msg)
    return raw


def _extract_env_overrides(env: EnvMapping, base: DirmarkConfig | None) -> dict[str, Any]:
    """Return configuration overrides sourced from environment variables."""
    config = base or DirmarkConfig()
    prefix = config.env_prefix
    upper_env = {key.upper(): value for key, value in env.items()}

    overrides: dict[str, Any] = {}
    bookmark_key = f"{prefix}BOOKMARK_FILE"
    if bookmark_key in upper_env and upper_env[bookmark_key].strip():
        overrides["bookmark_file"] = upper_env[bookmark_key].strip()

    flag_mapping: dict[str, str] = {
        f"{prefix}ALLOW_DUPLICATES": "allow_duplicates",
        f"{prefix}CONFIRM_DELETE": "confirm_delete",
    }
    for env_key, field_name in flag_mapping.items():
        if env_key in upper_env:
            overrides[field_name] = _parse_env_flag(env_key, upper_env[env_key])

    return overrides


def _parse_env_flag(env_key: str, raw_value: str) -> bool:
    """Parse a boolean environment value."""
    normalized = raw_value.strip().casefold()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    msg = f"{env_key} must be one of {', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}"
    raise ConfigError(msg)
