"""Public exports for the dirmark package."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version
from pathlib import Path

from .config import CONFIG_FILENAME, ConfigError, default_config_path, load_config
from .models import DirmarkConfig, default_bookmark_file
from .selector import (
    KeyAction,
    SelectorOptions,
    SelectorState,
    SelectorStatus,
    apply_action,
    handle_action,
    is_available,
    parse_action,
)
from .store import BookmarkStore, StoreError, StoreReadError, StoreWriteError


def _load_local_version() -> str:
    """Return the package version declared in pyproject.toml when metadata is unavailable."""
    pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
    try:
        raw_text = pyproject_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return "0.0.0"

    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError:
        return "0.0.0"

    project_section = data.get("project")
    if isinstance(project_section, dict):
        version_value = project_section.get("version")
        if isinstance(version_value, str) and version_value.strip():
            return version_value.strip()
    return "0.0.0"


try:
    __version__ = pkg_version("dirmark")
except PackageNotFoundError:
    __version__ = _load_local_version()

__all__ = [
    "CONFIG_FILENAME",
    "BookmarkStore",
    "ConfigError",
    "DirmarkConfig",
    "KeyAction",
    "SelectorOptions",
    "SelectorState",
    "SelectorStatus",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    "__version__",
    "apply_action",
    "default_bookmark_file",
    "default_config_path",
    "handle_action",
    "is_available",
    "load_config",
    "parse_action",
]
