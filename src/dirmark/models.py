"""Core data models for the dirmark CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_HOME_DIRNAME: Final[str] = ".bm"
DEFAULT_BOOKMARK_FILENAME: Final[str] = "bookmarks"


def default_bookmark_file() -> Path:
    """Return the per-user bookmark file location."""
    return Path.home() / DEFAULT_HOME_DIRNAME / DEFAULT_BOOKMARK_FILENAME


class DirmarkConfig(BaseModel):
    """Tool configuration derived from the config file, environment variables, or defaults."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    bookmark_file: Path = Field(default_factory=default_bookmark_file)
    allow_duplicates: bool = True
    confirm_delete: bool = False
    env_prefix: str = Field(default="BM_")

    @field_validator("bookmark_file", mode="before")
    @classmethod
    def expand_bookmark_file(cls, value: Any) -> Path:
        """Expand user paths while keeping lazy resolution."""
        if isinstance(value, Path):
            return value.expanduser()
        normalized = str(value).strip()
        if not normalized:
            msg = "bookmark_file cannot be blank"
            raise ValueError(msg)
        return Path(normalized).expanduser()

    @field_validator("env_prefix")
    @classmethod
    def normalize_prefix(cls, value: str) -> str:
        """Ensure environment prefixes are uppercase and suffixed with an underscore."""
        normalized = value.strip().upper()
        if not normalized:
            msg = "env_prefix cannot be blank"
            raise ValueError(msg)
        if not normalized.endswith("_"):
            normalized = f"{normalized}_"
        return normalized
