"""Shared TypedDict payloads for tests."""

from __future__ import annotations

from pathlib import Path
from typing import TypedDict


class DirmarkConfigPayload(TypedDict):
    """Schema for dirmark config fixture."""

    bookmark_file: Path
    allow_duplicates: bool
    confirm_delete: bool
    env_prefix: str
