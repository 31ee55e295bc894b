"""Shared pytest fixtures for dirmark."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from dirmark.store import BookmarkStore

from .payloads import DirmarkConfigPayload


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a scratch directory and drop BM_* overrides from the environment."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.upper().startswith("BM_"):
            monkeypatch.delenv(key)
    return home


@pytest.fixture
def dirmark_config_payload(tmp_path: Path) -> DirmarkConfigPayload:
    """Provide overrides for the DirmarkConfig model."""
    return {
        "bookmark_file": tmp_path / "data" / "bookmarks",
        "allow_duplicates": False,
        "confirm_delete": True,
        "env_prefix": "dm",
    }


@pytest.fixture
def bookmark_file(tmp_path: Path) -> Path:
    """Return a bookmark file location that does not exist yet."""
    return tmp_path / "bm" / "bookmarks"


@pytest.fixture
def store(bookmark_file: Path) -> BookmarkStore:
    """Return a store backed by the scratch bookmark file."""
    return BookmarkStore(bookmark_file)


@pytest.fixture
def sample_directories(tmp_path: Path) -> list[str]:
    """Create three real directories and return their paths."""
    paths: list[str] = []
    for name in ("alpha", "beta", "gamma"):
        directory = tmp_path / "dirs" / name
        directory.mkdir(parents=True)
        paths.append(str(directory))
    return paths
