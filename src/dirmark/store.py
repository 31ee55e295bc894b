"""Persistence of the bookmark list."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class StoreError(RuntimeError):
    """Base class for bookmark store failures."""


class StoreReadError(StoreError):
    """Raised when an existing bookmark file cannot be read."""


class StoreWriteError(StoreError):
    """Raised when the bookmark file cannot be written."""


class BookmarkStore:
    """Reads and writes the bookmark file, one directory path per line."""

    def __init__(self, path: Path) -> None:
        self._path = path.expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[str]:
        """Return the saved bookmarks in insertion order.

        Returns:
            Saved paths; an empty list when the file does not exist yet.

        Raises:
            StoreReadError: If the file exists but cannot be read or decoded.
        """
        try:
            raw_text = self._path.read_bytes().decode("utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Unable to read bookmarks from {self._path}: {exc}"
            raise StoreReadError(msg) from exc

        # Only "\n" ends an entry; other Unicode line separators are valid path characters.
        lines = (line.removesuffix("\r") for line in raw_text.split("\n"))
        return [line for line in lines if line.strip()]

    def save(self, bookmarks: Sequence[str]) -> None:
        """Overwrite the bookmark file with the provided paths.

        Args:
            bookmarks: Paths to persist, in order.

        Raises:
            StoreWriteError: If an entry spans lines or writing fails.
        """
        for entry in bookmarks:
            if "\n" in entry or "\r" in entry:
                msg = f"Bookmark paths cannot contain line breaks: {entry!r}"
                raise StoreWriteError(msg)

        payload = "".join(f"{entry}\n" for entry in bookmarks)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            msg = f"Unable to write bookmarks to {self._path}: {exc}"
            raise StoreWriteError(msg) from exc
