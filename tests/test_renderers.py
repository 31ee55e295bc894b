"""Tests for Rich rendering helpers."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from dirmark._internal.output.renderers import (
    DELETE_PROMPT,
    HELP_TEXT,
    build_selector_view,
    directory_exists,
    render_bookmark_table,
)
from dirmark._internal.state import CLI_THEME
from dirmark.selector import SelectorState


def _render(state: SelectorState, *, missing: frozenset[str] = frozenset()) -> str:
    """Render the selector view to plain text."""
    console = Console(record=True, width=100, theme=CLI_THEME)
    console.print(build_selector_view(state, exists=lambda path: path not in missing))
    return console.export_text()


def test_selector_view_marks_cursor_row() -> None:
    """The highlighted bookmark should carry the arrow marker."""
    text = _render(SelectorState(bookmarks=["/home/a", "/home/b"], cursor=1))

    assert "Bookmarks" in text
    assert "→ /home/b" in text
    assert "→ /home/a" not in text
    assert HELP_TEXT in text


def test_selector_view_flags_missing_directories() -> None:
    """Bookmarks whose directory is gone should be flagged."""
    text = _render(SelectorState(bookmarks=["/gone", "/here"]), missing=frozenset({"/gone"}))

    assert "/gone (missing)" in text
    assert "/here (missing)" not in text


def test_selector_view_shows_empty_hint() -> None:
    """An empty list should explain how to add a bookmark."""
    text = _render(SelectorState())

    assert "Press u to bookmark the current directory" in text


def test_selector_view_shows_delete_prompt() -> None:
    """Pending deletes should replace the help line with the prompt."""
    text = _render(SelectorState(bookmarks=["/a"], pending_delete=True))

    assert DELETE_PROMPT in text
    assert HELP_TEXT not in text


def test_selector_view_prefers_errors_over_messages() -> None:
    """Save failures should be shown in the footer."""
    state = SelectorState(bookmarks=["/a"], message="Added /a", error="Save failed: disk full")

    text = _render(state)

    assert "Save failed: disk full" in text
    assert "Added /a" not in text


def test_selector_view_does_not_interpret_markup_in_paths() -> None:
    """Paths containing brackets should be rendered verbatim."""
    text = _render(SelectorState(bookmarks=["/tmp/[red]odd"]))

    assert "/tmp/[red]odd" in text


def test_selector_view_renders_without_cli_theme() -> None:
    """The view should render on a console that lacks the CLI theme."""
    console = Console(record=True, width=100)

    console.print(build_selector_view(SelectorState(bookmarks=["/a"], error="Save failed"), exists=lambda _path: False))

    text = console.export_text()
    assert "→ /a (missing)" in text
    assert "Save failed" in text


def test_render_bookmark_table_lists_paths(tmp_path: Path) -> None:
    """The list table should show numbered paths and their status."""
    existing = tmp_path / "present"
    existing.mkdir()
    console = Console(record=True, width=240, theme=CLI_THEME)

    render_bookmark_table(console, [str(existing), str(tmp_path / "absent")])
    text = console.export_text()

    assert str(existing) in text
    assert "missing" in text
    assert "ok" in text


def test_directory_exists(tmp_path: Path) -> None:
    """directory_exists should only accept directories."""
    file_path = tmp_path / "file.txt"
    file_path.write_text("data", encoding="utf-8")

    assert directory_exists(str(tmp_path)) is True
    assert directory_exists(str(file_path)) is False
    assert directory_exists(str(tmp_path / "absent")) is False
