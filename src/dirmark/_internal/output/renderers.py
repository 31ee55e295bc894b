"""Rich rendering utilities for the selector view and bookmark tables."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Final

from rich import box
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dirmark._internal.state import CLI_THEME
from dirmark.selector import SelectorState

HIGHLIGHT_SYMBOL: Final[str] = "→ "
HELP_TEXT: Final[str] = "j/k: move  u: add bookmark  !: delete  Enter: select  q: quit"
DELETE_PROMPT: Final[str] = "Delete this bookmark? (y/n)"
_MISSING_SUFFIX: Final[str] = " (missing)"

# Resolved up front so the view also renders on consoles without the CLI theme.
_STYLES = CLI_THEME.styles

DirectoryCheck = Callable[[str], bool]


def directory_exists(path: str) -> bool:
    """Return True if path points at an existing directory."""
    return Path(path).is_dir()


def build_selector_view(
    state: SelectorState,
    *,
    exists: DirectoryCheck = directory_exists,
) -> RenderableType:
    """Build the renderable shown for the current selector state.

    Args:
        state: Selector state to display.
        exists: Predicate used to flag bookmarks whose directory is gone.

    Returns:
        Renderable containing the bookmark panel and the footer line.
    """
    body = Text()
    if not state.bookmarks:
        body.append("No bookmarks yet. Press u to bookmark the current directory.", style="dim")
    for index, path in enumerate(state.bookmarks):
        if index:
            body.append("\n")
        body.append_text(_bookmark_line(path, selected=index == state.cursor, exists=exists(path)))

    panel = Panel(body, title="Bookmarks", title_align="left", box=box.ROUNDED, border_style=_STYLES["info"])
    return Group(panel, _footer(state))


def render_bookmark_table(
    console: Console,
    bookmarks: Sequence[str],
    *,
    exists: DirectoryCheck = directory_exists,
) -> None:
    """Render a table of bookmarks for the list command.

    Args:
        console: Rich console for output.
        bookmarks: Saved paths in order.
        exists: Predicate used to flag bookmarks whose directory is gone.
    """
    table = Table(title="Bookmarks", header_style="bold", show_lines=False, box=box.MINIMAL_DOUBLE_HEAD)
    table.add_column("#", justify="right", style="info")
    table.add_column("Path", style="text")
    table.add_column("Status")

    for index, path in enumerate(bookmarks, start=1):
        status = Text("ok", style="success") if exists(path) else Text("missing", style="missing")
        table.add_row(str(index), Text(path), status)

    console.print(table)


def _bookmark_line(path: str, *, selected: bool, exists: bool) -> Text:
    """Return a single list row."""
    prefix = HIGHLIGHT_SYMBOL if selected else " " * len(HIGHLIGHT_SYMBOL)
    line = Text(prefix)
    line.append(path)
    if not exists:
        line.append(_MISSING_SUFFIX, style=_STYLES["missing"])
    if selected:
        line.stylize(_STYLES["cursor"])
    return line


def _footer(state: SelectorState) -> Text:
    """Return the help line, delete prompt, or latest status message."""
    if state.pending_delete:
        return Text(DELETE_PROMPT, style=_STYLES["warning"])
    if state.error:
        return Text(state.error, style=_STYLES["error"])
    if state.message:
        return Text(state.message, style=_STYLES["info"])
    return Text(HELP_TEXT, style="dim")
