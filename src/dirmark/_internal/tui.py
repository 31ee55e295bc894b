"""Textual application hosting the interactive bookmark selector."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from typing import ClassVar, TextIO

from textual.app import App, ComposeResult
from textual.binding import Binding, BindingType
from textual.widgets import Static

from dirmark._internal.output.renderers import build_selector_view
from dirmark.selector import (
    SelectorOptions,
    SelectorState,
    SelectorStatus,
    handle_action,
    is_available,
    parse_action,
)
from dirmark.store import BookmarkStore


class TerminalError(RuntimeError):
    """Raised when the selector cannot take over the terminal."""


def ensure_terminal(stream: TextIO | None = None) -> None:
    """Check that keys can be read from an interactive terminal.

    Args:
        stream: Input stream to check. Defaults to standard input.

    Raises:
        TerminalError: If the stream is closed or not a TTY.
    """
    source = stream if stream is not None else sys.stdin
    try:
        interactive = source is not None and source.isatty()
    except ValueError as exc:
        raise TerminalError(f"Unable to use the terminal: {exc}") from exc
    if not interactive:
        raise TerminalError("The selector needs an interactive terminal on standard input.")


class SelectorApp(App[str | None]):
    """Full-screen bookmark list that exits with the chosen path.

    Each key binding feeds one action into the selector state machine. The
    app exits with the selected path, or None when the user quits.
    """

    CSS = """
    Screen {
        background: $background;
    }

    #selector-view {
        height: auto;
        padding: 0 1;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("j,down", "apply('down')", "Down", priority=True),
        Binding("k,up", "apply('up')", "Up", priority=True),
        Binding("u", "apply('add')", "Add", priority=True),
        Binding("exclamation_mark", "apply('delete')", "Delete", priority=True),
        Binding("enter", "apply('confirm')", "Select", priority=True),
        Binding("q,ctrl+c", "apply('quit')", "Quit", priority=True),
        Binding("y,Y", "apply('accept')", "Yes", priority=True),
        Binding("n,N,escape", "apply('reject')", "No", priority=True),
    ]

    def __init__(
        self,
        selector_state: SelectorState,
        *,
        store: BookmarkStore,
        options: SelectorOptions | None = None,
        cwd_provider: Callable[[], str] = os.getcwd,
    ) -> None:
        """Initialize the selector app.

        Args:
            selector_state: Session state, usually seeded from `BookmarkStore.load`.
            store: Store used to persist mutations.
            options: Session behaviour switches.
            cwd_provider: Returns the directory bookmarked by `u`.
        """
        super().__init__()
        self.selector_state = selector_state
        self._store = store
        self._options = options or SelectorOptions()
        self._cwd_provider = cwd_provider

    def compose(self) -> ComposeResult:
        yield Static(id="selector-view")

    def on_mount(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        """Redraw the bookmark panel and footer from the current state."""
        self.query_one("#selector-view", Static).update(build_selector_view(self.selector_state))

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Enable y/n only while a delete is pending, and browsing keys otherwise."""
        if action != "apply" or not parameters:
            return True
        return is_available(
            parse_action(str(parameters[0])),
            confirming=self.selector_state.pending_delete,
        )

    def action_apply(self, name: str) -> None:
        """Apply the bound action, persisting any change to the bookmark list.

        Args:
            name: Name of the selector action bound to the pressed key.
        """
        handle_action(
            self.selector_state,
            parse_action(name),
            store=self._store,
            options=self._options,
            cwd_provider=self._cwd_provider,
        )
        if self.selector_state.status is not SelectorStatus.BROWSING:
            self.exit(self.selector_state.selection)
            return
        self.refresh_view()
        self.refresh_bindings()
