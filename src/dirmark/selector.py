"""Bookmark selector state machine."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Final

from dirmark.store import BookmarkStore, StoreWriteError


class KeyAction(Enum):
    """Actions recognized by the selector."""

    UP = auto()
    DOWN = auto()
    ADD = auto()
    DELETE = auto()
    CONFIRM = auto()
    QUIT = auto()
    ACCEPT = auto()
    REJECT = auto()
    UNKNOWN = auto()


class SelectorStatus(Enum):
    """Lifecycle of a selector session."""

    BROWSING = auto()
    SELECTED = auto()
    QUIT = auto()


_CONFIRM_ACTIONS: Final[frozenset[KeyAction]] = frozenset({KeyAction.ACCEPT, KeyAction.REJECT})


@dataclass(frozen=True, slots=True)
class SelectorOptions:
    """Behaviour switches for a selector session."""

    allow_duplicates: bool = True
    confirm_delete: bool = False


@dataclass(slots=True)
class SelectorState:
    """Mutable state owned by a single selector session.

    Attributes:
        bookmarks: In-memory bookmark list.
        cursor: Index of the highlighted bookmark.
        status: Whether the session is still browsing or has finished.
        selection: Path captured when the session ends with a selection.
        pending_delete: Whether a delete is waiting for confirmation.
        message: Status line text shown below the list.
        error: Latest failure shown below the list.
        write_errors: Persistence failures raised during the session.
    """

    bookmarks: list[str] = field(default_factory=list)
    cursor: int = 0
    status: SelectorStatus = SelectorStatus.BROWSING
    selection: str | None = None
    pending_delete: bool = False
    message: str | None = None
    error: str | None = None
    write_errors: list[str] = field(default_factory=list)

    @property
    def current(self) -> str | None:
        """Return the bookmark under the cursor, if any."""
        if not self.bookmarks:
            return None
        return self.bookmarks[self.cursor]


def parse_action(name: str) -> KeyAction:
    """Map an action name bound to a key to a selector action.

    Args:
        name: Member name of `KeyAction`, in any case.

    Returns:
        Matching action, or `KeyAction.UNKNOWN`.
    """
    try:
        return KeyAction[name.upper()]
    except KeyError:
        return KeyAction.UNKNOWN


def is_available(action: KeyAction, *, confirming: bool = False) -> bool:
    """Return True if action is accepted in the current mode.

    Only y/n answers are accepted while a delete waits for confirmation,
    and only browsing keys otherwise.
    """
    if action is KeyAction.UNKNOWN:
        return False
    return (action in _CONFIRM_ACTIONS) == confirming


def move_cursor(state: SelectorState, delta: int) -> None:
    """Move the cursor by delta, clamped to the list bounds."""
    if not state.bookmarks:
        state.cursor = 0
        return
    state.cursor = max(0, min(state.cursor + delta, len(state.bookmarks) - 1))


def add_bookmark(state: SelectorState, path: str, *, allow_duplicates: bool = True) -> bool:
    """Append path and move the cursor onto it.

    Returns:
        True when the list changed.
    """
    if not allow_duplicates and path in state.bookmarks:
        state.message = f"{path} is already bookmarked"
        return False
    state.bookmarks.append(path)
    state.cursor = len(state.bookmarks) - 1
    state.message = f"Added {path}"
    return True


def delete_current(state: SelectorState) -> bool:
    """Remove the bookmark under the cursor.

    Returns:
        True when a bookmark was removed.
    """
    state.pending_delete = False
    if not state.bookmarks:
        return False
    removed = state.bookmarks.pop(state.cursor)
    move_cursor(state, 0)
    state.message = f"Removed {removed}"
    return True


def apply_action(
    state: SelectorState,
    action: KeyAction,
    *,
    cwd: str,
    options: SelectorOptions,
) -> bool:
    """Apply a single action to the state.

    Args:
        state: Session state to mutate.
        action: Parsed key action.
        cwd: Working directory used by `KeyAction.ADD`.
        options: Session behaviour switches.

    Returns:
        True when the bookmark list changed and must be persisted.
    """
    if state.status is not SelectorStatus.BROWSING:
        return False

    if state.pending_delete:
        state.error = None
        match action:
            case KeyAction.ACCEPT:
                return delete_current(state)
            case KeyAction.REJECT:
                state.pending_delete = False
                state.message = None
        return False

    state.message = None
    state.error = None
    match action:
        case KeyAction.DOWN:
            move_cursor(state, 1)
        case KeyAction.UP:
            move_cursor(state, -1)
        case KeyAction.ADD:
            return add_bookmark(state, cwd, allow_duplicates=options.allow_duplicates)
        case KeyAction.DELETE:
            if not state.bookmarks:
                return False
            if options.confirm_delete:
                state.pending_delete = True
                return False
            return delete_current(state)
        case KeyAction.CONFIRM:
            if state.current is not None:
                state.selection = state.current
                state.status = SelectorStatus.SELECTED
        case KeyAction.QUIT:
            state.status = SelectorStatus.QUIT
    return False


def handle_action(
    state: SelectorState,
    action: KeyAction,
    *,
    store: BookmarkStore,
    options: SelectorOptions | None = None,
    cwd_provider: Callable[[], str] = os.getcwd,
) -> None:
    """Apply action and write the bookmark list through the store on mutation.

    Failures to read the working directory or to write the file are shown
    on the state and the session continues with the in-memory list.

    Args:
        state: Session state, usually seeded from `BookmarkStore.load`.
        action: Action bound to the pressed key.
        store: Store used to persist mutations.
        options: Session behaviour switches.
        cwd_provider: Returns the directory bookmarked by `u`.
    """
    session_options = options or SelectorOptions()
    cwd = ""
    if action is KeyAction.ADD and not state.pending_delete:
        try:
            cwd = cwd_provider()
        except OSError as exc:
            state.message = None
            state.error = f"Cannot read the current directory: {exc}"
            return

    if apply_action(state, action, cwd=cwd, options=session_options):
        persist(state, store)


def persist(state: SelectorState, store: BookmarkStore) -> None:
    """Write the bookmark list, recording failures on the state."""
    try:
        store.save(state.bookmarks)
    except StoreWriteError as exc:
        state.write_errors.append(str(exc))
        state.error = f"Save failed: {exc}"
