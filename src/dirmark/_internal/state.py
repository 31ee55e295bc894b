"""CLI state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from rich.console import Console
from rich.theme import Theme

from dirmark.models import DirmarkConfig
from dirmark.store import BookmarkStore

CLI_THEME: Final[Theme] = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "green",
        "text": "white",
        "cursor": "black on bright_green",
        "missing": "dim red",
    }
)


@dataclass(slots=True)
class CLIState:
    """State shared between CLI commands during a single invocation."""

    console: Console
    output: Console
    config: DirmarkConfig
    store: BookmarkStore
    verbose: bool


def build_console(verbose: bool) -> Console:
    """Return the diagnostic console, bound to standard error.

    Standard output is reserved for command results so `cd "$(bm)"` only
    ever sees the selected path.

    Args:
        verbose: Whether to enable verbose logging with timestamps.

    Returns:
        Configured Console instance.
    """
    return Console(
        theme=CLI_THEME,
        highlight=False,
        soft_wrap=True,
        stderr=True,
        log_path=False,
        log_time=verbose,
    )


def build_output_console() -> Console:
    """Return the console used for command results on standard output."""
    return Console(theme=CLI_THEME, highlight=False, soft_wrap=True, stderr=False)
