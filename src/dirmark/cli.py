"""Typer CLI application for dirmark."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.markup import escape

from dirmark import (
    BookmarkStore,
    ConfigError,
    SelectorOptions,
    SelectorState,
    StoreReadError,
    StoreWriteError,
    __version__,
    load_config,
)
from dirmark._internal.output.renderers import render_bookmark_table
from dirmark._internal.state import CLIState, build_console, build_output_console
from dirmark._internal.tui import SelectorApp, TerminalError, ensure_terminal

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    pretty_exceptions_enable=False,
    help="Bookmark directories and pick one to cd into: cd \"$(bm)\".",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    bookmark_file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Bookmark file to use instead of the configured one.",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="Configuration file to read instead of ~/.bm/config.yml.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose console output."),
) -> None:
    """Open the bookmark selector and print the chosen directory.

    Args:
        ctx: Typer context that stores shared CLI state.
        bookmark_file: Optional bookmark file override.
        config_path: Optional configuration file override.
        verbose: Whether to enable verbose console logging.
    """
    console = build_console(verbose)
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        console.print(f"[error]Error:[/error] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if bookmark_file is not None:
        config = config.model_copy(update={"bookmark_file": bookmark_file.expanduser()})

    state = CLIState(
        console=console,
        output=build_output_console(),
        config=config,
        store=BookmarkStore(config.bookmark_file),
        verbose=verbose,
    )
    ctx.obj = state
    _log(state, f"Using bookmark file {config.bookmark_file}")

    if ctx.invoked_subcommand is None:
        _run_selector(state)


@app.command()
def version(ctx: typer.Context) -> None:
    """Display the installed dirmark version."""
    state = _ensure_state(ctx)
    state.output.print(f"[success]dirmark {__version__}[/success]")


@app.command("list")
def list_bookmarks(
    ctx: typer.Context,
    plain: bool = typer.Option(False, "--plain", help="Print one path per line without formatting."),
) -> None:
    """Show saved bookmarks without starting the selector.

    Args:
        ctx: Typer context for the current invocation.
        plain: Whether to print bare paths.
    """
    state = _ensure_state(ctx)
    bookmarks = _load_bookmarks(state)

    if plain:
        for path in bookmarks:
            typer.echo(path)
        return

    if not bookmarks:
        state.console.print(
            f"[warning]No bookmarks saved in {state.store.path}. Run `bm add` or press u in the selector.[/warning]"
        )
        return
    render_bookmark_table(state.output, bookmarks)


@app.command()
def add(
    ctx: typer.Context,
    path: Path | None = typer.Argument(None, help="Directory to bookmark. Defaults to the current directory."),
) -> None:
    """Bookmark a directory without starting the selector.

    Args:
        ctx: Typer context for the current invocation.
        path: Directory to bookmark.
    """
    state = _ensure_state(ctx)
    try:
        target = (path or Path.cwd()).expanduser().resolve()
    except OSError as exc:
        _abort(state, f"Unable to resolve the directory to bookmark: {exc}")
    if not target.is_dir():
        _abort(state, f"{target} is not an existing directory.")

    bookmarks = _load_bookmarks(state)
    entry = str(target)
    if not state.config.allow_duplicates and entry in bookmarks:
        state.console.print(f"[warning]{escape(entry)} is already bookmarked.[/warning]")
        return

    bookmarks.append(entry)
    try:
        state.store.save(bookmarks)
    except StoreWriteError as exc:
        _abort(state, str(exc))
    state.console.print(f"[success]Bookmarked {escape(entry)}[/success]")


def _run_selector(state: CLIState) -> None:
    """Run the interactive selector and print the selected path.

    Args:
        state: CLI state.
    """
    selector_state = SelectorState(bookmarks=_load_bookmarks(state))
    options = SelectorOptions(
        allow_duplicates=state.config.allow_duplicates,
        confirm_delete=state.config.confirm_delete,
    )

    try:
        ensure_terminal()
    except TerminalError as exc:
        _abort(state, str(exc))

    selection = SelectorApp(selector_state, store=state.store, options=options).run()

    for error in selector_state.write_errors:
        state.console.print(f"[warning]Warning:[/warning] {escape(error)}")

    if selection is None:
        _log(state, "Selector closed without a selection")
        return
    typer.echo(selection)


def _load_bookmarks(state: CLIState) -> list[str]:
    """Load bookmarks, aborting the CLI when the file cannot be read.

    Args:
        state: CLI state.

    Returns:
        Saved bookmarks in order.
    """
    try:
        bookmarks = state.store.load()
    except StoreReadError as exc:
        _abort(state, str(exc))
    _log(state, f"Loaded {len(bookmarks)} bookmark(s)")
    return bookmarks


def _log(state: CLIState, message: str) -> None:
    """Emit a diagnostic line when verbose output is enabled.

    Args:
        state: CLI state.
        message: Message to log.
    """
    if state.verbose:
        state.console.log(f"[info]{message}[/info]")


def _abort(state: CLIState, message: str, *, exit_code: int = 1) -> NoReturn:
    """Print a styled error message and exit the CLI.

    Args:
        state: CLI state.
        message: Error message to display.
        exit_code: Exit code to use.
    """
    state.console.print(f"[error]Error:[/error] {escape(message)}")
    raise typer.Exit(code=exit_code)


def _ensure_state(ctx: typer.Context) -> CLIState:
    """Return the CLI state created by the callback.

    Args:
        ctx: Typer context.

    Returns:
        CLIState instance.
    """
    state = ctx.obj
    if isinstance(state, CLIState):
        return state
    config = load_config()
    fallback_state = CLIState(
        console=build_console(verbose=False),
        output=build_output_console(),
        config=config,
        store=BookmarkStore(config.bookmark_file),
        verbose=False,
    )
    ctx.obj = fallback_state
    return fallback_state
