"""Development entrypoint that runs the dirmark CLI from a source checkout."""

from __future__ import annotations

from dirmark.cli import app


def main() -> None:
    """Run the Typer application."""
    app(prog_name="bm")


if __name__ == "__main__":
    main()
