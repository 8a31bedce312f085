#!/usr/bin/env python
"""Command line interface for pyonenote."""

import logging

import typer
from rich.logging import RichHandler

from pyonenote.cli.commands import page

app = typer.Typer(help="Render OneNote page dumps to HTML")

app.add_typer(page.app, name="page")


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
):
    """Convert decoded OneNote content into HTML fragments."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[
            RichHandler(
                rich_tracebacks=True,
                markup=True,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
    )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
