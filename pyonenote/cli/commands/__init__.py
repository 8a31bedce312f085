"""Command modules for the pyonenote CLI."""

from pyonenote.cli.commands import page

__all__ = ["page"]
