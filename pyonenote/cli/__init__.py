"""Command line interface for pyonenote."""
