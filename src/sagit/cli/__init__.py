"""Command-line interface."""

from sagit.cli.main import cli

__all__ = ["cli"]
