"""Command line interface for bibscan."""

from bibscan.cli.main import cli

__all__ = ["cli"]
