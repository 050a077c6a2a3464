"""Command-line interface for tis620."""

from tis620.cli.main import main

__all__ = ["main"]
