"""Command line interface package."""

from camlib.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
