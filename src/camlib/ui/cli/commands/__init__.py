"""Command execution package for CLI."""

from camlib.ui.cli.commands.executor import CommandExecutor
from camlib.ui.cli.commands.compress import CompressCommand

__all__ = ["CommandExecutor", "CompressCommand"]
