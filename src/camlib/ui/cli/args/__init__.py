"""Command line argument handling package."""

from camlib.ui.cli.args.parser import ArgumentParser
from camlib.ui.cli.args.options import CLIArgs, CompressArgs

__all__ = ["ArgumentParser", "CLIArgs", "CompressArgs"]
