"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from camlib import __version__
from camlib.config.config import Config
from camlib.config.credentials import resolve_api_key
from camlib.config.paths import resolve_cache_path
from camlib.features.compression import ResizeDirective
from camlib.features.compression.usecases import UNBOUNDED
from camlib.platform.logging import logger, setup_logger
from camlib.ui.cli.args.options import CompressArgs

EPILOG = """\
Examples:
  camlib .
  camlib assets/img
  camlib assets/img/test.png
  camlib -r --max 20 assets/
"""


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="camlib",
            description="CamLib CLI - compress PNG and JPEG images in place.",
            epilog=EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = parser.add_argument(
            "paths",
            nargs="*",
            default=[],
            help="Image files or directories to compress (defaults to the current directory)",
            metavar="PATH",
        )
        _ = parser.add_argument(
            "-k",
            "--key",
            type=str,
            help="Provide an API key (defaults to the contents of ~/.CamLib)",
        )
        _ = parser.add_argument(
            "-r",
            "--recursive",
            action="store_true",
            help="Walk given directories recursively",
        )
        # Kept as strings so a bad value is reported and ignored rather than aborting the run.
        _ = parser.add_argument(
            "--width",
            type=str,
            help="Resize an image to a specified width",
        )
        _ = parser.add_argument(
            "--height",
            type=str,
            help="Resize an image to a specified height",
        )
        _ = parser.add_argument(
            "--force",
            action="store_true",
            help="Ignore caching to prevent repeat API requests",
        )
        _ = parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Dry run -- no files actually modified",
        )
        _ = parser.add_argument(
            "-c",
            "--cache",
            type=str,
            help="Cache map location. Defaults to ~/.camlib.cache.json",
        )
        _ = parser.add_argument(
            "-m",
            "--max",
            type=int,
            default=UNBOUNDED,
            help="Maximum number of images to compress in this run. Defaults to -1 (no max)",
        )
        _ = parser.add_argument(
            "-v",
            "--version",
            action="version",
            version=__version__,
            help="Show installed version",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CompressArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CompressArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        resize = ResizeDirective(
            width=ArgumentParser._parse_dimension("width", parsed_args.width),
            height=ArgumentParser._parse_dimension("height", parsed_args.height),
        )

        dry_run: bool = parsed_args.dry_run
        api_key = None if dry_run else resolve_api_key(parsed_args.key)

        return CompressArgs(
            paths=[Path(path) for path in parsed_args.paths] or [Path(".")],
            cache_path=resolve_cache_path(parsed_args.cache),
            api_key=api_key,
            recursive=parsed_args.recursive,
            force=parsed_args.force,
            dry_run=dry_run,
            max_files=parsed_args.max,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            resize=resize,
        )

    @staticmethod
    def _parse_dimension(name: str, raw: str | None) -> int | None:
        """Return a positive integer dimension, or None when absent or invalid."""

        if raw is None:
            return None
        try:
            value = int(raw.strip())
        except ValueError:
            value = 0
        if value <= 0:
            logger.error("Invalid %s specified. Please specify a numeric value only.", name)
            return None
        return value
