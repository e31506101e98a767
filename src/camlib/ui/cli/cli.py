"""Command line interface for CamLib."""

import sys
from typing import final

from camlib.features.compression import RunStatus
from camlib.platform.logging import logger
from camlib.ui.cli.args import ArgumentParser
from camlib.ui.cli.commands import CompressCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Per-file failures are reported but do not change the exit status;
        only a missing API key or an unexpected error exits with 1.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            report = CompressCommand(args).execute()
            if report.status is RunStatus.MISSING_CREDENTIALS:
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
