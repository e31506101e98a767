"""src/camlib/ui/cli/display/result.py
What: Render the banner and end-of-run summary.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console

from camlib import __version__
from camlib.features.compression import RunReport, RunStatus

from .summary import render_run_summary


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_banner(self, quiet: bool = False) -> None:
        """Print the tool name and version."""

        if quiet:
            return
        self.console.print("[bold underline]CamLib CLI[/bold underline]")
        self.console.print(f"v{__version__}\n")

    def show_report(self, report: RunReport, quiet: bool = False) -> None:
        """Display the outcome of a run.

        Args:
            report: Outcome returned by the application service.
            quiet: Whether to suppress non-error output.
        """
        if quiet or report.status is not RunStatus.COMPLETED:
            return
        render_run_summary(self.console, report)
