"""Utilities for rendering shared CLI display content."""

from __future__ import annotations

from rich.console import Console

from camlib.features.compression import RunReport, WorkOutcome
from camlib.platform.logging import format_bytes


def render_run_summary(console: Console, report: RunReport) -> None:
    """Render a formatted summary of a compression run.

    Args:
        console: Rich console instance used to render output.
        report: Outcome returned by the application service.
    """
    if report.dry_run:
        console.print(
            f"\n[bold]Dry run:[/bold] {report.count(WorkOutcome.DRY_RUN)} image(s) would be compressed"
        )
        if report.rejected:
            console.print(f"[yellow]Over the maximum: {len(report.rejected)}[/yellow]")
        return

    failures = [result for result in report.results if not result.success]

    console.print("\n[bold]Compression Summary:[/bold]")
    console.print(f"Images submitted: {len(report.results)}")
    console.print(
        f"[green]Compressed: {report.count(WorkOutcome.COMPRESSED)}"
        f" (saved {format_bytes(report.total_saved_bytes)})[/green]"
    )
    console.print(
        f"[yellow]Already optimal: {report.count(WorkOutcome.SKIPPED_NO_BENEFIT)}[/yellow]"
    )
    if report.rejected:
        console.print(f"[yellow]Over the maximum: {len(report.rejected)}[/yellow]")

    if not failures:
        return

    console.print(f"[red]Failed: {len(failures)}[/red]")
    for failed_result in failures:
        reason = failed_result.failure.describe() if failed_result.failure else "unknown error"
        console.print(f"[red]  • {failed_result.source_path}: {reason}[/red]")
