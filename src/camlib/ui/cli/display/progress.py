"""Progress display functionality for CLI."""

from pathlib import Path
from typing import Any, Callable, Protocol, final, runtime_checkable

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn

from camlib.application.services.compress_service import CompressRequest
from camlib.features.compression import RunReport
from camlib.platform.logging import CamlibRichHandler, logger


@runtime_checkable
class CompressServiceLike(Protocol):
    """Protocol for application services that can run a batch with progress."""

    def run(
        self,
        request: CompressRequest,
        progress_callback: Callable[[int, int, Path], None] | None = None,
    ) -> RunReport:
        ...


@final
class ProgressDisplay:
    """Handles progress display in CLI."""

    def run_with_service(
        self,
        app: CompressServiceLike,
        request: CompressRequest,
        *,
        quiet: bool = False,
    ) -> RunReport:
        """Run a compression batch via the application service with a progress bar.

        Args:
            app: Application service instance used to orchestrate processing.
            request: Compression parameters.
            quiet: Skip the progress bar entirely.

        Returns:
            RunReport: Outcome reported by the service.
        """
        if quiet:
            return app.run(request)

        progress_console: Console | None = None
        for handler in logger.handlers:
            if isinstance(handler, CamlibRichHandler):
                progress_console = handler.console
                break

        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        if progress_console is not None:
            progress_kwargs["console"] = progress_console

        with Progress(
            TextColumn("[bold]Processing..."),
            BarColumn(),
            MofNCompleteColumn(),
            **progress_kwargs,
        ) as progress:
            task_id: TaskID | None = None

            def _cb(completed: int, total: int, current_file: Path) -> None:
                nonlocal task_id
                _ = current_file  # reported through logging by the worker
                if task_id is None:
                    task_id = progress.add_task("compress", total=total)
                progress.update(task_id, completed=completed)

            return app.run(request, progress_callback=_cb)
