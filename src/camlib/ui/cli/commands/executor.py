"""src/camlib/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse service construction and presentation helpers across commands.
"""

from abc import ABC, abstractmethod

from camlib.application.services.compress_service import CompressImagesService, CompressRequest
from camlib.features.compression import RunReport
from camlib.ui.cli.args.options import CompressArgs
from camlib.ui.cli.display.progress import ProgressDisplay
from camlib.ui.cli.display.result import ResultDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    args: CompressArgs
    app: CompressImagesService
    request: CompressRequest
    progress_display: ProgressDisplay
    result_display: ResultDisplay

    def __init__(self, args: CompressArgs, app: CompressImagesService | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            app: Application service (injected for testing).
        """
        self.args = args
        self.app = app or CompressImagesService()
        self.request = CompressRequest(
            paths=args.paths,
            cache_path=args.cache_path,
            api_key=args.api_key,
            recursive=args.recursive,
            resize=args.resize,
            force=args.force,
            dry_run=args.dry_run,
            max_files=args.max_files,
        )
        self.progress_display = ProgressDisplay()
        self.result_display = ResultDisplay()

    @abstractmethod
    def execute(self) -> RunReport:
        """Execute the command.

        Returns:
            RunReport: Outcome of the run.
        """
        pass
