"""Display management for CLI interface."""

from camlib.ui.cli.display.progress import ProgressDisplay
from camlib.ui.cli.display.result import ResultDisplay

__all__ = ["ProgressDisplay", "ResultDisplay"]
