"""src/camlib/ui/cli/commands/compress.py
What: Execute a compression run via the CLI.
Why: Bridge parsed arguments with the application service.
"""

from typing_extensions import override

from camlib.features.compression import RunReport
from camlib.ui.cli.commands.executor import CommandExecutor


class CompressCommand(CommandExecutor):
    """Command for compressing the images named on the command line."""

    @override
    def execute(self) -> RunReport:
        self.result_display.show_banner(quiet=self.args.quiet)
        report = self.progress_display.run_with_service(
            self.app,
            self.request,
            quiet=self.args.quiet,
        )
        self.result_display.show_report(report, quiet=self.args.quiet)
        return report
