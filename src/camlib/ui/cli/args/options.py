"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import final

from camlib.features.compression import ResizeDirective


@final
@dataclass(slots=True)
class CompressArgs:
    """Validated command line arguments for a compression run."""

    paths: list[Path]
    cache_path: Path
    api_key: str | None
    recursive: bool
    force: bool
    dry_run: bool
    max_files: int
    verbose: bool
    quiet: bool
    resize: ResizeDirective = field(default_factory=ResizeDirective)


CLIArgs = CompressArgs

__all__ = ["CLIArgs", "CompressArgs"]
