"""src/camlib/features/compression/usecases/processing_types.py
Where: Compression feature usecases layer.
What: Shared enums and dataclasses for the batch compression flow.
Why: Keep worker and coordinator lean by centralising type definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from ..domain.models import FailureKind, ResizeDirective, WorkOutcome, WorkState


class ProcessingEvent(StrEnum):
    """Structured event identifiers for compression logs."""

    RUN_START = "compression.run.start"
    RUN_NO_FILES = "compression.run.no_files"
    RUN_COMPLETE = "compression.run.complete"
    FILE_DRY_RUN = "compression.file.dry_run"
    FILE_SAVED = "compression.file.saved"
    FILE_SKIP_NO_BENEFIT = "compression.file.skip.no_benefit"
    FILE_SKIP_LIMIT = "compression.file.skip.limit"
    FILE_ERROR = "compression.file.error"
    CACHE_FLUSHED = "compression.cache.flushed"


class RunStatus(StrEnum):
    """How a run ended."""

    COMPLETED = "completed"
    NO_FILES = "no_files"
    MISSING_CREDENTIALS = "missing_credentials"


@dataclass(slots=True, frozen=True)
class WorkUnit:
    """Processing context for one admitted file."""

    path: Path
    resize: ResizeDirective = field(default_factory=ResizeDirective)
    sequence: int | None = None
    total: int | None = None


@dataclass
class WorkResult:
    """Result of processing one file."""

    source_path: Path
    outcome: WorkOutcome
    final_state: WorkState | None = None
    failure: FailureKind | None = None
    error_message: str | None = None
    input_size: int | None = None
    output_size: int | None = None
    saved_percent: int | None = None
    file_hash: str | None = None
    dry_run: bool = False

    @property
    def success(self) -> bool:
        return self.outcome is not WorkOutcome.FAILED

    @property
    def saved_bytes(self) -> int:
        if self.outcome is not WorkOutcome.COMPRESSED:
            return 0
        if self.input_size is None or self.output_size is None:
            return 0
        return self.input_size - self.output_size


@dataclass
class RunReport:
    """Aggregate outcome of one invocation."""

    status: RunStatus
    results: list[WorkResult] = field(default_factory=list)
    rejected: list[Path] = field(default_factory=list)
    cache_flushed: bool = False
    dry_run: bool = False

    def count(self, outcome: WorkOutcome) -> int:
        return sum(1 for result in self.results if result.outcome is outcome)

    @property
    def total_saved_bytes(self) -> int:
        return sum(result.saved_bytes for result in self.results)


@dataclass(slots=True)
class ProcessingLogContext:
    """Mutable bookkeeping for a run, rendered into the completion event."""

    total_files: int
    dry_run: bool
    start_time: float = field(default_factory=time.perf_counter)
    compressed: int = 0
    skipped: int = 0
    failed: int = 0

    def record(self, result: WorkResult) -> None:
        """Count ``result`` under its outcome."""

        if result.outcome is WorkOutcome.FAILED:
            self.failed += 1
        elif result.outcome is WorkOutcome.SKIPPED_NO_BENEFIT:
            self.skipped += 1
        elif result.outcome is WorkOutcome.COMPRESSED:
            self.compressed += 1

    def duration_seconds(self) -> float:
        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "processing_event": ProcessingEvent.RUN_COMPLETE.value,
            "total_files": self.total_files,
            "compressed": self.compressed,
            "skipped": self.skipped,
            "failed": self.failed,
            "dry_run": self.dry_run,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


__all__ = [
    "ProcessingEvent",
    "ProcessingLogContext",
    "RunReport",
    "RunStatus",
    "WorkResult",
    "WorkUnit",
]
