"""src/camlib/features/compression/usecases/coordinator.py
What: Admit candidates, dispatch work units, wait for drain, flush the cache map once.
Why: Own the run-wide mutable state (budget, in-flight count) in one place.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path

from camlib.config.settings import WORKER_THREADS
from camlib.platform.logging import logger

from ..domain.models import FailureKind, ResizeDirective, WorkOutcome, WorkState
from .in_flight import InFlightTracker
from .limiter import ConcurrencyBudget
from .ports import CacheStorePort
from .processing_types import (
    ProcessingEvent,
    ProcessingLogContext,
    RunReport,
    RunStatus,
    WorkResult,
    WorkUnit,
)
from .worker import CompressionWorker

ProgressCallback = Callable[[int, int, Path], None]
WorkerFactory = Callable[[InFlightTracker], CompressionWorker]


class RunCoordinator:
    """Run one batch of work units and checkpoint the cache afterwards."""

    def __init__(
        self,
        cache_store: CacheStorePort,
        worker_factory: WorkerFactory | None,
        *,
        budget: ConcurrencyBudget | None = None,
        resize: ResizeDirective | None = None,
        dry_run: bool = False,
        max_workers: int = WORKER_THREADS,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            cache_store: Store updated by workers and flushed at the end.
            worker_factory: Builds a worker bound to this run's tracker. May be
                None in dry-run mode, where no worker is ever created.
            budget: Admission budget; unbounded when omitted.
            resize: Directive applied to every unit.
            dry_run: Report what would run without touching network or disk.
            max_workers: Upper bound on threads running units at once.
            progress_callback: Called with ``(completed, total, path)``.
        """
        self._cache_store: CacheStorePort = cache_store
        self._worker_factory: WorkerFactory | None = worker_factory
        self._budget: ConcurrencyBudget = budget or ConcurrencyBudget()
        self._resize: ResizeDirective = resize or ResizeDirective()
        self._dry_run: bool = dry_run
        self._max_workers: int = max(1, max_workers)
        self._progress_callback: ProgressCallback | None = progress_callback
        self._tracker: InFlightTracker = InFlightTracker()

    @property
    def tracker(self) -> InFlightTracker:
        """Expose the in-flight tracker for diagnostics and tests."""

        return self._tracker

    def run(self, candidates: Sequence[Path]) -> RunReport:
        """Admit, dispatch and settle every candidate.

        Returns:
            RunReport: Per-unit results plus the rejected paths.
        """
        admission = self._budget.admit(candidates)
        for rejected in admission.rejected:
            logger.info(
                "Maximum reached, not compressing `%s` in this run",
                rejected,
                extra={
                    "processing_event": ProcessingEvent.FILE_SKIP_LIMIT.value,
                    "source_path": str(rejected),
                },
            )

        total = len(admission.admitted)
        units = [
            WorkUnit(path=path, resize=self._resize, sequence=index, total=total)
            for index, path in enumerate(admission.admitted, start=1)
        ]
        stats = ProcessingLogContext(total_files=total, dry_run=self._dry_run)
        report = RunReport(
            status=RunStatus.COMPLETED,
            rejected=list(admission.rejected),
            dry_run=self._dry_run,
        )

        if self._dry_run:
            report.results = self._simulate(units)
        else:
            report.results = self._dispatch(units, stats)
            report.cache_flushed = self._checkpoint()

        logger.log(
            logging.DEBUG if self._dry_run else logging.INFO,
            "Run complete [compressed=%d, skipped=%d, failed=%d]",
            stats.compressed,
            stats.skipped,
            stats.failed,
            extra=stats.summary_extra(),
        )
        return report

    def _simulate(self, units: Sequence[WorkUnit]) -> list[WorkResult]:
        results: list[WorkResult] = []
        for completed, unit in enumerate(units, start=1):
            logger.info(
                "[DRY] Would compress `%s`",
                unit.path,
                extra={
                    "processing_event": ProcessingEvent.FILE_DRY_RUN.value,
                    "source_path": str(unit.path),
                },
            )
            results.append(
                WorkResult(source_path=unit.path, outcome=WorkOutcome.DRY_RUN, dry_run=True)
            )
            self._notify(completed, len(units), unit.path)
        return results

    def _dispatch(
        self,
        units: Sequence[WorkUnit],
        stats: ProcessingLogContext,
    ) -> list[WorkResult]:
        if not units:
            return []
        if self._worker_factory is None:
            raise RuntimeError("A worker factory is required outside dry-run mode")

        worker = self._worker_factory(self._tracker)
        results: list[WorkResult] = []
        thread_count = min(self._max_workers, len(units))

        with ThreadPoolExecutor(max_workers=thread_count, thread_name_prefix="camlib-worker") as pool:
            futures: dict[Future[WorkResult], WorkUnit] = {
                pool.submit(worker.run, unit): unit for unit in units
            }
            for completed, future in enumerate(as_completed(futures), start=1):
                unit = futures[future]
                try:
                    result = future.result()
                except Exception as exc:
                    logger.error("Work unit for `%s` crashed: %s", unit.path, exc)
                    result = WorkResult(
                        source_path=unit.path,
                        outcome=WorkOutcome.FAILED,
                        final_state=WorkState.FAILED,
                        failure=FailureKind.UNEXPECTED,
                        error_message=str(exc) or type(exc).__name__,
                    )
                stats.record(result)
                results.append(result)
                self._notify(completed, len(units), unit.path)

        return results

    def _checkpoint(self) -> bool:
        """Flush the cache map after every outstanding operation has settled."""

        _ = self._tracker.wait_for_drain()
        try:
            self._cache_store.flush()
        except OSError as exc:
            logger.error("Failed to save cache map: %s", exc)
            return False

        logger.debug(
            "Cache map saved",
            extra={
                "processing_event": ProcessingEvent.CACHE_FLUSHED.value,
                "entries": len(self._cache_store),
                "cache_path": str(self._cache_store.path),
            },
        )
        return True

    def _notify(self, completed: int, total: int, path: Path) -> None:
        if self._progress_callback is not None:
            self._progress_callback(completed, total, path)


__all__ = ["ProgressCallback", "RunCoordinator", "WorkerFactory"]
