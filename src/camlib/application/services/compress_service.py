"""Application service for compressing images.

This layer centralizes orchestration and construction of feature and
platform objects so that UIs only translate arguments into a request.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import final

from camlib.features.compression import (
    CacheStore,
    CompressionWorker,
    ConcurrencyBudget,
    ResizeDirective,
    RunCoordinator,
    RunReport,
    RunStatus,
    collect_candidates,
    filter_cached,
)
from camlib.features.compression.usecases import (
    InFlightTracker,
    ProcessingEvent,
    calculate_file_hash,
)
from camlib.features.compression.usecases.coordinator import ProgressCallback
from camlib.features.compression.usecases.ports import ShrinkClientPort
from camlib.platform.logging import logger
from camlib.platform.tinify import TinifyHTTPClient

API_KEY_URL = "https://tinypng.com/developers"


@dataclass(frozen=True)
class CompressRequest:
    """Input parameters for a compression run.

    Attributes:
        paths: Files and directories to scan.
        cache_path: Location of the path-to-digest cache map.
        api_key: Key for the compression service; unused in dry-run mode.
        recursive: Walk directories recursively.
        resize: Optional target dimensions.
        force: Ignore the cache map when choosing files.
        dry_run: Report what would be compressed without doing it.
        max_files: Maximum number of files to compress, -1 for no limit.
    """

    paths: Sequence[Path] = field(default_factory=lambda: [Path(".")])
    cache_path: Path = Path(".camlib.cache.json")
    api_key: str | None = None
    recursive: bool = False
    resize: ResizeDirective = field(default_factory=ResizeDirective)
    force: bool = False
    dry_run: bool = False
    max_files: int = -1


@final
class CompressImagesService:
    """Application service that orchestrates one compression run."""

    def __init__(
        self,
        *,
        client_factory: Callable[[str], ShrinkClientPort] | None = None,
        cache_loader: Callable[[Path], CacheStore] | None = None,
        hasher: Callable[[Path], str] | None = None,
    ) -> None:
        """Create a service with overridable infrastructure factories.

        Tests can inject light-weight doubles while production code relies on
        the ``requests`` client and the JSON cache map.
        """

        self._client_factory: Callable[[str], ShrinkClientPort] = (
            client_factory or TinifyHTTPClient
        )
        self._cache_loader: Callable[[Path], CacheStore] = cache_loader or CacheStore.load
        self._hasher: Callable[[Path], str] = hasher or calculate_file_hash

    def run(
        self,
        request: CompressRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> RunReport:
        """Execute a run for ``request``.

        Args:
            request: Compression parameters.
            progress_callback: Called with ``(completed, total, path)`` as units settle.

        Returns:
            RunReport: Outcome of the run. Missing credentials and an empty
            work list are reported through ``status`` rather than raised.
        """
        if not request.dry_run and not request.api_key:
            logger.error("No API key specified. You can get one at %s.", API_KEY_URL)
            return RunReport(status=RunStatus.MISSING_CREDENTIALS, dry_run=request.dry_run)

        cache_store = self._cache_loader(request.cache_path)
        candidates = collect_candidates(request.paths, recursive=request.recursive)
        pending = filter_cached(
            candidates, cache_store, force=request.force, hasher=self._hasher
        )

        if not pending:
            logger.warning(
                "No previously uncompressed PNG or JPEG images found. "
                "Use the `--force` flag to force recompression...",
                extra={"processing_event": ProcessingEvent.RUN_NO_FILES.value},
            )
            return RunReport(status=RunStatus.NO_FILES, dry_run=request.dry_run)

        logger.info(
            "Found %d image%s",
            len(pending),
            "" if len(pending) == 1 else "s",
            extra={
                "processing_event": ProcessingEvent.RUN_START.value,
                "total_files": len(pending),
                "dry_run": request.dry_run,
            },
        )

        budget = ConcurrencyBudget(request.max_files)
        if request.dry_run:
            coordinator = RunCoordinator(
                cache_store,
                None,
                budget=budget,
                resize=request.resize,
                dry_run=True,
                progress_callback=progress_callback,
            )
            return coordinator.run(pending)

        assert request.api_key is not None
        client = self._client_factory(request.api_key)
        try:
            coordinator = RunCoordinator(
                cache_store,
                self._worker_factory(client, cache_store),
                budget=budget,
                resize=request.resize,
                progress_callback=progress_callback,
            )
            return coordinator.run(pending)
        finally:
            client.close()

    def _worker_factory(
        self,
        client: ShrinkClientPort,
        cache_store: CacheStore,
    ) -> Callable[[InFlightTracker], CompressionWorker]:
        def _build(tracker: InFlightTracker) -> CompressionWorker:
            return CompressionWorker(client, cache_store, tracker, hasher=self._hasher)

        return _build


__all__ = ["API_KEY_URL", "CompressImagesService", "CompressRequest"]
