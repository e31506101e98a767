# /*
# Where: features/compression/usecases/worker.py
# What: Per-file state machine: submit, evaluate, fetch (optionally resized), write, record.
# Why: Keep one file's network and disk work isolated from every other file.
# Assumptions:
# - The client decodes responses into tagged variants before they reach this module.
# - The destination is the source path itself; it is only truncated once the
#   result download has been accepted by the service.
# Trade-offs:
# - The digest recorded in the cache is always recomputed from disk after the
#   sink is closed, costing one extra read per compressed file.
# */

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from camlib.platform.logging import format_bytes, logger
from camlib.platform.tinify import (
    FetchError,
    OtherError,
    QuotaExceeded,
    ShrinkSuccess,
    TransportError,
    TransportFailure,
    Unauthorized,
    Unparsable,
)

from ..domain.models import FailureKind, WorkOutcome, WorkState, saved_percent
from .hashing import calculate_file_hash
from .in_flight import InFlightTracker
from .ports import CacheStorePort, ShrinkClientPort
from .processing_types import ProcessingEvent, WorkResult, WorkUnit


class CompressionWorker:
    """Drive one work unit from submission to a terminal outcome."""

    def __init__(
        self,
        client: ShrinkClientPort,
        cache_store: CacheStorePort,
        tracker: InFlightTracker,
        *,
        hasher: Callable[[Path], str] = calculate_file_hash,
    ) -> None:
        self._client: ShrinkClientPort = client
        self._cache_store: CacheStorePort = cache_store
        self._tracker: InFlightTracker = tracker
        self._hasher: Callable[[Path], str] = hasher

    def run(self, unit: WorkUnit) -> WorkResult:
        """Process ``unit`` and report its outcome.

        Never raises for per-file problems; they are returned as failed
        results so the rest of the batch keeps going.
        """
        try:
            result = self._process(unit)
        except Exception as exc:
            logger.debug("Unhandled error while compressing %s", unit.path, exc_info=True)
            result = self._failed(
                unit,
                WorkState.FAILED,
                FailureKind.UNEXPECTED,
                str(exc) or type(exc).__name__,
            )
        self._report(unit, result)
        return result

    def _process(self, unit: WorkUnit) -> WorkResult:
        try:
            with self._tracker.track():
                response = self._client.submit(unit.path)
        except OSError as exc:
            return self._failed(unit, WorkState.SUBMITTING, FailureKind.LOCAL_IO, str(exc))

        match response:
            case TransportFailure(reason=reason):
                return self._failed(unit, WorkState.AWAITING_RESPONSE, FailureKind.TRANSPORT, reason)
            case Unparsable(reason=reason):
                return self._failed(unit, WorkState.AWAITING_RESPONSE, FailureKind.UNPARSABLE, reason)
            case QuotaExceeded(message=message):
                return self._failed(
                    unit, WorkState.AWAITING_RESPONSE, FailureKind.QUOTA_EXCEEDED, message
                )
            case Unauthorized(message=message):
                return self._failed(
                    unit, WorkState.AWAITING_RESPONSE, FailureKind.UNAUTHORIZED, message
                )
            case OtherError(status=status, code=code, message=message):
                detail = ", ".join(part for part in (code, message) if part)
                return self._failed(
                    unit,
                    WorkState.AWAITING_RESPONSE,
                    FailureKind.REMOTE_ERROR,
                    f"HTTP {status}" + (f": {detail}" if detail else ""),
                )
            case ShrinkSuccess(input_size=input_size, output_size=output_size):
                if output_size >= input_size:
                    return WorkResult(
                        source_path=unit.path,
                        outcome=WorkOutcome.SKIPPED_NO_BENEFIT,
                        final_state=WorkState.SKIPPED,
                        input_size=input_size,
                        output_size=output_size,
                    )
                return self._fetch_and_write(unit, response)

        raise TypeError(f"Unexpected shrink response: {response!r}")

    def _fetch_and_write(self, unit: WorkUnit, success: ShrinkSuccess) -> WorkResult:
        resize = unit.resize.as_payload() if unit.resize.is_active else None
        state = WorkState.FETCHING

        with self._tracker.track():
            try:
                with self._client.stream_result(success.output_url, resize) as chunks:
                    state = WorkState.WRITING
                    with open(unit.path, "wb") as sink:
                        for chunk in chunks:
                            _ = sink.write(chunk)
                digest = self._hasher(unit.path)
            except (FetchError, TransportError) as exc:
                return self._failed(unit, state, FailureKind.FETCH_FAILED, str(exc))
            except OSError as exc:
                return self._failed(unit, state, FailureKind.LOCAL_IO, str(exc))

            self._cache_store.record(unit.path, digest)

        return WorkResult(
            source_path=unit.path,
            outcome=WorkOutcome.COMPRESSED,
            final_state=WorkState.CACHE_UPDATED,
            input_size=success.input_size,
            output_size=success.output_size,
            saved_percent=saved_percent(success.input_size, success.output_size),
            file_hash=digest,
        )

    @staticmethod
    def _failed(
        unit: WorkUnit,
        state: WorkState,
        failure: FailureKind,
        detail: str | None,
    ) -> WorkResult:
        return WorkResult(
            source_path=unit.path,
            outcome=WorkOutcome.FAILED,
            final_state=state,
            failure=failure,
            error_message=detail or failure.describe(),
        )

    @staticmethod
    def _report(unit: WorkUnit, result: WorkResult) -> None:
        extra: dict[str, object] = {
            "source_path": str(unit.path),
            "sequence": unit.sequence,
            "total_files": unit.total,
        }

        if result.outcome is WorkOutcome.COMPRESSED:
            logger.info(
                "Saved %s (%d%%) for `%s`",
                format_bytes(result.saved_bytes),
                result.saved_percent,
                unit.path,
                extra={
                    **extra,
                    "processing_event": ProcessingEvent.FILE_SAVED.value,
                    "saved_bytes": result.saved_bytes,
                    "saved_percent": result.saved_percent,
                },
            )
            return

        if result.outcome is WorkOutcome.SKIPPED_NO_BENEFIT:
            logger.info(
                "Couldn't compress `%s` any further",
                unit.path,
                extra={**extra, "processing_event": ProcessingEvent.FILE_SKIP_NO_BENEFIT.value},
            )
            return

        failure = result.failure or FailureKind.UNEXPECTED
        reason = failure.describe()
        if result.error_message and result.error_message != reason:
            reason = f"{reason}: {result.error_message}"
        logger.error(
            "Compression failed for `%s` as %s",
            unit.path,
            reason,
            extra={
                **extra,
                "processing_event": ProcessingEvent.FILE_ERROR.value,
                "error_message": reason,
                "failure": failure.value,
            },
        )


__all__ = ["CompressionWorker"]
