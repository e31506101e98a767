"""Use cases for the batch compression flow."""

from .cache_filter import filter_cached
from .cache_store import CacheStore
from .collector import collect_candidates, is_supported_image
from .coordinator import ProgressCallback, RunCoordinator
from .hashing import calculate_file_hash
from .in_flight import InFlightTracker
from .limiter import UNBOUNDED, Admission, ConcurrencyBudget
from .processing_types import (
    ProcessingEvent,
    RunReport,
    RunStatus,
    WorkResult,
    WorkUnit,
)
from .worker import CompressionWorker

__all__ = [
    "Admission",
    "CacheStore",
    "CompressionWorker",
    "ConcurrencyBudget",
    "InFlightTracker",
    "ProcessingEvent",
    "ProgressCallback",
    "RunCoordinator",
    "RunReport",
    "RunStatus",
    "UNBOUNDED",
    "WorkResult",
    "WorkUnit",
    "calculate_file_hash",
    "collect_candidates",
    "filter_cached",
    "is_supported_image",
]
