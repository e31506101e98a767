"""Compression feature package.

Re-exports the public surface used by the application and UI layers.
"""

from .domain import FailureKind, ResizeDirective, WorkOutcome, WorkState, saved_percent
from .usecases import (
    CacheStore,
    CompressionWorker,
    ConcurrencyBudget,
    RunCoordinator,
    RunReport,
    RunStatus,
    WorkResult,
    collect_candidates,
    filter_cached,
)

__all__ = [
    "CacheStore",
    "CompressionWorker",
    "ConcurrencyBudget",
    "FailureKind",
    "ResizeDirective",
    "RunCoordinator",
    "RunReport",
    "RunStatus",
    "WorkOutcome",
    "WorkResult",
    "WorkState",
    "collect_candidates",
    "filter_cached",
    "saved_percent",
]
