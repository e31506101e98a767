"""Domain value objects for a compression run."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum


class WorkState(StrEnum):
    """States a work unit moves through."""

    SUBMITTING = "submitting"
    AWAITING_RESPONSE = "awaiting_response"
    FETCHING = "fetching"
    WRITING = "writing"
    CACHE_UPDATED = "cache_updated"
    SKIPPED = "skipped"
    FAILED = "failed"


class WorkOutcome(StrEnum):
    """Terminal outcome reported for a work unit."""

    COMPRESSED = "compressed"
    SKIPPED_NO_BENEFIT = "skipped_no_benefit"
    FAILED = "failed"
    DRY_RUN = "dry_run"


class FailureKind(StrEnum):
    """Classification of a failed work unit."""

    TRANSPORT = "transport"
    UNPARSABLE = "unparsable"
    QUOTA_EXCEEDED = "quota_exceeded"
    UNAUTHORIZED = "unauthorized"
    REMOTE_ERROR = "remote_error"
    FETCH_FAILED = "fetch_failed"
    LOCAL_IO = "local_io"
    UNEXPECTED = "unexpected"

    def describe(self) -> str:
        """Return the operator-facing explanation for this failure."""

        return _FAILURE_DESCRIPTIONS[self]


_FAILURE_DESCRIPTIONS: dict[FailureKind, str] = {
    FailureKind.TRANSPORT: "got no response",
    FailureKind.UNPARSABLE: "not a valid JSON response",
    FailureKind.QUOTA_EXCEEDED: "your monthly limit has been exceeded",
    FailureKind.UNAUTHORIZED: "your credentials are invalid",
    FailureKind.REMOTE_ERROR: "the service reported an error",
    FailureKind.FETCH_FAILED: "the compressed image could not be downloaded",
    FailureKind.LOCAL_IO: "the file could not be read or written",
    FailureKind.UNEXPECTED: "an unexpected error occurred",
}


@dataclass(slots=True, frozen=True)
class ResizeDirective:
    """Optional target dimensions for the fetched result."""

    width: int | None = None
    height: int | None = None

    @property
    def is_active(self) -> bool:
        """Whether either dimension was configured."""

        return self.width is not None or self.height is not None

    def as_payload(self) -> dict[str, int]:
        """Return the ``resize`` object sent to the service, omitting unset keys."""

        payload: dict[str, int] = {}
        if self.width is not None:
            payload["width"] = self.width
        if self.height is not None:
            payload["height"] = self.height
        return payload


def saved_percent(input_size: int, output_size: int) -> int:
    """Percentage saved, rounded half up.

    Computed as ``100 - 100 / input * output`` so reports match the numbers
    users got from earlier releases of the tool.

    >>> saved_percent(1000, 600)
    40
    """
    if input_size <= 0:
        return 0
    return math.floor(100 - 100 / input_size * output_size + 0.5)


__all__ = [
    "FailureKind",
    "ResizeDirective",
    "WorkOutcome",
    "WorkState",
    "saved_percent",
]
