"""Where: src/camlib/features/compression/usecases/in_flight.py
What: Thread-safe count of outstanding network round trips and file writes.
Why: The cache map may only be flushed once every write has been recorded.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Final


class InFlightTracker:
    """Count of asynchronous operations that have started but not settled."""

    def __init__(self) -> None:
        self._count: int = 0
        self._condition: Final[threading.Condition] = threading.Condition()

    @property
    def count(self) -> int:
        with self._condition:
            return self._count

    def begin(self) -> None:
        """Register a started operation."""

        with self._condition:
            self._count += 1

    def end(self) -> None:
        """Register a settled operation, waking drain waiters at zero.

        Raises:
            RuntimeError: If called more often than ``begin``.
        """
        with self._condition:
            if self._count <= 0:
                raise RuntimeError("InFlightTracker.end() called without a matching begin()")
            self._count -= 1
            if self._count == 0:
                self._condition.notify_all()

    @contextmanager
    def track(self) -> Iterator[None]:
        """Hold one in-flight slot for the duration of the block."""

        self.begin()
        try:
            yield
        finally:
            self.end()

    def wait_for_drain(self, timeout: float | None = None) -> bool:
        """Block until no operations are outstanding.

        Returns:
            True when drained, False if ``timeout`` elapsed first.
        """
        with self._condition:
            return self._condition.wait_for(lambda: self._count == 0, timeout=timeout)


__all__ = ["InFlightTracker"]
