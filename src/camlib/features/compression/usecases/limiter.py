"""One-shot admission of candidates under a maximum count."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

UNBOUNDED: Final[int] = -1


@dataclass(slots=True)
class Admission:
    """Split of candidates into those that will run and those that will not."""

    admitted: list[Path] = field(default_factory=list)
    rejected: list[Path] = field(default_factory=list)


class ConcurrencyBudget:
    """Remaining number of work units that may still be admitted.

    Slots are not returned when a unit finishes: once the budget reaches zero
    every later candidate in the run is rejected. Any negative maximum means
    unbounded.
    """

    def __init__(self, maximum: int = UNBOUNDED) -> None:
        self._remaining: int = UNBOUNDED if maximum < 0 else maximum

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def unbounded(self) -> bool:
        return self._remaining == UNBOUNDED

    def try_acquire(self) -> bool:
        """Consume one slot, returning False when none are left."""

        if self.unbounded:
            return True
        if self._remaining == 0:
            return False
        self._remaining -= 1
        return True

    def admit(self, candidates: Iterable[Path]) -> Admission:
        """Walk ``candidates`` in order and decide admission for each."""

        admission = Admission()
        for candidate in candidates:
            if self.try_acquire():
                admission.admitted.append(candidate)
            else:
                admission.rejected.append(candidate)
        return admission


__all__ = ["Admission", "ConcurrencyBudget", "UNBOUNDED"]
