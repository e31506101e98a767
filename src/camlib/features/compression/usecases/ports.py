"""Summary: Ports defining compression use case dependencies.
Why: Decouple use cases from concrete adapters so tests and swaps stay simple."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Protocol, runtime_checkable

from camlib.platform.tinify import ShrinkResponse


@runtime_checkable
class CacheStorePort(Protocol):
    """Port for the persisted path-to-digest map."""

    path: Path

    def __len__(self) -> int:
        """Return the number of recorded entries."""
        ...

    def get(self, file_path: Path | str) -> str | None:
        """Return the recorded digest, if any."""
        ...

    def record(self, file_path: Path | str, digest: str) -> None:
        """Add or overwrite the digest for a path."""
        ...

    def flush(self) -> None:
        """Persist the full mapping."""
        ...


@runtime_checkable
class ShrinkClientPort(Protocol):
    """Port for the remote compression service."""

    def submit(self, path: Path) -> ShrinkResponse:
        """Upload a file and return the decoded response."""
        ...

    def stream_result(
        self,
        url: str,
        resize: Mapping[str, int] | None = None,
    ) -> AbstractContextManager[Iterator[bytes]]:
        """Open the compressed result as a byte stream."""
        ...

    def close(self) -> None:
        """Release any pooled connections."""
        ...


__all__ = ["CacheStorePort", "ShrinkClientPort"]
