"""src/camlib/features/compression/usecases/cache_store.py
What: On-disk mapping from image path to the digest of its last compressed bytes.
Why: Avoid resubmitting byte-identical files to a quota-limited service.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import final

from camlib.platform.filesystem import atomic_write_text
from camlib.platform.logging import logger


@final
class CacheStore:
    """Path-to-digest map loaded once per run and flushed once at the end."""

    path: Path
    _entries: dict[str, str]
    _lock: threading.Lock

    def __init__(self, path: Path, entries: dict[str, str] | None = None) -> None:
        """Initialize the store.

        Args:
            path: Location the store is flushed to.
            entries: Initial mapping.
        """
        self.path = path
        self._entries = dict(entries or {})
        self._lock = threading.Lock()

    @classmethod
    def load(cls, path: Path) -> "CacheStore":
        """Load the store from ``path``.

        Missing, unreadable, corrupt or non-object files yield an empty store.
        Entries whose key or value is not a string are dropped.
        """
        if not path.is_file():
            return cls(path)

        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable cache map at %s: %s", path, exc)
            return cls(path)

        if not isinstance(raw, dict):
            logger.warning("Ignoring cache map at %s: expected a JSON object", path)
            return cls(path)

        entries = {
            key: value
            for key, value in raw.items()
            if isinstance(key, str) and isinstance(value, str)
        }
        logger.debug("Loaded %d cache entries from %s", len(entries), path)
        return cls(path, entries)

    def get(self, file_path: Path | str) -> str | None:
        """Return the recorded digest for ``file_path``, if any."""

        with self._lock:
            return self._entries.get(str(file_path))

    def record(self, file_path: Path | str, digest: str) -> None:
        """Add or overwrite the digest for ``file_path``."""

        with self._lock:
            self._entries[str(file_path)] = digest

    def snapshot(self) -> dict[str, str]:
        """Return a copy of the current mapping."""

        with self._lock:
            return dict(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def flush(self) -> None:
        """Rewrite the cache file with the full mapping, tab-indented."""

        content = json.dumps(self.snapshot(), indent="\t", ensure_ascii=False)
        atomic_write_text(self.path, content)
        logger.debug("Wrote %d cache entries to %s", len(self), self.path)


__all__ = ["CacheStore"]
