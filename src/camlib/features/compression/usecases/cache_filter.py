"""Drop candidates whose bytes match the digest recorded in the cache."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from camlib.platform.logging import logger

from .hashing import calculate_file_hash
from .ports import CacheStorePort


def filter_cached(
    candidates: Sequence[Path],
    cache_store: CacheStorePort,
    *,
    force: bool = False,
    hasher: Callable[[Path], str] = calculate_file_hash,
) -> list[Path]:
    """Return the candidates that still need compressing, in input order.

    Args:
        candidates: Deduplicated candidate paths.
        cache_store: Recorded digests from earlier runs.
        force: Keep every candidate regardless of the cache.
        hasher: Digest function (injected for testing).

    Returns:
        Candidates with no recorded digest or a digest that differs from the
        current file contents. A file that cannot be hashed is kept.
    """
    if force:
        return list(candidates)

    pending: list[Path] = []
    for candidate in candidates:
        recorded = cache_store.get(candidate)
        if recorded is None:
            pending.append(candidate)
            continue
        try:
            current = hasher(candidate)
        except OSError as exc:
            logger.debug("Could not hash %s, treating as changed: %s", candidate, exc)
            pending.append(candidate)
            continue
        if current != recorded:
            pending.append(candidate)

    return pending


__all__ = ["filter_cached"]
