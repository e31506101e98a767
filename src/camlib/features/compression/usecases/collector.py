"""Expand path arguments into candidate image files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from camlib.config.settings import SUPPORTED_EXTENSIONS


def is_supported_image(path: Path) -> bool:
    """Return True when ``path`` has a png/jpg/jpeg suffix in any letter case."""

    return path.suffix.lower() in SUPPORTED_EXTENSIONS


def _iter_directory(directory: Path, recursive: bool) -> Iterator[Path]:
    entries: Iterable[Path] = directory.rglob("*") if recursive else directory.iterdir()
    for entry in entries:
        if entry.is_file() and is_supported_image(entry):
            yield entry


def collect_candidates(paths: Sequence[Path | str], recursive: bool = False) -> list[Path]:
    """Collect the deduplicated set of images named by ``paths``.

    Args:
        paths: Files and directories to scan. Empty means the current directory.
        recursive: Walk whole subtrees instead of only direct children.

    Returns:
        Sorted list of unique candidate paths. Arguments that do not exist are
        ignored.
    """
    arguments = list(paths) or ["."]
    found: set[Path] = set()

    for argument in arguments:
        candidate = Path(argument)
        if candidate.is_dir():
            found.update(_iter_directory(candidate, recursive))
        elif candidate.is_file() and is_supported_image(candidate):
            found.add(candidate)

    return sorted(found)


__all__ = ["collect_candidates", "is_supported_image"]
