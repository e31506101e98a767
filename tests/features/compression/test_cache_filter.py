"""Tests for cache-based change detection."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from camlib.features.compression.usecases.cache_filter import filter_cached
from camlib.features.compression.usecases.cache_store import CacheStore


class RecordingHasher:
    """Hasher double returning fixed digests and remembering what it hashed."""

    def __init__(self, digests: dict[str, str]) -> None:
        self.digests: dict[str, str] = digests
        self.calls: list[Path] = []

    def __call__(self, path: Path) -> str:
        self.calls.append(path)
        digest = self.digests.get(path.name)
        if digest is None:
            raise OSError(f"cannot read {path}")
        return digest


@pytest.fixture
def candidates(tmp_path: Path) -> list[Path]:
    return [tmp_path / "a.png", tmp_path / "b.jpg", tmp_path / "c.jpeg"]


def test_unchanged_files_are_dropped(tmp_path: Path, candidates: list[Path]) -> None:
    store = CacheStore(tmp_path / "cache.json", {str(candidates[0]): "abc"})
    hasher = RecordingHasher({"a.png": "abc", "b.jpg": "def", "c.jpeg": "ghi"})

    pending = filter_cached(candidates, store, hasher=hasher)

    assert pending == candidates[1:]


def test_changed_files_are_kept(tmp_path: Path, candidates: list[Path]) -> None:
    store = CacheStore(tmp_path / "cache.json", {str(candidates[0]): "stale"})
    hasher = RecordingHasher({"a.png": "fresh"})

    pending = filter_cached(candidates[:1], store, hasher=hasher)

    assert pending == candidates[:1]


def test_files_without_a_record_are_not_hashed(tmp_path: Path, candidates: list[Path]) -> None:
    store = CacheStore(tmp_path / "cache.json")
    hasher = RecordingHasher({})

    pending = filter_cached(candidates, store, hasher=hasher)

    assert pending == candidates
    assert hasher.calls == []


def test_force_keeps_everything_without_hashing(tmp_path: Path, candidates: list[Path]) -> None:
    store = CacheStore(
        tmp_path / "cache.json",
        {str(path): "abc" for path in candidates},
    )
    hasher = RecordingHasher({"a.png": "abc", "b.jpg": "abc", "c.jpeg": "abc"})

    pending = filter_cached(candidates, store, force=True, hasher=hasher)

    assert pending == candidates
    assert hasher.calls == []


def test_unreadable_file_is_treated_as_changed(tmp_path: Path, candidates: list[Path]) -> None:
    store = CacheStore(tmp_path / "cache.json", {str(candidates[1]): "def"})
    hasher = RecordingHasher({})

    pending = filter_cached(candidates[1:2], store, hasher=hasher)

    assert pending == [candidates[1]]


def test_real_digest_matches_recorded_bytes(image_dir: Path) -> None:
    """The default hasher compares against the MD5 of the current bytes."""

    image = image_dir / "a.png"
    digest = hashlib.md5(image.read_bytes()).hexdigest()
    store = CacheStore(image_dir / "cache.json", {str(image): digest})

    assert filter_cached([image], store) == []

    _ = image.write_bytes(b"edited")

    assert filter_cached([image], store) == [image]
