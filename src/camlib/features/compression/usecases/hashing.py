"""Content digests used for change detection."""

from __future__ import annotations

import hashlib
from pathlib import Path

from camlib.config.settings import FILE_HASH_CHUNK_SIZE


def calculate_file_hash(file_path: Path, chunk_size: int = FILE_HASH_CHUNK_SIZE) -> str:
    """Calculate the MD5 hex digest of a file's current bytes.

    MD5 keeps cache maps interchangeable with those written by earlier
    releases; it is a change detector here, not a security boundary.

    Raises:
        OSError: If the file cannot be read.
    """

    md5_hash = hashlib.md5(usedforsecurity=False)
    with open(file_path, "rb") as handle:
        for byte_block in iter(lambda: handle.read(chunk_size), b""):
            md5_hash.update(byte_block)
    return md5_hash.hexdigest()


__all__ = ["calculate_file_hash"]
