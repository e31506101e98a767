"""Where: src/camlib/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from camlib.config.config import (
    DOWNLOAD_CHUNK_SIZE_DEFAULT,
    FILE_HASH_CHUNK_SIZE_DEFAULT,
    SHRINK_ENDPOINT_DEFAULT,
    WORKER_THREADS_DEFAULT,
    config as app_config,
)

# Remote compression service -------------------------------------------------

SHRINK_ENDPOINT: str = (app_config.shrink_endpoint or "").strip() or SHRINK_ENDPOINT_DEFAULT

# Basic auth user name expected by the service; the API key is the password.
API_USER: str = "api"

CONNECT_TIMEOUT: float = app_config.connect_timeout if app_config.connect_timeout > 0 else 10.0
READ_TIMEOUT: float = app_config.read_timeout if app_config.read_timeout > 0 else 120.0


# Local execution -------------------------------------------------------------

WORKER_THREADS: int = (
    app_config.worker_threads if app_config.worker_threads > 0 else WORKER_THREADS_DEFAULT
)

FILE_HASH_CHUNK_SIZE: int = (
    app_config.hash_chunk_size if app_config.hash_chunk_size > 0 else FILE_HASH_CHUNK_SIZE_DEFAULT
)

DOWNLOAD_CHUNK_SIZE: int = (
    app_config.download_chunk_size
    if app_config.download_chunk_size > 0
    else DOWNLOAD_CHUNK_SIZE_DEFAULT
)

# Case-insensitive suffixes accepted by the file collector.
SUPPORTED_EXTENSIONS: frozenset[str] = frozenset({".png", ".jpg", ".jpeg"})


__all__ = [
    "API_USER",
    "CONNECT_TIMEOUT",
    "DOWNLOAD_CHUNK_SIZE",
    "FILE_HASH_CHUNK_SIZE",
    "READ_TIMEOUT",
    "SHRINK_ENDPOINT",
    "SUPPORTED_EXTENSIONS",
    "WORKER_THREADS",
]
