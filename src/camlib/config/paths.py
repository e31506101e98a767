"""Shared path utilities for configuration, credentials and cache locations.

This module centralizes how the application discovers the files it reads
and writes outside of the images themselves.

Policy (home-relative by default):
- Config: ``~/.config/camlib/config.toml`` unless overridden by ``CAMLIB_CONFIG``
- Credentials: ``~/.CamLib`` containing the API key
- Cache map: ``~/.camlib.cache.json`` unless overridden on the command line
"""

from __future__ import annotations

import os
from pathlib import Path
from collections.abc import Mapping
from typing import Callable, Final


_ENV_CONFIG_FILE: Final[str] = "CAMLIB_CONFIG"
CREDENTIALS_FILE_NAME: Final[str] = ".CamLib"
CACHE_FILE_NAME: Final[str] = ".camlib.cache.json"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        candidate = str(explicit_path).strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def home_dir(env: Mapping[str, str] | None = None) -> Path:
    """Return the user's home directory.

    Honors ``HOME``, then ``HOMEPATH`` and ``USERPROFILE`` so Windows shells
    resolve the same locations as POSIX ones.

    Args:
        env: Optional environment mapping (for testing).

    Returns:
        Path: Home directory of the current user.
    """
    mapping = env if env is not None else os.environ
    for key in ("HOME", "HOMEPATH", "USERPROFILE"):
        value = (mapping.get(key) or "").strip()
        if value:
            return Path(value)
    return Path.home()


def default_config_path() -> Path:
    """Get the path to the optional TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=None,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: home_dir() / ".config" / "camlib" / "config.toml",
    )


def default_credentials_path() -> Path:
    """Get the path of the file holding the API key."""

    return (home_dir() / CREDENTIALS_FILE_NAME).expanduser()


def default_cache_path() -> Path:
    """Get the default location of the path-to-digest cache map."""

    return (home_dir() / CACHE_FILE_NAME).expanduser()


def resolve_cache_path(explicit_path: Path | str | None) -> Path:
    """Resolve the cache map location from an optional command line override."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env={},
        env_var=None,
        default_factory=default_cache_path,
    )


__all__ = [
    "CACHE_FILE_NAME",
    "CREDENTIALS_FILE_NAME",
    "default_cache_path",
    "default_config_path",
    "default_credentials_path",
    "home_dir",
    "resolve_cache_path",
    "resolve_overridable_path",
]
