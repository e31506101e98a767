"""API key resolution for the remote compression service."""

from __future__ import annotations

from pathlib import Path

from camlib.config.paths import default_credentials_path
from camlib.platform.logging import logger


def resolve_api_key(explicit: str | None, credentials_path: Path | None = None) -> str | None:
    """Return the API key to authenticate with.

    Args:
        explicit: Key passed on the command line, if any.
        credentials_path: File holding the key. Defaults to ``~/.CamLib``.

    Returns:
        The trimmed key, or ``None`` when neither source provides one.
    """
    if explicit is not None:
        stripped = explicit.strip()
        if stripped:
            return stripped

    path = credentials_path if credentials_path is not None else default_credentials_path()
    if not path.is_file():
        return None

    try:
        stored = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        logger.warning("Could not read API key from %s: %s", path, exc)
        return None
    return stored or None


__all__ = ["resolve_api_key"]
