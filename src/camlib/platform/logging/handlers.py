"""Rich console handler for CamLib processing events.

Where: platform/logging/handlers.py
What: Render structured per-file events with icons, colours and compact paths.
Why: Keep console presentation out of the worker and coordinator code.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


def format_bytes(size: int | float) -> str:
    """Return a human readable byte count such as ``12.3 KB``."""

    value = float(size)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(value) < 1024:
            if unit == "B":
                return f"{int(value)} {unit}"
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} TB"


class CamlibRichHandler(RichHandler):
    """Rich handler that renders ``processing_event`` records specially."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "compression.run.start": ("✔", "green"),
        "compression.run.no_files": ("✘", "red"),
        "compression.run.complete": ("✔", "green"),
        "compression.file.dry_run": ("[DRY]", "yellow"),
        "compression.file.saved": ("✔", "green"),
        "compression.file.skip.no_benefit": ("✘", "yellow"),
        "compression.file.skip.limit": ("↪", "yellow"),
        "compression.file.error": ("✘", "red"),
        "compression.cache.flushed": ("♻", "cyan"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Return ``path`` with the leading segments collapsed into an ellipsis."""

        pure: PurePath = PureWindowsPath(path) if "\\" in path else PurePosixPath(path)
        separator = "\\" if isinstance(pure, PureWindowsPath) else "/"
        parts = [part for part in pure.parts if part and part != pure.anchor]

        if len(parts) > self._PATH_SEGMENT_LIMIT:
            display = "…" + separator + separator.join(parts[-self._PATH_SEGMENT_LIMIT:])
        else:
            display = str(pure)

        text = Text()
        for char in display:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white", bold=True))
        return text

    def _render_processing_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured processing events with dedicated styling."""

        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        source_path = getattr(record, "source_path", None)

        if event == "compression.run.start":
            total = getattr(record, "total_files", 0)
            _ = body.append(f"Found {total} image{'' if total == 1 else 's'}")
            if getattr(record, "dry_run", False):
                _ = body.append(" [dry-run]")
        elif event == "compression.run.no_files":
            _ = body.append("No previously uncompressed PNG or JPEG images found.\n")
            _ = body.append("  Use the `--force` flag to force recompression...", style="yellow")
        elif event == "compression.run.complete":
            metrics: list[str] = []
            for key in ("compressed", "skipped", "failed"):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    metrics.append(f"{key}={value}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
            _ = body.append("Run complete")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
        elif event == "compression.cache.flushed":
            entries = getattr(record, "entries", None)
            _ = body.append("Cache saved")
            if isinstance(entries, int):
                _ = body.append(f" ({entries} entries)")
            cache_path = getattr(record, "cache_path", None)
            if cache_path:
                _ = body.append(" @ ")
                _ = body.append_text(self._format_path(str(cache_path)))
        else:
            prefix = {
                "compression.file.dry_run": "Would compress ",
                "compression.file.saved": "Saved ",
                "compression.file.skip.no_benefit": "Couldn't compress further ",
                "compression.file.skip.limit": "Skipped (max reached) ",
                "compression.file.error": "Compression failed for ",
            }.get(event, "")
            if event == "compression.file.saved":
                saved = getattr(record, "saved_bytes", None)
                percent = getattr(record, "saved_percent", None)
                if isinstance(saved, int) and isinstance(percent, int):
                    prefix = f"Saved {format_bytes(saved)} ({percent}%) for "
            _ = body.append(prefix)
            if source_path:
                _ = body.append_text(self._format_path(str(source_path)))
            if event == "compression.file.error":
                reason = getattr(record, "error_message", None)
                if reason:
                    _ = body.append(f" ({reason})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for processing events."""

        processing_text = self._render_processing_message(record)
        if processing_text is not None:
            return processing_text
        return super().render_message(record, message)


__all__ = ["CamlibRichHandler", "format_bytes"]
