"""Shared pytest fixtures for compression tests."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path

import pytest

from camlib.platform.tinify import FetchError, ShrinkResponse, ShrinkSuccess


class StubShrinkClient:
    """In-memory stand-in for ``TinifyHTTPClient``.

    ``responses`` maps a file name to the decoded shrink response; files not
    listed get a 1000 -> 600 byte success. ``payloads`` maps result URLs to the
    bytes streamed back.
    """

    def __init__(
        self,
        responses: Mapping[str, ShrinkResponse] | None = None,
        payloads: Mapping[str, bytes] | None = None,
        fetch_status: Mapping[str, int] | None = None,
    ) -> None:
        self.responses: dict[str, ShrinkResponse] = dict(responses or {})
        self.payloads: dict[str, bytes] = dict(payloads or {})
        self.fetch_status: dict[str, int] = dict(fetch_status or {})
        self.submitted: list[Path] = []
        self.fetched: list[tuple[str, dict[str, int] | None]] = []
        self.closed: bool = False
        self._lock = threading.Lock()

    def submit(self, path: Path) -> ShrinkResponse:
        with self._lock:
            self.submitted.append(path)
        if path.name in self.responses:
            return self.responses[path.name]
        return ShrinkSuccess(
            input_size=1000,
            output_size=600,
            output_url=f"https://api.example.test/output/{path.name}",
        )

    @contextmanager
    def stream_result(
        self,
        url: str,
        resize: Mapping[str, int] | None = None,
    ) -> Iterator[Iterator[bytes]]:
        with self._lock:
            self.fetched.append((url, dict(resize) if resize else None))
        status = self.fetch_status.get(url, 200)
        if not 200 <= status < 300:
            raise FetchError(url, status)
        payload = self.payloads.get(url, b"compressed:" + url.encode("utf-8"))
        middle = len(payload) // 2
        yield iter([payload[:middle], payload[middle:]])

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def stub_client_factory() -> Callable[..., StubShrinkClient]:
    """Return the stub client class so tests can configure instances."""

    return StubShrinkClient


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """Create a directory with a few images and a non-image file."""

    images = tmp_path / "images"
    images.mkdir()
    _ = (images / "a.png").write_bytes(b"png-bytes-a")
    _ = (images / "b.jpg").write_bytes(b"jpg-bytes-b")
    _ = (images / "notes.txt").write_text("not an image")
    return images
