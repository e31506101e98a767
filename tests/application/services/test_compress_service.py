"""End-to-end tests for the compression application service."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from camlib.application.services.compress_service import CompressImagesService, CompressRequest
from camlib.features.compression import ResizeDirective, RunStatus, WorkOutcome
from camlib.platform.tinify import QuotaExceeded


@pytest.fixture
def cache_path(tmp_path: Path) -> Path:
    return tmp_path / ".camlib.cache.json"


def _service(client: Any, hasher: Callable[[Path], str] | None = None) -> CompressImagesService:
    return CompressImagesService(client_factory=lambda api_key: client, hasher=hasher)


def test_only_changed_files_are_submitted(
    stub_client_factory: Callable[..., Any],
    image_dir: Path,
    cache_path: Path,
) -> None:
    digests = {"a.png": "abc", "b.jpg": "def"}
    _ = cache_path.write_text(json.dumps({str(image_dir / "a.png"): "abc"}), encoding="utf-8")
    client = stub_client_factory()
    service = _service(client, hasher=lambda path: digests.get(path.name, "changed"))

    report = service.run(
        CompressRequest(paths=[image_dir], cache_path=cache_path, api_key="secret")
    )

    assert report.status is RunStatus.COMPLETED
    assert client.submitted == [image_dir / "b.jpg"]
    assert report.cache_flushed


def test_compressed_files_are_skipped_next_run(
    stub_client_factory: Callable[..., Any],
    image_dir: Path,
    cache_path: Path,
) -> None:
    first_client = stub_client_factory()
    request = CompressRequest(paths=[image_dir], cache_path=cache_path, api_key="secret")

    first = _service(first_client).run(request)

    assert first.count(WorkOutcome.COMPRESSED) == 2
    assert set(json.loads(cache_path.read_text(encoding="utf-8"))) == {
        str(image_dir / "a.png"),
        str(image_dir / "b.jpg"),
    }

    second_client = stub_client_factory()
    second = _service(second_client).run(request)

    assert second.status is RunStatus.NO_FILES
    assert second_client.submitted == []


def test_force_resubmits_cached_files(
    stub_client_factory: Callable[..., Any],
    image_dir: Path,
    cache_path: Path,
) -> None:
    request = CompressRequest(paths=[image_dir], cache_path=cache_path, api_key="secret")
    _ = _service(stub_client_factory()).run(request)

    client = stub_client_factory()
    forced = CompressRequest(
        paths=[image_dir], cache_path=cache_path, api_key="secret", force=True
    )
    _ = _service(client).run(forced)

    assert sorted(client.submitted) == [image_dir / "a.png", image_dir / "b.jpg"]


def test_quota_failure_keeps_file_uncached(
    stub_client_factory: Callable[..., Any],
    image_dir: Path,
    cache_path: Path,
) -> None:
    original = (image_dir / "a.png").read_bytes()
    client = stub_client_factory(responses={"a.png": QuotaExceeded(status=429)})

    report = _service(client).run(
        CompressRequest(paths=[image_dir], cache_path=cache_path, api_key="secret")
    )

    saved = json.loads(cache_path.read_text(encoding="utf-8"))
    assert report.count(WorkOutcome.FAILED) == 1
    assert str(image_dir / "a.png") not in saved
    assert str(image_dir / "b.jpg") in saved
    assert (image_dir / "a.png").read_bytes() == original


def test_missing_key_stops_before_any_work(
    stub_client_factory: Callable[..., Any],
    image_dir: Path,
    cache_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    client = stub_client_factory()

    with caplog.at_level(logging.ERROR, logger="camlib"):
        report = _service(client).run(
            CompressRequest(paths=[image_dir], cache_path=cache_path, api_key=None)
        )

    assert report.status is RunStatus.MISSING_CREDENTIALS
    assert client.submitted == []
    assert not cache_path.exists()
    assert any("https://tinypng.com/developers" in message for message in caplog.messages)


def test_dry_run_needs_no_key_and_writes_nothing(
    image_dir: Path,
    cache_path: Path,
) -> None:
    def _no_client(api_key: str) -> Any:
        raise AssertionError("dry run must not build a client")

    service = CompressImagesService(client_factory=_no_client)
    before = {path.name: path.read_bytes() for path in image_dir.iterdir()}

    report = service.run(
        CompressRequest(paths=[image_dir], cache_path=cache_path, dry_run=True)
    )

    assert report.status is RunStatus.COMPLETED
    assert report.count(WorkOutcome.DRY_RUN) == 2
    assert not cache_path.exists()
    assert {path.name: path.read_bytes() for path in image_dir.iterdir()} == before


def test_no_images_reports_no_files(
    stub_client_factory: Callable[..., Any],
    tmp_path: Path,
    cache_path: Path,
) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()
    client = stub_client_factory()

    report = _service(client).run(
        CompressRequest(paths=[empty], cache_path=cache_path, api_key="secret")
    )

    assert report.status is RunStatus.NO_FILES
    assert not cache_path.exists()


def test_maximum_and_resize_are_forwarded(
    stub_client_factory: Callable[..., Any],
    image_dir: Path,
    cache_path: Path,
) -> None:
    client = stub_client_factory()

    report = _service(client).run(
        CompressRequest(
            paths=[image_dir],
            cache_path=cache_path,
            api_key="secret",
            max_files=1,
            resize=ResizeDirective(height=32),
        )
    )

    assert client.submitted == [image_dir / "a.png"]
    assert report.rejected == [image_dir / "b.jpg"]
    assert client.fetched[0][1] == {"height": 32}


def test_client_factory_receives_api_key(
    stub_client_factory: Callable[..., Any],
    image_dir: Path,
    cache_path: Path,
) -> None:
    keys: list[str] = []
    client = stub_client_factory()

    def _factory(api_key: str) -> Any:
        keys.append(api_key)
        return client

    _ = CompressImagesService(client_factory=_factory).run(
        CompressRequest(paths=[image_dir], cache_path=cache_path, api_key="secret")
    )

    assert keys == ["secret"]
    assert client.closed
