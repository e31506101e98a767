"""Tests for compression value objects."""

from __future__ import annotations

import pytest

from camlib.features.compression.domain.models import (
    FailureKind,
    ResizeDirective,
    saved_percent,
)


@pytest.mark.parametrize(
    ("input_size", "output_size", "expected"),
    [
        (1000, 600, 40),
        (1000, 1000, 0),
        (3, 2, 33),
        (8, 3, 63),
        (200, 199, 1),
        (0, 10, 0),
    ],
)
def test_saved_percent_rounds_half_up(input_size: int, output_size: int, expected: int) -> None:
    assert saved_percent(input_size, output_size) == expected


def test_inactive_resize_has_empty_payload() -> None:
    directive = ResizeDirective()

    assert not directive.is_active
    assert directive.as_payload() == {}


@pytest.mark.parametrize(
    ("width", "height", "payload"),
    [
        (100, None, {"width": 100}),
        (None, 80, {"height": 80}),
        (100, 80, {"width": 100, "height": 80}),
    ],
)
def test_resize_payload_omits_unset_dimensions(
    width: int | None, height: int | None, payload: dict[str, int]
) -> None:
    directive = ResizeDirective(width=width, height=height)

    assert directive.is_active
    assert directive.as_payload() == payload


def test_every_failure_kind_has_a_description() -> None:
    for kind in FailureKind:
        assert kind.describe()
    assert FailureKind.QUOTA_EXCEEDED.describe() == "your monthly limit has been exceeded"
    assert FailureKind.UNAUTHORIZED.describe() == "your credentials are invalid"
