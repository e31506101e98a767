"""Where: src/camlib/platform/tinify/responses.py
What: Tagged variants for ``POST /shrink`` outcomes and the decoder producing them.
Why: Inspect the raw JSON exactly once so callers can match on types.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Final

SUCCESS_STATUS: Final[int] = 201
QUOTA_ERROR_CODE: Final[str] = "TooManyRequests"
UNAUTHORIZED_ERROR_CODE: Final[str] = "Unauthorized"


@dataclass(slots=True, frozen=True)
class ShrinkSuccess:
    """The service accepted the upload and produced a compressed variant."""

    input_size: int
    output_size: int
    output_url: str


@dataclass(slots=True, frozen=True)
class QuotaExceeded:
    """The account's monthly compression limit is used up."""

    status: int
    message: str | None = None


@dataclass(slots=True, frozen=True)
class Unauthorized:
    """The API key was rejected."""

    status: int
    message: str | None = None


@dataclass(slots=True, frozen=True)
class OtherError:
    """Any other non-success status."""

    status: int
    code: str | None = None
    message: str | None = None


@dataclass(slots=True, frozen=True)
class Unparsable:
    """The body was not JSON, or a success body lacked required fields."""

    status: int
    reason: str


@dataclass(slots=True, frozen=True)
class TransportFailure:
    """No response was received at all."""

    reason: str


ShrinkResponse = (
    ShrinkSuccess | QuotaExceeded | Unauthorized | OtherError | Unparsable | TransportFailure
)


def _as_size(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return int(value)


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def decode_shrink_response(status: int, body: bytes | str) -> ShrinkResponse:
    """Classify a ``POST /shrink`` response.

    Args:
        status: HTTP status code.
        body: Raw response body.

    Returns:
        ShrinkResponse: The matching variant.
    """
    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError) as exc:
        return Unparsable(status=status, reason=f"Not a valid JSON response ({exc})")

    if not isinstance(payload, dict):
        return Unparsable(status=status, reason="Response body is not a JSON object")

    if status == SUCCESS_STATUS:
        input_part = payload.get("input")
        output_part = payload.get("output")
        if not isinstance(input_part, dict) or not isinstance(output_part, dict):
            return Unparsable(status=status, reason="Missing input/output sections")
        input_size = _as_size(input_part.get("size"))
        output_size = _as_size(output_part.get("size"))
        output_url = _optional_str(output_part.get("url"))
        if input_size is None or output_size is None or output_url is None:
            return Unparsable(status=status, reason="Missing size or url fields")
        return ShrinkSuccess(
            input_size=input_size,
            output_size=output_size,
            output_url=output_url,
        )

    code = _optional_str(payload.get("error"))
    message = _optional_str(payload.get("message"))
    if code == QUOTA_ERROR_CODE:
        return QuotaExceeded(status=status, message=message)
    if code == UNAUTHORIZED_ERROR_CODE:
        return Unauthorized(status=status, message=message)
    return OtherError(status=status, code=code, message=message)


__all__ = [
    "OtherError",
    "QuotaExceeded",
    "ShrinkResponse",
    "ShrinkSuccess",
    "TransportFailure",
    "Unauthorized",
    "Unparsable",
    "decode_shrink_response",
]
