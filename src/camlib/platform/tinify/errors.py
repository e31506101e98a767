"""Exceptions raised by the compression service adapter."""

from __future__ import annotations


class TinifyError(Exception):
    """Base class for compression service failures surfaced as exceptions."""


class TransportError(TinifyError):
    """No usable response: connection refused, timeout, reset mid-stream."""


class FetchError(TinifyError):
    """The compressed result could not be downloaded."""

    def __init__(self, url: str, status: int) -> None:
        super().__init__(f"Fetching {url} returned HTTP {status}")
        self.url: str = url
        self.status: int = status


__all__ = ["FetchError", "TinifyError", "TransportError"]
