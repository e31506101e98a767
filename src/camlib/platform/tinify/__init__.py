"""Compression service infrastructure package.

This package provides the HTTP adapter for the remote ``/shrink`` API and
the typed response variants the compression worker matches on.
"""

from .errors import FetchError, TinifyError, TransportError
from .http_client import TinifyHTTPClient
from .responses import (
    OtherError,
    QuotaExceeded,
    ShrinkResponse,
    ShrinkSuccess,
    TransportFailure,
    Unauthorized,
    Unparsable,
    decode_shrink_response,
)

__all__ = [
    "FetchError",
    "OtherError",
    "QuotaExceeded",
    "ShrinkResponse",
    "ShrinkSuccess",
    "TinifyError",
    "TinifyHTTPClient",
    "TransportError",
    "TransportFailure",
    "Unauthorized",
    "Unparsable",
    "decode_shrink_response",
]
