"""Where: src/camlib/platform/tinify/http_client.py
What: ``requests`` adapter for the shrink endpoint and result downloads.
Why: Keep network concerns out of the worker state machine.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import requests

from camlib.config.settings import (
    API_USER,
    CONNECT_TIMEOUT,
    DOWNLOAD_CHUNK_SIZE,
    READ_TIMEOUT,
    SHRINK_ENDPOINT,
)
from camlib.platform.logging import logger

from .errors import FetchError, TransportError
from .responses import ShrinkResponse, TransportFailure, decode_shrink_response


class TinifyHTTPClient:
    """Submit images for compression and stream the results back."""

    def __init__(
        self,
        api_key: str,
        *,
        endpoint: str = SHRINK_ENDPOINT,
        session: requests.Session | None = None,
        timeout: tuple[float, float] = (CONNECT_TIMEOUT, READ_TIMEOUT),
        chunk_size: int = DOWNLOAD_CHUNK_SIZE,
    ) -> None:
        self._auth: tuple[str, str] = (API_USER, api_key)
        self._endpoint: str = endpoint
        self._session: requests.Session = session or requests.Session()
        self._timeout: tuple[float, float] = timeout
        self._chunk_size: int = chunk_size

    def submit(self, path: Path) -> ShrinkResponse:
        """Upload ``path`` to the shrink endpoint and decode the reply.

        The file handle is passed as the request body so ``requests`` streams
        it instead of reading the image into memory first.

        Raises:
            OSError: If the file cannot be opened.
        """
        with open(path, "rb") as body:
            try:
                response = self._session.post(
                    self._endpoint,
                    data=body,
                    auth=self._auth,
                    timeout=self._timeout,
                )
            except requests.RequestException as exc:
                logger.debug("Shrink request for %s failed: %s", path, exc)
                return TransportFailure(reason=str(exc) or type(exc).__name__)

        logger.debug("Shrink response for %s: status=%s", path, response.status_code)
        return decode_shrink_response(int(response.status_code), response.content)

    @contextmanager
    def stream_result(
        self,
        url: str,
        resize: Mapping[str, int] | None = None,
    ) -> Iterator[Iterator[bytes]]:
        """Open the compressed result and yield an iterator over its bytes.

        When ``resize`` is given the request is authenticated and carries a
        ``{"resize": ...}`` JSON body asking for a transformed variant.

        Raises:
            TransportError: If the connection fails before or during the download.
            FetchError: If the service answers with a non-2xx status.
        """
        kwargs: dict[str, Any] = {"stream": True, "timeout": self._timeout}
        if resize:
            kwargs["auth"] = self._auth
            kwargs["json"] = {"resize": dict(resize)}

        try:
            response = self._session.get(url, **kwargs)
        except requests.RequestException as exc:
            raise TransportError(str(exc) or type(exc).__name__) from exc

        with response:
            status = int(response.status_code)
            if not 200 <= status < 300:
                raise FetchError(url, status)
            yield self._iter_chunks(response)

    def _iter_chunks(self, response: requests.Response) -> Iterator[bytes]:
        try:
            for chunk in response.iter_content(chunk_size=self._chunk_size):
                if chunk:
                    yield chunk
        except requests.RequestException as exc:
            raise TransportError(str(exc) or type(exc).__name__) from exc

    def close(self) -> None:
        """Release pooled connections."""

        self._session.close()


__all__ = ["TinifyHTTPClient"]
