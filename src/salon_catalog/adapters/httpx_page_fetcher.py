"""httpx implementation of PageFetcher."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from salon_catalog.domain.errors import HttpStatusFailure, TransportFailure
from salon_catalog.ports.page_fetcher import PageFetcher

logger = logging.getLogger(__name__)


class HttpxPageFetcher(PageFetcher):
    """
    Fetches listing pages over HTTP with a shared httpx.Client.

    - Any 2xx is a success; the body is decoded as JSON
    - A 2xx body that is not JSON is returned as None (malformed page)
    - Non-2xx statuses raise HttpStatusFailure
    - Request errors (connect, timeout, redirect loops, bad URLs) raise
      TransportFailure
    """

    def __init__(self, timeout: float = 10.0, client: httpx.Client | None = None) -> None:
        """
        Initialize the fetcher.

        Args:
            timeout: Per-request timeout in seconds (ignored when client is given)
            client: Preconfigured client (tests pass one with a MockTransport)
        """
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers={"Accept": "application/json"},
        )

    def fetch(self, url: str) -> Any:
        try:
            response = self._client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.error(
                "Listing page request failed",
                extra={"url": url, "error_type": type(exc).__name__, "error": str(exc)},
            )
            raise TransportFailure(str(exc) or type(exc).__name__, url=url) from exc

        if not response.is_success:
            logger.error(
                "Listing page returned error status",
                extra={"url": url, "status_code": response.status_code},
            )
            raise HttpStatusFailure(response.status_code, response.reason_phrase, url=url)

        try:
            return response.json()
        except ValueError:
            logger.warning(
                "Listing page body is not JSON",
                extra={"url": url, "content_type": response.headers.get("content-type")},
            )
            return None

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
