from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urljoin

from salon_catalog.domain.errors import TransportFailure
from salon_catalog.domain.service import RawRecord
from salon_catalog.ports.page_fetcher import PageFetcher

logger = logging.getLogger(__name__)

MAX_RECORDS = 10_000
RESULT_KEYS = ("results", "data")


def _results_array(body: Any) -> list[Any] | None:
    candidate = body
    if isinstance(body, dict):
        candidate = None
        for result_key in RESULT_KEYS:
            if body.get(result_key) is not None:
                candidate = body[result_key]
                break
    return candidate if isinstance(candidate, list) else None


def extract_results(body: Any) -> list[Any]:
    """
    Pull the results array out of a page body.

    Looks under ``results``, then ``data``, then treats the whole body
    as the array. Anything that is not a list degrades to an empty page.
    """
    results = _results_array(body)
    return list(results) if results is not None else []


def extract_next(body: Any) -> str | None:
    """Next-page pointer, or None when the listing is exhausted."""
    if not isinstance(body, dict):
        return None
    next_url = body.get("next")
    if isinstance(next_url, str) and next_url:
        return next_url
    return None


class FetchAllServices:
    """
    Exhaustive traversal of the paginated service listing.

    - Follows ``next`` pointers until none is left
    - Keeps records in the order pages and items were received
    - Stops early, keeping what it has, once more than ``max_records``
      records are accumulated or a page URL repeats
    - Any page failure propagates and the accumulation is dropped
    """

    def __init__(self, page_fetcher: PageFetcher, max_records: int = MAX_RECORDS) -> None:
        self._page_fetcher = page_fetcher
        self._max_records = max_records

    def execute(self, start_url: str) -> list[RawRecord]:
        """
        Run one traversal.

        Args:
            start_url: URL of the first listing page

        Returns:
            Every record from every page, in received order

        Raises:
            HttpStatusFailure: If any page answers with a non-2xx status
            TransportFailure: If any page request fails at the network level
                or a page links to a next URL that cannot be parsed
        """
        records: list[RawRecord] = []
        visited: set[str] = set()
        url: str | None = start_url
        pages = 0

        while url:
            visited.add(url)
            body = self._page_fetcher.fetch(url)
            pages += 1

            results = _results_array(body)
            if results is None:
                # Malformed page: keep going with what earlier pages gave us
                logger.warning("Listing page has no results array", extra={"url": url})
                results = []
            records.extend(results)

            if len(records) > self._max_records:
                logger.warning(
                    "Record ceiling exceeded, stopping traversal",
                    extra={"url": url, "records": len(records), "ceiling": self._max_records},
                )
                break

            next_url = extract_next(body)
            if next_url is not None:
                try:
                    next_url = urljoin(url, next_url)
                except ValueError as exc:
                    raise TransportFailure(f"Invalid next page link: {exc}", url=url) from exc
                if next_url in visited:
                    logger.warning(
                        "Pagination loops back to a visited page, stopping traversal",
                        extra={"url": url, "next_url": next_url},
                    )
                    break
            url = next_url

        logger.info("Listing traversal complete", extra={"pages": pages, "records": len(records)})
        return records
