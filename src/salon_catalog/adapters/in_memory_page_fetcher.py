from __future__ import annotations

from typing import Any

from salon_catalog.domain.errors import HttpStatusFailure
from salon_catalog.ports.page_fetcher import PageFetcher


class InMemoryPageFetcher(PageFetcher):
    """
    Canonical contract implementation for tests.

    - Serves canned page bodies keyed by URL
    - Unknown URLs answer like a 404
    - An int in place of a body answers with that status
    - Records every requested URL in order
    """

    def __init__(self, pages: dict[str, Any]) -> None:
        self._pages = pages
        self.requested: list[str] = []

    def fetch(self, url: str) -> Any:
        self.requested.append(url)
        if url not in self._pages:
            raise HttpStatusFailure(404, "Not Found", url=url)

        body = self._pages[url]
        if isinstance(body, int) and not isinstance(body, bool):
            if not 200 <= body < 300:
                raise HttpStatusFailure(body, url=url)
            return None
        return body
