from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class PageFetcher(ABC):
    """
    Port for reading one page of the service listing.

    Contract:
        - Returns the decoded JSON body of a 2xx response
        - Returns None when a 2xx body cannot be decoded (treated as an empty page)
        - Raises HttpStatusFailure for any non-2xx response
        - Raises TransportFailure for network-level failures
        - Never retries
    """

    @abstractmethod
    def fetch(self, url: str) -> Any:
        """
        Fetch a single listing page.

        Args:
            url: Absolute URL of the page

        Returns:
            Decoded JSON body (dict, list, ...) or None for an undecodable body

        Raises:
            HttpStatusFailure: If the endpoint answers with a non-2xx status
            TransportFailure: If the request could not be completed
        """
        ...

    def close(self) -> None:
        """Release any held resources. Default is a no-op."""
        return None
