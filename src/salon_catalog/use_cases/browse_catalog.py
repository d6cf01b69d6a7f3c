from __future__ import annotations

from dataclasses import dataclass

from salon_catalog.domain.service import CanonicalService, Paging, PagingValidationError
from salon_catalog.domain.sorting import SORT_KEYS, sort_services
from salon_catalog.use_cases.catalog_store import CatalogStore, CatalogView


@dataclass(frozen=True, slots=True)
class BrowseCatalogRequest:
    paging: Paging
    sort_by: str | None = None
    descending: bool = False


@dataclass(frozen=True, slots=True)
class BrowseCatalogResponse:
    services: list[CanonicalService]
    view: CatalogView


class BrowseCatalog:
    """
    One page of the filtered set, optionally sorted, plus the view it came from.

    Filtering is owned by the store; this use case only orders and
    slices what the store already derived.
    """

    def __init__(self, catalog_store: CatalogStore) -> None:
        self._store = catalog_store

    def execute(self, request: BrowseCatalogRequest) -> BrowseCatalogResponse:
        """
        Raises:
            PagingValidationError: If paging parameters or sort key are invalid
        """
        request.paging.validate()
        if request.sort_by is not None and request.sort_by not in SORT_KEYS:
            raise PagingValidationError(f"sort_by must be one of: {', '.join(SORT_KEYS)}")

        view = self._store.snapshot()
        ordered = sort_services(view.filtered_records, request.sort_by, request.descending)

        start = request.paging.offset
        end = request.paging.offset + request.paging.limit

        return BrowseCatalogResponse(services=ordered[start:end], view=view)
