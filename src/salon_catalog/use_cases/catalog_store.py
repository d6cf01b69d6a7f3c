"""Catalog store: single source of truth for the loaded catalog.

The store owns the full set of raw records from the last successful
traversal and the current filter criteria. Everything else (canonical
views, filtered set, stats, category options) is derived and replaced
wholesale whenever its inputs change.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace

from salon_catalog.domain.errors import CatalogFetchError
from salon_catalog.domain.field_resolver import to_canonical
from salon_catalog.domain.filter_engine import apply_filters
from salon_catalog.domain.service import (
    CanonicalService,
    CatalogStats,
    FilterCriteria,
    RawRecord,
)
from salon_catalog.domain.statistics import distinct_categories, summarize
from salon_catalog.use_cases.fetch_all_services import FetchAllServices

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogView:
    """Everything the presentation layer renders, captured at one instant."""

    filtered_records: tuple[CanonicalService, ...]
    full_count: int
    stats: CatalogStats
    loading: bool
    error_message: str | None
    criteria: FilterCriteria
    categories: tuple[str, ...] = ()
    error: CatalogFetchError | None = field(default=None, compare=False)

    @property
    def filters_active(self) -> bool:
        return not self.criteria.is_default


@dataclass(frozen=True, slots=True)
class _Derived:
    records: tuple[RawRecord, ...] = ()
    services: tuple[CanonicalService, ...] = ()
    stats: CatalogStats = field(default_factory=lambda: summarize(()))
    categories: tuple[str, ...] = ()


class CatalogStore:
    """
    Holds the full set and criteria; derives the filtered set and stats.

    - refresh() replaces the full set atomically, or keeps the previous
      one and records an error message when the traversal fails
    - a refresh requested while one is in flight is ignored
    - criteria changes re-run filtering only
    - reset() restores default criteria without fetching
    """

    def __init__(self, fetch_all_services: FetchAllServices, start_url: str) -> None:
        self._fetch_all_services = fetch_all_services
        self._start_url = start_url
        self._lock = threading.Lock()

        self._derived = _Derived()
        self._criteria = FilterCriteria()
        self._filtered: tuple[CanonicalService, ...] = ()
        self._loading = False
        self._error: CatalogFetchError | None = None

    # --------------------------------------------------------------------------
    # Full set
    # --------------------------------------------------------------------------

    def refresh(self) -> CatalogView:
        """
        Re-run the traversal and replace the full set.

        Returns:
            The view after the refresh (or the current view when a
            refresh was already in flight)
        """
        with self._lock:
            if self._loading:
                logger.info("Refresh already in progress, ignoring request")
                return self._snapshot_locked()
            self._loading = True
            self._error = None

        try:
            records = self._fetch_all_services.execute(self._start_url)
        except CatalogFetchError as exc:
            logger.error(
                "Catalog refresh failed",
                extra={"error_code": exc.error_code, "error": exc.message, "url": self._start_url},
            )
            with self._lock:
                self._loading = False
                self._error = exc
                return self._snapshot_locked()
        except Exception:
            with self._lock:
                self._loading = False
            raise

        derived = self._derive(records)
        with self._lock:
            self._derived = derived
            self._filtered = tuple(apply_filters(derived.services, self._criteria))
            self._loading = False
            logger.info(
                "Catalog refreshed",
                extra={"records": len(derived.records), "matching": len(self._filtered)},
            )
            return self._snapshot_locked()

    def services(self) -> tuple[CanonicalService, ...]:
        """Canonical views of the full set, in source order."""
        return self._derived.services

    # --------------------------------------------------------------------------
    # Criteria
    # --------------------------------------------------------------------------

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    def set_search_text(self, search_text: str) -> CatalogView:
        return self.update_criteria(search_text=search_text)

    def set_category(self, category: str) -> CatalogView:
        return self.update_criteria(category=category)

    def set_activeness(self, activeness: str) -> CatalogView:
        return self.update_criteria(activeness=activeness)

    def set_price_bucket(self, price_bucket: str) -> CatalogView:
        return self.update_criteria(price_bucket=price_bucket)

    def update_criteria(self, **changes: str) -> CatalogView:
        """
        Change one or more criteria and re-filter.

        Raises:
            FilterValidationError: If the resulting criteria are invalid
                (the current criteria stay untouched)
        """
        with self._lock:
            criteria = replace(self._criteria, **changes)
            criteria.validate()
            return self._apply_criteria_locked(criteria)

    def reset(self) -> CatalogView:
        """Restore default criteria. Does not fetch."""
        with self._lock:
            return self._apply_criteria_locked(FilterCriteria())

    # --------------------------------------------------------------------------
    # Views
    # --------------------------------------------------------------------------

    def snapshot(self) -> CatalogView:
        with self._lock:
            return self._snapshot_locked()

    def close(self) -> None:
        """Drop loaded data. Called when the owning process shuts down."""
        with self._lock:
            self._derived = _Derived()
            self._filtered = ()

    def _apply_criteria_locked(self, criteria: FilterCriteria) -> CatalogView:
        self._criteria = criteria
        self._filtered = tuple(apply_filters(self._derived.services, criteria))
        return self._snapshot_locked()

    def _snapshot_locked(self) -> CatalogView:
        return CatalogView(
            filtered_records=self._filtered,
            full_count=len(self._derived.records),
            stats=self._derived.stats,
            loading=self._loading,
            error_message=self._error.message if self._error is not None else None,
            criteria=self._criteria,
            categories=self._derived.categories,
            error=self._error,
        )

    @staticmethod
    def _derive(records: list[RawRecord]) -> _Derived:
        services = tuple(to_canonical(record, index) for index, record in enumerate(records))
        return _Derived(
            records=tuple(records),
            services=services,
            stats=summarize(services),
            categories=tuple(distinct_categories(services)),
        )
