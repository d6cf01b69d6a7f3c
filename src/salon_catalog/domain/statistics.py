from __future__ import annotations

from collections.abc import Sequence

from salon_catalog.domain.service import CanonicalService, CatalogStats


def summarize(services: Sequence[CanonicalService]) -> CatalogStats:
    """Aggregates over the full (unfiltered) set."""
    total = len(services)
    if total == 0:
        return CatalogStats(total=0, active_count=0, average_price=0.0, distinct_category_count=0)

    return CatalogStats(
        total=total,
        active_count=sum(1 for service in services if service.is_active),
        average_price=sum(service.price for service in services) / total,
        distinct_category_count=len({service.category for service in services}),
    )


def distinct_categories(services: Sequence[CanonicalService]) -> list[str]:
    """Distinct categories in first-seen order."""
    return list(dict.fromkeys(service.category for service in services))
