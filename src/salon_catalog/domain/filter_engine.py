from __future__ import annotations

from collections.abc import Sequence

from salon_catalog.domain.service import ALL, CanonicalService, FilterCriteria

LOW_PRICE_CEILING = 500.0
MEDIUM_PRICE_CEILING = 1500.0


def price_bucket(price: float) -> str:
    """
    Classify a canonical price.

    Buckets are contiguous: low < 500 <= medium < 1500 <= high.
    Every price lands in exactly one of them.
    """
    if price < LOW_PRICE_CEILING:
        return "low"
    if price < MEDIUM_PRICE_CEILING:
        return "medium"
    return "high"


def apply_filters(
    services: Sequence[CanonicalService], criteria: FilterCriteria
) -> list[CanonicalService]:
    """
    Apply criteria with AND semantics.

    Pure and order-preserving; the input sequence is never modified.
    Each criterion is inert at its default ("" for search text, "all"
    for the rest).
    """
    needle = criteria.search_text.lower()
    return [service for service in services if _matches(service, criteria, needle)]


def _matches(service: CanonicalService, criteria: FilterCriteria, needle: str) -> bool:
    if needle and not (
        needle in service.display_name.lower()
        or needle in service.description.lower()
        or needle in service.category.lower()
    ):
        return False
    if criteria.category != ALL and service.category != criteria.category:
        return False
    if criteria.activeness != ALL and service.is_active != (criteria.activeness == "active"):
        return False
    if criteria.price_bucket != ALL and price_bucket(service.price) != criteria.price_bucket:
        return False
    return True
