from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from salon_catalog.domain.service import CanonicalService

SORT_KEYS: dict[str, Callable[[CanonicalService], Any]] = {
    "name": lambda service: service.display_name.lower(),
    "price": lambda service: service.price,
    # Missing durations order as zero
    "duration": lambda service: service.duration_minutes or 0,
}


def sort_services(
    services: Sequence[CanonicalService],
    sort_by: str | None,
    descending: bool = False,
) -> list[CanonicalService]:
    """Stable display ordering. ``sort_by=None`` keeps source order."""
    if sort_by is None:
        return list(services)
    return sorted(services, key=SORT_KEYS[sort_by], reverse=descending)
