from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from salon_catalog.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class FilterValidationError(ValidationError):
    """Raised when filter criteria are invalid."""

    pass


class PagingValidationError(ValidationError):
    """Raised when display paging parameters are invalid."""

    pass


# ==============================================================================
# Records
# ==============================================================================

# A service entry exactly as received from the listing endpoint.
RawRecord = dict[str, Any]

Identity = Union[str, int]

ALL = "all"

ACTIVENESS_VALUES = (ALL, "active", "inactive")
PRICE_BUCKET_VALUES = (ALL, "low", "medium", "high")


@dataclass(frozen=True, slots=True)
class CanonicalService:
    """Normalized view of a RawRecord. Always fully populated."""

    identity: Identity
    display_name: str
    category: str
    price: float
    duration_minutes: int | None
    description: str
    is_active: bool


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    search_text: str = ""
    category: str = ALL
    activeness: str = ALL
    price_bucket: str = ALL

    def validate(self) -> None:
        """
        Validate filter criteria.

        Raises:
            FilterValidationError: If activeness or price_bucket is unknown
        """
        errors = []
        if self.activeness not in ACTIVENESS_VALUES:
            errors.append(
                {
                    "field": "activeness",
                    "message": f"Must be one of: {', '.join(ACTIVENESS_VALUES)}",
                    "code": "INVALID_CHOICE",
                }
            )
        if self.price_bucket not in PRICE_BUCKET_VALUES:
            errors.append(
                {
                    "field": "price_bucket",
                    "message": f"Must be one of: {', '.join(PRICE_BUCKET_VALUES)}",
                    "code": "INVALID_CHOICE",
                }
            )
        if errors:
            raise FilterValidationError(errors=errors)

    @property
    def is_default(self) -> bool:
        return self == FilterCriteria()


@dataclass(frozen=True, slots=True)
class CatalogStats:
    total: int
    active_count: int
    average_price: float
    distinct_category_count: int


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 50

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.offset < 0:
            raise PagingValidationError("offset must be >= 0")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > 200:
            raise PagingValidationError("limit must be <= 200")
