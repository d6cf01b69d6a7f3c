from __future__ import annotations

from salon_catalog.domain.service import CanonicalService, CatalogStats, FilterCriteria, Paging
from salon_catalog.entrypoints.http.dtos.catalog import (
    CatalogQueryDTO,
    CatalogResponseDTO,
    CatalogStatsDTO,
    FilterCriteriaDTO,
    FilterCriteriaUpdateDTO,
    ServiceResponseDTO,
)
from salon_catalog.use_cases.browse_catalog import BrowseCatalogRequest
from salon_catalog.use_cases.catalog_store import CatalogView

NOT_AVAILABLE = "N/A"
CURRENCY_SYMBOL = "₹"


class CatalogMapper:
    """Maps between REST DTOs and domain models for the catalog."""

    @staticmethod
    def to_browse_request(dto: CatalogQueryDTO) -> BrowseCatalogRequest:
        return BrowseCatalogRequest(
            paging=Paging(offset=dto.offset, limit=dto.limit),
            sort_by=dto.sort_by,
            descending=dto.descending,
        )

    @staticmethod
    def to_criteria_changes(dto: FilterCriteriaUpdateDTO) -> dict[str, str]:
        """Only the fields the client actually sent (and did not null out)."""
        return {
            name: value
            for name, value in dto.model_dump(exclude_unset=True).items()
            if value is not None
        }

    @staticmethod
    def price_label(price: float) -> str:
        if not price:
            return NOT_AVAILABLE
        return f"{CURRENCY_SYMBOL}{price:.2f}"

    @staticmethod
    def duration_label(duration_minutes: int | None) -> str:
        if not duration_minutes:
            return NOT_AVAILABLE
        return f"{duration_minutes} mins"

    @staticmethod
    def to_service_response(service: CanonicalService) -> ServiceResponseDTO:
        return ServiceResponseDTO(
            identity=service.identity,
            name=service.display_name,
            category=service.category,
            price=service.price,
            price_label=CatalogMapper.price_label(service.price),
            duration_minutes=service.duration_minutes,
            duration_label=CatalogMapper.duration_label(service.duration_minutes),
            description=service.description,
            is_active=service.is_active,
            status_label="Active" if service.is_active else "Inactive",
        )

    @staticmethod
    def to_stats_response(stats: CatalogStats) -> CatalogStatsDTO:
        return CatalogStatsDTO(
            total=stats.total,
            active_count=stats.active_count,
            average_price=stats.average_price,
            distinct_category_count=stats.distinct_category_count,
        )

    @staticmethod
    def to_criteria_response(criteria: FilterCriteria) -> FilterCriteriaDTO:
        return FilterCriteriaDTO(
            search_text=criteria.search_text,
            category=criteria.category,
            activeness=criteria.activeness,
            price_bucket=criteria.price_bucket,
        )

    @staticmethod
    def to_response(
        services: list[CanonicalService],
        view: CatalogView,
        offset: int,
        limit: int,
    ) -> CatalogResponseDTO:
        """
        Converts one page of services plus the view it came from.

        Args:
            services: The page of services to render
            view: Store snapshot the page was cut from
            offset: Current offset (echoed from request)
            limit: Current limit (echoed from request)
        """
        return CatalogResponseDTO(
            services=[CatalogMapper.to_service_response(service) for service in services],
            total_matching=len(view.filtered_records),
            full_count=view.full_count,
            offset=offset,
            limit=limit,
            stats=CatalogMapper.to_stats_response(view.stats),
            criteria=CatalogMapper.to_criteria_response(view.criteria),
            filters_active=view.filters_active,
            categories=list(view.categories),
            loading=view.loading,
            error_message=view.error_message,
        )

    @staticmethod
    def to_first_page_response(view: CatalogView, limit: int = 50) -> CatalogResponseDTO:
        """First page in source order, returned after state-changing calls."""
        return CatalogMapper.to_response(
            services=list(view.filtered_records[:limit]),
            view=view,
            offset=0,
            limit=limit,
        )
