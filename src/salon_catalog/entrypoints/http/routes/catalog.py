from typing import Annotated

from fastapi import APIRouter, Depends, Query

from salon_catalog.entrypoints.http.dependencies import (
    get_browse_catalog_use_case,
    get_catalog_store,
)
from salon_catalog.entrypoints.http.dtos.catalog import (
    CatalogQueryDTO,
    CatalogResponseDTO,
    CatalogStatsDTO,
    CategoriesResponseDTO,
    FilterCriteriaUpdateDTO,
)
from salon_catalog.entrypoints.http.error_responses import ErrorResponse
from salon_catalog.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from salon_catalog.use_cases.browse_catalog import BrowseCatalog
from salon_catalog.use_cases.catalog_store import CatalogStore


router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get(
    "",
    response_model=CatalogResponseDTO,
    summary="Browse the filtered catalog",
    description="""
    Returns one page of the services matching the current filters,
    together with catalog statistics, the active criteria and the
    loading/error state of the last refresh.

    ## Paging
    - Default limit: 50
    - Max limit: 200

    ## Sorting
    - sort_by: name (case-insensitive), price or duration
    - Omit sort_by to keep the order of the source listing
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def get_catalog(
    query: Annotated[CatalogQueryDTO, Query()],
    use_case: BrowseCatalog = Depends(get_browse_catalog_use_case),
) -> CatalogResponseDTO:
    """Browse endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = CatalogMapper.to_browse_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return CatalogMapper.to_response(
        services=result.services,
        view=result.view,
        offset=query.offset,
        limit=query.limit,
    )


@router.get(
    "/stats",
    response_model=CatalogStatsDTO,
    summary="Catalog statistics",
    description="Totals over the full catalog. Filters do not affect them.",
)
def get_catalog_stats(store: CatalogStore = Depends(get_catalog_store)) -> CatalogStatsDTO:
    return CatalogMapper.to_stats_response(store.snapshot().stats)


@router.get(
    "/categories",
    response_model=CategoriesResponseDTO,
    summary="Category options",
    description="Distinct categories of the full catalog, in first-seen order.",
)
def get_catalog_categories(
    store: CatalogStore = Depends(get_catalog_store),
) -> CategoriesResponseDTO:
    return CategoriesResponseDTO(categories=list(store.snapshot().categories))


@router.patch(
    "/filters",
    response_model=CatalogResponseDTO,
    summary="Change filter criteria",
    description="""
    Updates any of the four criteria. Omitted fields keep their value.
    All criteria combine with AND semantics.
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def update_filters(
    body: FilterCriteriaUpdateDTO,
    store: CatalogStore = Depends(get_catalog_store),
) -> CatalogResponseDTO:
    view = store.update_criteria(**CatalogMapper.to_criteria_changes(body))
    return CatalogMapper.to_first_page_response(view)


@router.post(
    "/filters/reset",
    response_model=CatalogResponseDTO,
    summary="Clear filters",
    description="Restores every criterion to its default. Does not re-fetch the catalog.",
)
def reset_filters(store: CatalogStore = Depends(get_catalog_store)) -> CatalogResponseDTO:
    return CatalogMapper.to_first_page_response(store.reset())


@router.post(
    "/refresh",
    response_model=CatalogResponseDTO,
    summary="Reload the catalog",
    description="""
    Re-runs the full traversal of the source listing. On failure the
    previously loaded catalog is kept and a 502 is returned. A refresh
    requested while another is running returns the current state.
    """,
    responses={502: {"model": ErrorResponse, "description": "Source listing unavailable"}},
)
def refresh_catalog(store: CatalogStore = Depends(get_catalog_store)) -> CatalogResponseDTO:
    view = store.refresh()
    if view.error is not None:
        raise view.error
    return CatalogMapper.to_first_page_response(view)
