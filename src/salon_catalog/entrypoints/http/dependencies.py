"""
Dependency injection for FastAPI routes.

Key principle: the catalog store is created once per application (in the
lifespan) and shared; use cases are cheap and built per request.
"""

from __future__ import annotations

from fastapi import Depends, Request

from salon_catalog.use_cases.browse_catalog import BrowseCatalog
from salon_catalog.use_cases.catalog_store import CatalogStore
from salon_catalog.use_cases.get_service_by_identity import GetServiceByIdentity


def get_catalog_store(request: Request) -> CatalogStore:
    """
    Returns the application's catalog store.

    The store lives on ``app.state`` for the lifetime of the process,
    so every request sees the same full set and criteria.
    """
    return request.app.state.catalog_store


def get_browse_catalog_use_case(
    store: CatalogStore = Depends(get_catalog_store),
) -> BrowseCatalog:
    return BrowseCatalog(catalog_store=store)


def get_get_service_by_identity_use_case(
    store: CatalogStore = Depends(get_catalog_store),
) -> GetServiceByIdentity:
    return GetServiceByIdentity(catalog_store=store)
