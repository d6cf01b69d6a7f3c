from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from salon_catalog.adapters.httpx_page_fetcher import HttpxPageFetcher
from salon_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from salon_catalog.entrypoints.http.routes.catalog import router as catalog_router
from salon_catalog.entrypoints.http.routes.health import router as health_router
from salon_catalog.entrypoints.http.routes.services import router as services_router
from salon_catalog.infra.config import listing_url, log_level, request_timeout
from salon_catalog.infra.logging_config import setup_logging
from salon_catalog.use_cases.catalog_store import CatalogStore
from salon_catalog.use_cases.fetch_all_services import FetchAllServices


@asynccontextmanager
async def catalog_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Owns the catalog store: build and load on startup, tear down on shutdown."""
    if getattr(app.state, "catalog_store", None) is not None:
        # Store injected by the caller; it owns the lifecycle
        yield
        return

    start_url = listing_url()
    fetcher = HttpxPageFetcher(timeout=request_timeout())
    store = CatalogStore(FetchAllServices(fetcher), start_url=start_url)
    app.state.catalog_store = store
    try:
        store.refresh()
        yield
    finally:
        store.close()
        fetcher.close()
        app.state.catalog_store = None


def build_app(catalog_store: CatalogStore | None = None) -> FastAPI:
    setup_logging(log_level())

    app = FastAPI(
        title="Salon Catalog API",
        description="""
        Browse, search and filter the salon service catalog.

        ## Features
        - Full catalog loaded from the paginated source listing
        - Text search, category, status and price range filters
        - Catalog statistics (totals, active count, average price, categories)

        ## Authentication
        None. The catalog is read-only.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=catalog_lifespan,
    )
    app.state.catalog_store = catalog_store

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(catalog_router, prefix="/v1")
    app.include_router(services_router, prefix="/v1")

    return app


app = build_app()
