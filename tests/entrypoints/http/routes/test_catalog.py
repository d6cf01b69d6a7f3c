"""
Test suite for the /v1/catalog routes.

Routes run against a real CatalogStore fed by an InMemoryPageFetcher,
injected through dependency overrides.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from salon_catalog.adapters.in_memory_page_fetcher import InMemoryPageFetcher
from salon_catalog.entrypoints.http.dependencies import get_catalog_store
from salon_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from salon_catalog.entrypoints.http.routes.catalog import router
from salon_catalog.use_cases.catalog_store import CatalogStore
from salon_catalog.use_cases.fetch_all_services import FetchAllServices

START_URL = "http://listing.test/salons/service/"
PAGE_2 = f"{START_URL}?page=2"


@pytest.fixture()
def pages() -> dict:
    return {
        START_URL: {
            "next": PAGE_2,
            "results": [
                {"id": 1, "name": "Haircut", "category": "Hair", "price": "100", "duration": 30},
                {"id": 2, "name": "Colour", "category": "Hair", "price": 600, "active": False},
            ],
        },
        PAGE_2: {
            "next": None,
            "results": [
                {"id": 3, "title": "Gel Nails", "type": "Nails", "cost": 2000},
            ],
        },
    }


@pytest.fixture()
def store(pages: dict) -> CatalogStore:
    catalog_store = CatalogStore(FetchAllServices(InMemoryPageFetcher(pages)), START_URL)
    catalog_store.refresh()
    return catalog_store


@pytest.fixture()
def app(store: CatalogStore) -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_catalog_store] = lambda: store
    return test_app


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


# ==============================================================================
# GET /v1/catalog
# ==============================================================================


def test_get_catalog_returns_full_view(client: TestClient) -> None:
    response = client.get("/v1/catalog")

    assert response.status_code == 200
    data = response.json()
    assert [s["identity"] for s in data["services"]] == [1, 2, 3]
    assert data["total_matching"] == 3
    assert data["full_count"] == 3
    assert data["offset"] == 0
    assert data["limit"] == 50
    assert data["stats"] == {
        "total": 3,
        "active_count": 2,
        "average_price": 900.0,
        "distinct_category_count": 2,
    }
    assert data["criteria"] == {
        "search_text": "",
        "category": "all",
        "activeness": "all",
        "price_bucket": "all",
    }
    assert data["filters_active"] is False
    assert data["categories"] == ["Hair", "Nails"]
    assert data["loading"] is False
    assert data["error_message"] is None


def test_get_catalog_service_shape(client: TestClient) -> None:
    services = client.get("/v1/catalog").json()["services"]

    assert services[0] == {
        "identity": 1,
        "name": "Haircut",
        "category": "Hair",
        "price": 100.0,
        "price_label": "₹100.00",
        "duration_minutes": 30,
        "duration_label": "30 mins",
        "description": "No description available",
        "is_active": True,
        "status_label": "Active",
    }
    assert services[1]["status_label"] == "Inactive"
    assert services[2]["name"] == "Gel Nails"
    assert services[2]["duration_label"] == "N/A"


def test_get_catalog_paging_and_sorting(client: TestClient) -> None:
    response = client.get(
        "/v1/catalog", params={"sort_by": "price", "descending": True, "offset": 1, "limit": 1}
    )

    data = response.json()
    assert [s["identity"] for s in data["services"]] == [2]
    assert data["total_matching"] == 3
    assert data["offset"] == 1
    assert data["limit"] == 1


@pytest.mark.parametrize(
    "params",
    [{"limit": 0}, {"limit": 201}, {"offset": -1}, {"sort_by": "rating"}],
)
def test_get_catalog_invalid_query(client: TestClient, params: dict) -> None:
    response = client.get("/v1/catalog", params=params)

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


# ==============================================================================
# Stats and categories
# ==============================================================================


def test_get_stats_ignores_filters(client: TestClient) -> None:
    client.patch("/v1/catalog/filters", json={"category": "Nails"})

    response = client.get("/v1/catalog/stats")

    assert response.status_code == 200
    assert response.json()["total"] == 3


def test_get_categories(client: TestClient) -> None:
    response = client.get("/v1/catalog/categories")

    assert response.json() == {"categories": ["Hair", "Nails"]}


# ==============================================================================
# Filters
# ==============================================================================


def test_patch_filters_applies_criteria(client: TestClient) -> None:
    response = client.patch("/v1/catalog/filters", json={"price_bucket": "high"})

    assert response.status_code == 200
    data = response.json()
    assert [s["identity"] for s in data["services"]] == [3]
    assert data["filters_active"] is True
    assert data["full_count"] == 3


def test_patch_filters_is_partial(client: TestClient) -> None:
    client.patch("/v1/catalog/filters", json={"category": "Hair"})

    data = client.patch("/v1/catalog/filters", json={"activeness": "active"}).json()

    assert data["criteria"]["category"] == "Hair"
    assert [s["identity"] for s in data["services"]] == [1]


def test_filters_persist_for_later_reads(client: TestClient) -> None:
    client.patch("/v1/catalog/filters", json={"search_text": "NAIL"})

    data = client.get("/v1/catalog").json()

    assert [s["identity"] for s in data["services"]] == [3]


def test_patch_filters_rejects_unknown_bucket(client: TestClient) -> None:
    response = client.patch("/v1/catalog/filters", json={"price_bucket": "cheap"})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "price_bucket"


def test_patch_filters_rejects_unknown_field(client: TestClient) -> None:
    response = client.patch("/v1/catalog/filters", json={"colour": "red"})

    assert response.status_code == 422


def test_reset_filters(client: TestClient) -> None:
    client.patch("/v1/catalog/filters", json={"category": "Nails", "search_text": "gel"})

    response = client.post("/v1/catalog/filters/reset")

    data = response.json()
    assert response.status_code == 200
    assert data["filters_active"] is False
    assert data["total_matching"] == 3


# ==============================================================================
# Refresh
# ==============================================================================


def test_refresh_reloads_catalog(client: TestClient, pages: dict) -> None:
    pages[PAGE_2]["results"].append({"id": 4, "name": "Facial"})

    response = client.post("/v1/catalog/refresh")

    assert response.status_code == 200
    assert response.json()["full_count"] == 4


def test_refresh_failure_returns_502_and_keeps_catalog(client: TestClient, pages: dict) -> None:
    pages[PAGE_2] = 500

    response = client.post("/v1/catalog/refresh")

    assert response.status_code == 502
    assert response.json() == {"detail": "HTTP 500", "code": "UPSTREAM_STATUS"}

    data = client.get("/v1/catalog").json()
    assert data["full_count"] == 3
    assert data["error_message"] == "HTTP 500"


def test_refresh_failure_keeps_specific_upstream_code(client: TestClient, pages: dict) -> None:
    pages[START_URL]["next"] = "http://[bad"

    response = client.post("/v1/catalog/refresh")

    assert response.status_code == 502
    assert response.json()["code"] == "UPSTREAM_UNAVAILABLE"
    assert client.get("/v1/catalog").json()["full_count"] == 3
