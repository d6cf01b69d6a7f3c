from __future__ import annotations

from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from salon_catalog.domain.errors import NotFoundError
from salon_catalog.domain.field_resolver import to_canonical
from salon_catalog.entrypoints.http.dependencies import get_get_service_by_identity_use_case
from salon_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from salon_catalog.entrypoints.http.routes.services import router
from salon_catalog.use_cases.get_service_by_identity import (
    GetServiceByIdentityRequest,
    GetServiceByIdentityResponse,
)


@pytest.fixture
def mock_use_case() -> Mock:
    return Mock()


@pytest.fixture
def client(mock_use_case: Mock) -> TestClient:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_get_service_by_identity_use_case] = lambda: mock_use_case
    return TestClient(test_app, raise_server_exceptions=False)


def test_get_service_success(client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = GetServiceByIdentityResponse(
        service=to_canonical({"id": "svc-1", "name": "Facial", "price": 0, "time": 60})
    )

    response = client.get("/v1/services/svc-1")

    assert response.status_code == 200
    data = response.json()
    assert data["identity"] == "svc-1"
    assert data["name"] == "Facial"
    assert data["price_label"] == "N/A"
    assert data["duration_label"] == "60 mins"
    mock_use_case.execute.assert_called_once_with(GetServiceByIdentityRequest(identity="svc-1"))


def test_get_service_not_found(client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = NotFoundError(resource="Service", identifier="404")

    response = client.get("/v1/services/404")

    assert response.status_code == 404
    assert response.json() == {
        "detail": "Service with identifier '404' not found",
        "code": "NOT_FOUND",
    }
