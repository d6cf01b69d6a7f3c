from __future__ import annotations

from unittest.mock import Mock

import pytest

from salon_catalog.domain.errors import NotFoundError
from salon_catalog.domain.field_resolver import surrogate_identity, to_canonical
from salon_catalog.use_cases.catalog_store import CatalogStore
from salon_catalog.use_cases.get_service_by_identity import (
    GetServiceByIdentity,
    GetServiceByIdentityRequest,
)

NAMELESS = {"category": "Spa"}


@pytest.fixture()
def mock_store() -> Mock:
    store = Mock(spec=CatalogStore)
    store.services.return_value = (
        to_canonical({"id": 42, "name": "Facial"}, 0),
        to_canonical({"pk": "abc", "name": "Massage"}, 1),
        to_canonical(NAMELESS, 2),
    )
    return store


def test_finds_numeric_identity_by_text(mock_store: Mock) -> None:
    response = GetServiceByIdentity(mock_store).execute(GetServiceByIdentityRequest("42"))

    assert response.service.display_name == "Facial"


def test_finds_string_identity(mock_store: Mock) -> None:
    response = GetServiceByIdentity(mock_store).execute(GetServiceByIdentityRequest("abc"))

    assert response.service.display_name == "Massage"


def test_finds_surrogate_identity(mock_store: Mock) -> None:
    identity = surrogate_identity(NAMELESS, 2)

    response = GetServiceByIdentity(mock_store).execute(GetServiceByIdentityRequest(identity))

    assert response.service.category == "Spa"


def test_unknown_identity_raises_not_found(mock_store: Mock) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        GetServiceByIdentity(mock_store).execute(GetServiceByIdentityRequest("999"))

    assert exc_info.value.context == {"resource": "Service", "identifier": "999"}
