"""Get service by identity use case."""

from __future__ import annotations

from dataclasses import dataclass

from salon_catalog.domain.errors import NotFoundError
from salon_catalog.domain.service import CanonicalService
from salon_catalog.use_cases.catalog_store import CatalogStore


@dataclass(frozen=True, slots=True)
class GetServiceByIdentityRequest:
    """Request to get a service by identity (compared as text)."""

    identity: str


@dataclass(frozen=True, slots=True)
class GetServiceByIdentityResponse:
    """Response containing the requested service."""

    service: CanonicalService


class GetServiceByIdentity:
    """
    Use case for retrieving a single service from the loaded catalog.

    Looks through the full set, not the filtered one, so a service
    hidden by the current filters can still be opened directly.
    """

    def __init__(self, catalog_store: CatalogStore) -> None:
        self._store = catalog_store

    def execute(self, request: GetServiceByIdentityRequest) -> GetServiceByIdentityResponse:
        """
        Raises:
            NotFoundError: If no loaded service has that identity
        """
        for service in self._store.services():
            if str(service.identity) == request.identity:
                return GetServiceByIdentityResponse(service=service)

        raise NotFoundError(resource="Service", identifier=request.identity)
