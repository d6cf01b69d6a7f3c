from fastapi import APIRouter, Depends

from salon_catalog.entrypoints.http.dependencies import get_get_service_by_identity_use_case
from salon_catalog.entrypoints.http.dtos.catalog import ServiceResponseDTO
from salon_catalog.entrypoints.http.error_responses import ErrorResponse
from salon_catalog.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from salon_catalog.use_cases.get_service_by_identity import (
    GetServiceByIdentity,
    GetServiceByIdentityRequest,
)


router = APIRouter(tags=["Services"])


@router.get(
    "/services/{identity}",
    response_model=ServiceResponseDTO,
    summary="Get a service",
    description="Looks up a service of the loaded catalog by identity, ignoring current filters.",
    responses={404: {"model": ErrorResponse, "description": "Service not found"}},
)
def get_service(
    identity: str,
    use_case: GetServiceByIdentity = Depends(get_get_service_by_identity_use_case),
) -> ServiceResponseDTO:
    result = use_case.execute(GetServiceByIdentityRequest(identity=identity))
    return CatalogMapper.to_service_response(result.service)
