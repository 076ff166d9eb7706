from fastapi import APIRouter, Depends, Query

from caradvice.entrypoints.http.dependencies import (
    get_compare_vehicles_use_case,
    get_vehicle_by_slug_use_case,
)
from caradvice.entrypoints.http.dtos.catalog import (
    CompareResponseDTO,
    VehicleDetailResponseDTO,
)
from caradvice.entrypoints.http.error_responses import ErrorResponse
from caradvice.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from caradvice.use_cases.compare_vehicles import (
    CompareVehicles,
    CompareVehiclesRequest,
    parse_compare_slugs,
)
from caradvice.use_cases.get_vehicle_by_slug import (
    GetVehicleBySlug,
    GetVehicleBySlugRequest,
)


router = APIRouter(tags=["Vehicles"])


@router.get(
    "/vehicles/{slug}",
    response_model=VehicleDetailResponseDTO,
    summary="Vehicle detail",
    description="""
    Vehicle detail page data: the listing, up to three similar listings
    (same brand or same type), the viewing-now counter and a safe
    "back to results" link (`returnTo` is only honoured for `/catalogo` URLs).
    """,
    responses={
        404: {"model": ErrorResponse, "description": "No vehicle with that slug"},
    },
)
def get_vehicle(
    slug: str,
    return_to: str | None = Query(default=None, alias="returnTo"),
    use_case: GetVehicleBySlug = Depends(get_vehicle_by_slug_use_case),
) -> VehicleDetailResponseDTO:
    result = use_case.execute(GetVehicleBySlugRequest(slug=slug, return_to=return_to))
    return CatalogMapper.to_detail_response(result)


@router.get(
    "/compare",
    response_model=CompareResponseDTO,
    summary="Compare vehicles",
    description="""
    Resolve up to five comma-separated slugs (`vehiculos=slug1,slug2`) for
    the comparison table. Unknown slugs are dropped; `comparable` is false
    when fewer than two vehicles resolved.
    """,
)
def compare_vehicles(
    vehiculos: str | None = Query(default=None, examples=["toyota-corolla-xei-2020,peugeot-208-allure-2021"]),
    use_case: CompareVehicles = Depends(get_compare_vehicles_use_case),
) -> CompareResponseDTO:
    result = use_case.execute(CompareVehiclesRequest(slugs=parse_compare_slugs(vehiculos)))
    return CatalogMapper.to_compare_response(result)
