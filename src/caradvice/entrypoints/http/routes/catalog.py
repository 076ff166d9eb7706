from fastapi import APIRouter, Depends, Request

from caradvice.domain.query_normalizer import parse_catalog_params
from caradvice.entrypoints.http.dependencies import (
    get_filter_metadata_use_case,
    get_search_catalog_use_case,
)
from caradvice.entrypoints.http.dtos.catalog import (
    CatalogSearchResponseDTO,
    FilterMetadataResponseDTO,
)
from caradvice.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from caradvice.use_cases.get_filter_metadata import GetFilterMetadata
from caradvice.use_cases.search_catalog import SearchCatalog, SearchCatalogRequest


router = APIRouter(tags=["Catalog"])


@router.get(
    "/catalog",
    response_model=CatalogSearchResponseDTO,
    summary="Search vehicle catalog",
    description="""
    Search the catalog with optional filters, sorting and pagination.

    Parameters are read leniently and never rejected: unknown or malformed
    values are ignored, reversed ranges are swapped and out-of-range pages
    are clamped to the last page.

    ## Filters
    - All filters use AND semantics
    - `marca`, `modelo`, `version`, `transmision`, `combustible`: case-insensitive exact match
    - `tipo` (usados, nuevos, motos), `tipologia`, `condicion`: exact match
    - `anioMin`/`anioMax` (legacy `anio`), `kmMin`/`kmMax`: inclusive ranges
    - `precioMin`/`precioMax`: inclusive, in the currency chosen by `moneda`
    - `moneda` (pesos, dolares): only listings published in that currency
    - `color`: substring; `puertas`: exact; `extras`: comma-separated, all must match
    - `q`: free text over brand, model, version and slug

    ## Sorting
    `recomendados` (default), `precio-asc`, `precio-desc`, `anio-desc`,
    `anio-asc`, `km-asc`, `km-desc`

    ## Pagination
    - `page` (default 1), `perPage` (12, 18 or 24; default 12)

    ## Example
    ```
    GET /v1/catalog?marca=Toyota&moneda=pesos&precioMax=25000000&sort=precio-asc
    ```
    """,
)
def search_catalog(
    request: Request,
    use_case: SearchCatalog = Depends(get_search_catalog_use_case),
) -> CatalogSearchResponseDTO:
    """Search endpoint following parse → execute → map → return pattern."""
    # 1. Normalize raw query string (never fails)
    query = parse_catalog_params(request.query_params)

    # 2. Execute use case
    result = use_case.execute(SearchCatalogRequest(query=query))

    # 3. Map to response
    return CatalogMapper.to_search_response(result)


@router.get(
    "/catalog/filters",
    response_model=FilterMetadataResponseDTO,
    summary="Catalog filter options",
    description="""
    Option lists and numeric ranges for the catalog filter UI.

    - `brands`: deduplicated ignoring case and surrounding spaces
    - `modelsByBrand`: keyed by the brand as listed in `brands`
    - `versionsByModel`: keyed by `"{brand}|{model}"`, trimmed and lowercased
    - Ranges only consider listings with a value for that field
    """,
)
def get_catalog_filters(
    use_case: GetFilterMetadata = Depends(get_filter_metadata_use_case),
) -> FilterMetadataResponseDTO:
    return CatalogMapper.to_metadata_response(use_case.execute())
