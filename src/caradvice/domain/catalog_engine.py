"""
In-memory catalog query engine.

Applies a normalized CatalogQuery to the vehicle collection:
AND-semantics filtering, then a stable sort, then page clamping and slicing.
Pure and deterministic; an over-constrained query yields an empty page,
never an error.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Callable, Sequence

from caradvice.domain.catalog_query import CatalogQuery, normalize_catalog_string
from caradvice.domain.vehicle import Vehicle


@dataclass(frozen=True, slots=True)
class CatalogSearchResult:
    items: list[Vehicle]
    total: int  # Matching vehicles before paging
    page: int  # Served page (clamped)
    per_page: int
    total_pages: int
    applied_params: CatalogQuery  # Query actually served, with the clamped page


def _contains(source: str, search: str) -> bool:
    return search.casefold() in source.casefold()


def _same_text(source: str, search: str) -> bool:
    return normalize_catalog_string(source) == normalize_catalog_string(search)


def active_price(vehicle: Vehicle, query: CatalogQuery) -> int:
    """Price in the currency selected by the query (ARS unless dolares)."""
    return vehicle.price_usd if query.uses_usd else vehicle.price_ars


def _in_range(value: int, low: int | None, high: int | None) -> bool:
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def matches(vehicle: Vehicle, query: CatalogQuery) -> bool:
    """True when the vehicle passes every filter set on the query."""
    # Currency gate: only listings published in the selected currency
    if query.moneda == "dolares" and vehicle.price_usd <= 0:
        return False
    if query.moneda == "pesos" and vehicle.price_ars <= 0:
        return False

    if query.tipo and vehicle.type != query.tipo:
        return False
    if query.tipologia and vehicle.tipologia != query.tipologia:
        return False
    if query.condicion and vehicle.condicion != query.condicion:
        return False

    if query.marca and not _same_text(vehicle.brand, query.marca):
        return False
    if query.modelo and not _same_text(vehicle.model, query.modelo):
        return False
    if query.version and not _same_text(vehicle.version, query.version):
        return False
    if query.transmision and not _same_text(vehicle.transmission, query.transmision):
        return False
    if query.combustible and not _same_text(vehicle.fuel, query.combustible):
        return False

    if not _in_range(vehicle.year, query.anio_min, query.anio_max):
        return False
    if not _in_range(vehicle.km, query.km_min, query.km_max):
        return False
    if not _in_range(active_price(vehicle, query), query.precio_min, query.precio_max):
        return False

    # Optional attributes: a listing without the attribute is not filtered out
    if query.color and vehicle.color and not _contains(vehicle.color, query.color):
        return False
    if (
        query.puertas is not None
        and vehicle.door_count is not None
        and vehicle.door_count != query.puertas
    ):
        return False

    tags = query.extras_tags
    if tags:
        vehicle_extras = [extra.casefold() for extra in vehicle.extras]
        if not all(any(tag in extra for extra in vehicle_extras) for tag in tags):
            return False

    if query.q:
        haystack = f"{vehicle.brand} {vehicle.model} {vehicle.version} {vehicle.slug}"
        if not _contains(haystack, query.q):
            return False

    return True


def _sort_key(query: CatalogQuery) -> tuple[Callable[[Vehicle], Any], bool]:
    """(key function, reverse) for the query's sort order."""
    if query.sort == "precio-asc":
        return (lambda v: active_price(v, query)), False
    if query.sort == "precio-desc":
        return (lambda v: active_price(v, query)), True
    if query.sort == "anio-desc":
        return (lambda v: (-v.year, v.km)), False
    if query.sort == "anio-asc":
        return (lambda v: (v.year, v.km)), False
    if query.sort == "km-asc":
        return (lambda v: (v.km, -v.year)), False
    if query.sort == "km-desc":
        return (lambda v: (-v.km, -v.year)), False
    # recomendados: featured first, then newest, then lowest km
    return (lambda v: (not v.is_featured, -v.year, v.km)), False


def sort_vehicles(vehicles: Sequence[Vehicle], query: CatalogQuery) -> list[Vehicle]:
    """Stable sort: fully tied vehicles keep their store order."""
    key, reverse = _sort_key(query)
    # sorted(reverse=True) keeps ties in original order, unlike reversing afterwards
    return sorted(vehicles, key=key, reverse=reverse)


def search_vehicles(query: CatalogQuery, vehicles: Sequence[Vehicle]) -> CatalogSearchResult:
    """
    Filter, sort and paginate the catalog.

    Args:
        query: Normalized query (see parse_catalog_params)
        vehicles: Catalog in store order

    Returns:
        CatalogSearchResult. The requested page is clamped to
        [1, total_pages]; applied_params carries the served page.
    """
    filtered = [vehicle for vehicle in vehicles if matches(vehicle, query)]
    ordered = sort_vehicles(filtered, query)

    total = len(ordered)
    total_pages = max(1, math.ceil(total / query.per_page))
    page = min(max(query.page, 1), total_pages)

    start = (page - 1) * query.per_page
    items = ordered[start : start + query.per_page]

    return CatalogSearchResult(
        items=items,
        total=total,
        page=page,
        per_page=query.per_page,
        total_pages=total_pages,
        applied_params=replace(query, page=page),
    )
