"""
Catalog query serialization.

Inverse of the normalizer: turns a CatalogQuery back into a canonical query
string for pagination links, filter-chip removal links and shareable
searches. For any normalized query: parse_catalog_params(serialize(q)) == q.
"""

from __future__ import annotations

from dataclasses import replace
from urllib.parse import urlencode

from caradvice.domain.catalog_query import (
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    DEFAULT_SORT,
    CatalogQuery,
)

CATALOG_PATH = "/catalogo"

# (query-string name, CatalogQuery attribute), in canonical emission order
_FILTER_FIELDS: tuple[tuple[str, str], ...] = (
    ("q", "q"),
    ("tipo", "tipo"),
    ("tipologia", "tipologia"),
    ("condicion", "condicion"),
    ("marca", "marca"),
    ("modelo", "modelo"),
    ("version", "version"),
    ("moneda", "moneda"),
    ("anioMin", "anio_min"),
    ("anioMax", "anio_max"),
    ("precioMin", "precio_min"),
    ("precioMax", "precio_max"),
    ("kmMin", "km_min"),
    ("kmMax", "km_max"),
    ("transmision", "transmision"),
    ("combustible", "combustible"),
    ("color", "color"),
    ("puertas", "puertas"),
    ("extras", "extras"),
)


def active_filter_names(query: CatalogQuery) -> list[str]:
    """Query-string names of the filters set on a query, in canonical order."""
    return [
        name
        for name, attribute in _FILTER_FIELDS
        if getattr(query, attribute) not in (None, "")
    ]


def serialize_catalog_params(
    query: CatalogQuery, include_defaults: bool = False
) -> list[tuple[str, str]]:
    """
    Serialize a query into ordered (name, value) pairs.

    Unset filters are always omitted. sort/page/perPage are omitted when they
    hold their default value, unless include_defaults is set (used for the
    canonical "this exact search" link).
    """
    pairs: list[tuple[str, str]] = []

    for name, attribute in _FILTER_FIELDS:
        value = getattr(query, attribute)
        if value is None or value == "":
            continue
        pairs.append((name, str(value)))

    if include_defaults or query.sort != DEFAULT_SORT:
        pairs.append(("sort", query.sort))
    if include_defaults or query.page != DEFAULT_PAGE:
        pairs.append(("page", str(query.page)))
    if include_defaults or query.per_page != DEFAULT_PER_PAGE:
        pairs.append(("perPage", str(query.per_page)))

    return pairs


def to_catalog_query_string(query: CatalogQuery, include_defaults: bool = False) -> str:
    return urlencode(serialize_catalog_params(query, include_defaults=include_defaults))


def build_catalog_url(query: CatalogQuery, include_defaults: bool = False) -> str:
    """Catalog page URL for a query, without a trailing '?' when empty."""
    query_string = to_catalog_query_string(query, include_defaults=include_defaults)
    return f"{CATALOG_PATH}?{query_string}" if query_string else CATALOG_PATH


def remove_filters(query: CatalogQuery, *names: str) -> CatalogQuery:
    """
    Drop filters by query-string name, resetting to the first page.

    Used for filter-chip removal links. Paging keys reset to their defaults.
    Unknown names are ignored.
    """
    changes: dict[str, object] = {"page": DEFAULT_PAGE}
    for name, attribute in _FILTER_FIELDS:
        if name in names:
            changes[attribute] = None
    if "sort" in names:
        changes["sort"] = DEFAULT_SORT
    if "perPage" in names:
        changes["per_page"] = DEFAULT_PER_PAGE
    # The legacy single-year filter maps onto both bounds
    if "anio" in names:
        changes["anio_min"] = None
        changes["anio_max"] = None
    return replace(query, **changes)  # type: ignore[arg-type]


def safe_return_to(value: str | None) -> str:
    """Only catalog paths are accepted as "back to results" targets."""
    if not value or not value.startswith(CATALOG_PATH):
        return CATALOG_PATH
    return value
