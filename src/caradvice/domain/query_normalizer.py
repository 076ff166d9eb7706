"""
Catalog query normalization.

Turns untrusted, loosely typed query-string input into a CatalogQuery.
Normalization never fails: unparseable, out-of-range or unknown values are
dropped (or replaced by their default) instead of raising.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Sequence, TypeVar, Union

from caradvice.domain.catalog_query import (
    ALLOWED_PER_PAGE,
    CATALOG_SORTS,
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    DEFAULT_SORT,
    MAX_QUERY_LENGTH,
    MONEDAS,
    CatalogQuery,
)
from caradvice.domain.vehicle import CONDICIONES, TIPOLOGIAS, VEHICLE_TYPES

RawValue = Union[str, Sequence[str], None]
RawParams = Mapping[str, RawValue]

_T = TypeVar("_T")

# Leading integer, the way browsers parse "12abc" as 12
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _first_value(raw: RawParams, key: str) -> str | None:
    # Multi-dicts (starlette QueryParams, werkzeug MultiDict) expose every value
    getlist = getattr(raw, "getlist", None)
    if callable(getlist):
        values = getlist(key)
        return values[0] if values else None

    value = raw.get(key)
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, Sequence):
        return value[0] if value else None
    return None


def _clean_string(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed or None


def _parse_non_negative_int(value: str | None) -> int | None:
    if not value:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    try:
        parsed = int(match.group(1))
    except ValueError:
        # Digit runs past the interpreter's int conversion limit
        return None
    if parsed < 0:
        return None
    return parsed


def _parse_choice(value: str | None, allowed: tuple[str, ...]) -> str | None:
    if value is None:
        return None
    return value if value in allowed else None


def _normalize_range(
    low: _T | None, high: _T | None
) -> tuple[_T | None, _T | None]:
    if low is None or high is None:
        return low, high
    return (low, high) if low <= high else (high, low)  # type: ignore[operator]


def parse_catalog_params(raw: RawParams) -> CatalogQuery:
    """
    Parse raw query-string values into a normalized CatalogQuery.

    Args:
        raw: Mapping of parameter name to a string, a list of strings
             (first element wins) or None. Multi-dicts are supported.

    Returns:
        CatalogQuery satisfying all normalization invariants
    """

    def text(key: str) -> str | None:
        return _clean_string(_first_value(raw, key))

    def integer(key: str) -> int | None:
        return _parse_non_negative_int(_first_value(raw, key))

    q = text("q")
    if q is not None:
        q = q[:MAX_QUERY_LENGTH].rstrip() or None

    # Legacy single-year parameter seeds whichever bound is missing
    anio_legacy = integer("anio")
    anio_min = integer("anioMin")
    anio_max = integer("anioMax")
    anio_min, anio_max = _normalize_range(
        anio_min if anio_min is not None else anio_legacy,
        anio_max if anio_max is not None else anio_legacy,
    )
    precio_min, precio_max = _normalize_range(integer("precioMin"), integer("precioMax"))
    km_min, km_max = _normalize_range(integer("kmMin"), integer("kmMax"))

    page = integer("page")
    per_page = integer("perPage")

    return CatalogQuery(
        q=q,
        tipo=_parse_choice(text("tipo"), VEHICLE_TYPES),  # type: ignore[arg-type]
        tipologia=_parse_choice(text("tipologia"), TIPOLOGIAS),  # type: ignore[arg-type]
        condicion=_parse_choice(text("condicion"), CONDICIONES),  # type: ignore[arg-type]
        marca=text("marca"),
        modelo=text("modelo"),
        version=text("version"),
        moneda=_parse_choice(text("moneda"), MONEDAS),  # type: ignore[arg-type]
        anio_min=anio_min,
        anio_max=anio_max,
        precio_min=precio_min,
        precio_max=precio_max,
        km_min=km_min,
        km_max=km_max,
        transmision=text("transmision"),
        combustible=text("combustible"),
        color=text("color"),
        puertas=integer("puertas"),
        extras=text("extras"),
        sort=_parse_choice(text("sort"), CATALOG_SORTS) or DEFAULT_SORT,  # type: ignore[arg-type]
        page=page if page else DEFAULT_PAGE,
        per_page=per_page if per_page in ALLOWED_PER_PAGE else DEFAULT_PER_PAGE,
    )
