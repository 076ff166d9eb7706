"""
Filter metadata derived from the vehicle catalog.

Everything here is a pure function of the vehicle collection: the option
lists that populate the catalog filter UI (brand -> model -> version
cascades, categorical options, numeric slider ranges).

Free-text fields are inconsistently cased in the source data ("Toyota",
"toyota "), so deduplication and brand/model matching always go through
normalize_catalog_string, never plain equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Iterable, Sequence

from caradvice.domain.catalog_query import normalize_catalog_string
from caradvice.domain.vehicle import Vehicle

# Sentinels used when no vehicle qualifies for a range
DEFAULT_MIN_YEAR = 1980
EMPTY_RANGE = (0, 0)


@dataclass(frozen=True, slots=True)
class NumericRange:
    min: int
    max: int


@dataclass(frozen=True, slots=True)
class FilterMetadata:
    brands: list[str] = field(default_factory=list)
    # Keyed by the brand's display spelling (as listed in `brands`)
    models_by_brand: dict[str, list[str]] = field(default_factory=dict)
    # Keyed by "{normalized_brand}|{normalized_model}"
    versions_by_model: dict[str, list[str]] = field(default_factory=dict)
    transmissions: list[str] = field(default_factory=list)
    fuels: list[str] = field(default_factory=list)
    colors: list[str] = field(default_factory=list)
    door_counts: list[int] = field(default_factory=list)
    extras: list[str] = field(default_factory=list)
    year_range: NumericRange = NumericRange(DEFAULT_MIN_YEAR, DEFAULT_MIN_YEAR)
    price_range: NumericRange = NumericRange(*EMPTY_RANGE)
    price_range_usd: NumericRange = NumericRange(*EMPTY_RANGE)
    km_range: NumericRange = NumericRange(*EMPTY_RANGE)


def version_key(brand: str, model: str) -> str:
    """Lookup key for FilterMetadata.versions_by_model."""
    return f"{normalize_catalog_string(brand)}|{normalize_catalog_string(model)}"


def distinct_display_values(values: Iterable[str | None]) -> list[str]:
    """
    Deduplicate free-text values by normalized key.

    The first literal spelling encountered wins (trimmed); the result is
    sorted alphabetically (case-insensitive) by display value.
    """
    seen: dict[str, str] = {}
    for value in values:
        key = normalize_catalog_string(value)
        if not key or key in seen:
            continue
        seen[key] = value.strip()  # type: ignore[union-attr]
    return sorted(seen.values(), key=lambda display: (display.casefold(), display))


def _numeric_range(
    vehicles: Sequence[Vehicle],
    getter: Callable[[Vehicle], int],
    default: tuple[int, int],
) -> NumericRange:
    values = [value for value in map(getter, vehicles) if value > 0]
    if not values:
        return NumericRange(*default)
    return NumericRange(min(values), max(values))


def build_filter_metadata(
    vehicles: Sequence[Vehicle], current_year: int | None = None
) -> FilterMetadata:
    """
    Derive filter option sets and numeric ranges from the catalog.

    Args:
        vehicles: Catalog in store order
        current_year: Upper bound used for the empty-catalog year sentinel
                      (defaults to today's year)

    Returns:
        FilterMetadata snapshot. Same input always yields an equal snapshot.
    """
    if current_year is None:
        current_year = date.today().year

    brands = distinct_display_values(v.brand for v in vehicles)

    models_by_brand: dict[str, list[str]] = {}
    for brand in brands:
        brand_key = normalize_catalog_string(brand)
        models_by_brand[brand] = distinct_display_values(
            v.model for v in vehicles if normalize_catalog_string(v.brand) == brand_key
        )

    grouped_versions: dict[str, list[str]] = {}
    for vehicle in vehicles:
        grouped_versions.setdefault(version_key(vehicle.brand, vehicle.model), []).append(
            vehicle.version
        )
    versions_by_model = {
        key: distinct_display_values(versions) for key, versions in grouped_versions.items()
    }

    return FilterMetadata(
        brands=brands,
        models_by_brand=models_by_brand,
        versions_by_model=versions_by_model,
        transmissions=distinct_display_values(v.transmission for v in vehicles),
        fuels=distinct_display_values(v.fuel for v in vehicles),
        colors=distinct_display_values(v.color for v in vehicles),
        door_counts=sorted({v.door_count for v in vehicles if v.door_count is not None}),
        extras=distinct_display_values(extra for v in vehicles for extra in v.extras),
        year_range=_numeric_range(
            vehicles, lambda v: v.year, (DEFAULT_MIN_YEAR, current_year + 1)
        ),
        price_range=_numeric_range(vehicles, lambda v: v.price_ars, EMPTY_RANGE),
        price_range_usd=_numeric_range(vehicles, lambda v: v.price_usd, EMPTY_RANGE),
        km_range=_numeric_range(vehicles, lambda v: v.km, EMPTY_RANGE),
    )
