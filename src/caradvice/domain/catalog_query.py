from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from caradvice.domain.vehicle import Condicion, Tipologia, VehicleType

Moneda = Literal["pesos", "dolares"]
CatalogSort = Literal[
    "recomendados",
    "precio-asc",
    "precio-desc",
    "anio-desc",
    "anio-asc",
    "km-asc",
    "km-desc",
]

MONEDAS: tuple[str, ...] = ("pesos", "dolares")
CATALOG_SORTS: tuple[str, ...] = (
    "recomendados",
    "precio-asc",
    "precio-desc",
    "anio-desc",
    "anio-asc",
    "km-asc",
    "km-desc",
)

DEFAULT_SORT: CatalogSort = "recomendados"
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 12
ALLOWED_PER_PAGE = frozenset({12, 18, 24})
MAX_QUERY_LENGTH = 80


def normalize_catalog_string(value: str | None) -> str:
    """Comparison key for free-text catalog fields (trim + case-fold)."""
    return (value or "").strip().casefold()


@dataclass(frozen=True, slots=True)
class CatalogQuery:
    """
    Normalized catalog search request.

    Instances produced by the normalizer always hold:
    - strings trimmed and non-empty (or None)
    - enum fields restricted to their allow-lists
    - non-negative integers in numeric fields
    - min <= max for every range pair
    - page >= 1 and per_page in ALLOWED_PER_PAGE
    """

    q: str | None = None
    tipo: VehicleType | None = None
    tipologia: Tipologia | None = None
    condicion: Condicion | None = None
    marca: str | None = None
    modelo: str | None = None
    version: str | None = None
    moneda: Moneda | None = None
    anio_min: int | None = None
    anio_max: int | None = None
    precio_min: int | None = None
    precio_max: int | None = None
    km_min: int | None = None
    km_max: int | None = None
    transmision: str | None = None
    combustible: str | None = None
    color: str | None = None
    puertas: int | None = None
    extras: str | None = None
    sort: CatalogSort = DEFAULT_SORT
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE

    @property
    def uses_usd(self) -> bool:
        return self.moneda == "dolares"

    @property
    def extras_tags(self) -> list[str]:
        """Requested extras split on commas, lowercased, blanks dropped."""
        if not self.extras:
            return []
        tags = (tag.strip().casefold() for tag in self.extras.split(","))
        return [tag for tag in tags if tag]
