from __future__ import annotations

import zlib
from dataclasses import dataclass
from typing import Literal

VehicleType = Literal["usados", "nuevos", "motos"]
Tipologia = Literal[
    "sedan",
    "hatchback",
    "coupe",
    "convertible",
    "suv",
    "pickup",
    "familiar",
    "van",
    "motos",
]
Condicion = Literal["0km", "usados", "reventa", "proximo_ingreso"]

VEHICLE_TYPES: tuple[str, ...] = ("usados", "nuevos", "motos")
TIPOLOGIAS: tuple[str, ...] = (
    "sedan",
    "hatchback",
    "coupe",
    "convertible",
    "suv",
    "pickup",
    "familiar",
    "van",
    "motos",
)
CONDICIONES: tuple[str, ...] = ("0km", "usados", "reventa", "proximo_ingreso")

# Cosmetic "people viewing this car" counter bounds
VIEWING_NOW_MIN = 3
VIEWING_NOW_MAX = 14


@dataclass(frozen=True, slots=True)
class Vehicle:
    id: str
    slug: str
    type: VehicleType
    tipologia: Tipologia
    condicion: Condicion
    brand: str
    model: str
    version: str
    year: int
    km: int
    price_ars: int
    price_usd: int
    transmission: str
    fuel: str
    cover_image: str
    images: tuple[str, ...] = ()
    color: str | None = None
    door_count: int | None = None
    extras: tuple[str, ...] = ()
    is_featured: bool = False

    @property
    def gallery(self) -> tuple[str, ...]:
        """Images to show for the listing, falling back to the cover image."""
        if self.images:
            return self.images
        return (self.cover_image,)

    @property
    def display_price(self) -> tuple[int, str] | None:
        """
        Price in the currency the listing is published in.

        Returns:
            (amount, "USD" | "ARS"), or None for "price on request" listings
        """
        if self.price_usd > 0:
            return self.price_usd, "USD"
        if self.price_ars > 0:
            return self.price_ars, "ARS"
        return None


def viewing_now(slug: str) -> int:
    """Deterministic pseudo-random viewer count for a listing slug."""
    span = VIEWING_NOW_MAX - VIEWING_NOW_MIN + 1
    return VIEWING_NOW_MIN + zlib.crc32(slug.encode("utf-8")) % span
