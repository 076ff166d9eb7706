from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class VehicleRow(BaseModel):
    """
    One record of the static catalog file (camelCase JSON keys).

    Field names and types follow the exported dataset; conversion to the
    domain Vehicle happens in the store adapter.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    type: Literal["usados", "nuevos", "motos"]
    tipologia: Literal[
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
    condicion: Literal["0km", "usados", "reventa", "proximo_ingreso"]

    brand: str
    model: str
    version: str = ""
    year: int = Field(ge=1900)
    km: int = Field(default=0, ge=0)

    price_ars: int = Field(default=0, ge=0, alias="priceArs")
    price_usd: int = Field(default=0, ge=0, alias="priceUsd")

    transmission: str = ""
    fuel: str = ""
    color: str | None = None
    puertas: int | None = Field(default=None, ge=0)
    extras: list[str] = Field(default_factory=list)

    cover_image: str = Field(default="", alias="coverImage")
    images: list[str] = Field(default_factory=list)
    is_featured: bool = Field(default=False, alias="isFeatured")
