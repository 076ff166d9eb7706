from pydantic import Field

from caradvice.entrypoints.http.dtos.base import CamelModel


class DisplayPriceDTO(CamelModel):
    amount: int
    currency: str = Field(description='"USD" or "ARS"')


class VehicleResponseDTO(CamelModel):
    id: str
    slug: str
    type: str
    tipologia: str
    condicion: str
    brand: str
    model: str
    version: str
    year: int
    km: int
    price_ars: int
    price_usd: int
    display_price: DisplayPriceDTO | None = Field(
        default=None,
        description="Price in the listing's own currency; null for price on request",
    )
    transmission: str
    fuel: str
    color: str | None = None
    puertas: int | None = None
    extras: list[str] = Field(default_factory=list)
    cover_image: str
    images: list[str] = Field(
        default_factory=list,
        description="Gallery images; falls back to the cover image when the listing has none",
    )
    is_featured: bool = False


class CatalogQueryDTO(CamelModel):
    """Normalized search parameters, keyed by their query-string names."""

    q: str | None = None
    tipo: str | None = None
    tipologia: str | None = None
    condicion: str | None = None
    marca: str | None = None
    modelo: str | None = None
    version: str | None = None
    moneda: str | None = None
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
    sort: str
    page: int
    per_page: int


class CatalogLinksDTO(CamelModel):
    self_url: str = Field(alias="self", description="Current search, defaults omitted")
    canonical: str = Field(description="Current search with every parameter spelled out")
    prev: str | None = None
    next: str | None = None
    remove_filters: dict[str, str] = Field(
        default_factory=dict,
        description="Per active filter, the current search without it (back on page 1)",
    )


class CatalogSearchResponseDTO(CamelModel):
    items: list[VehicleResponseDTO]
    total: int
    page: int
    per_page: int
    total_pages: int
    applied_params: CatalogQueryDTO
    links: CatalogLinksDTO


class NumericRangeDTO(CamelModel):
    min: int
    max: int


class FilterMetadataResponseDTO(CamelModel):
    brands: list[str]
    models_by_brand: dict[str, list[str]]
    versions_by_model: dict[str, list[str]] = Field(
        description='Keyed by "{brand}|{model}", both trimmed and lowercased'
    )
    transmissions: list[str]
    fuels: list[str]
    colors: list[str]
    door_counts: list[int]
    extras: list[str]
    year_range: NumericRangeDTO
    price_range: NumericRangeDTO
    price_range_usd: NumericRangeDTO
    km_range: NumericRangeDTO


class VehicleDetailResponseDTO(CamelModel):
    vehicle: VehicleResponseDTO
    similar: list[VehicleResponseDTO]
    viewing_now: int
    return_to: str


class CompareResponseDTO(CamelModel):
    vehicles: list[VehicleResponseDTO]
    slugs: list[str]
    comparable: bool
