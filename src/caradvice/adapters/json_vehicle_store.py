"""Loads the static catalog JSON file into an in-memory vehicle store."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from caradvice.adapters.in_memory_vehicle_store import InMemoryVehicleStore
from caradvice.domain.errors import CatalogLoadError
from caradvice.domain.vehicle import Vehicle
from caradvice.infra.catalog.vehicle_row import VehicleRow

logger = logging.getLogger(__name__)

_ROWS_ADAPTER = TypeAdapter(list[VehicleRow])


def load_vehicle_store(path: Path) -> InMemoryVehicleStore:
    """
    Read and validate the catalog file, returning an immutable store.

    Called once per process at startup.

    Args:
        path: JSON file holding an array of vehicle records

    Returns:
        InMemoryVehicleStore preserving file order

    Raises:
        CatalogLoadError: If the file cannot be read or any record is invalid
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise CatalogLoadError(
            f"Cannot read catalog file: {exc.strerror or exc}", path=str(path)
        ) from exc

    try:
        rows = _ROWS_ADAPTER.validate_json(raw)
    except PydanticValidationError as exc:
        raise CatalogLoadError(
            "Catalog file is not a valid vehicle list",
            path=str(path),
            error_count=exc.error_count(),
        ) from exc

    store = InMemoryVehicleStore(_to_domain(row) for row in rows)
    logger.info(
        "Vehicle catalog loaded",
        extra={"path": str(path), "vehicle_count": len(store)},
    )
    return store


def _to_domain(row: VehicleRow) -> Vehicle:
    """
    Convert a catalog file record (VehicleRow) to the domain entity.

    Blank optional strings become None so filters treat them as absent.
    """
    return Vehicle(
        id=row.id,
        slug=row.slug,
        type=row.type,
        tipologia=row.tipologia,
        condicion=row.condicion,
        brand=row.brand,
        model=row.model,
        version=row.version,
        year=row.year,
        km=row.km,
        price_ars=row.price_ars,
        price_usd=row.price_usd,
        transmission=row.transmission,
        fuel=row.fuel,
        cover_image=row.cover_image,
        images=tuple(row.images),
        color=(row.color or "").strip() or None,
        door_count=row.puertas,
        extras=tuple(extra for extra in row.extras if extra.strip()),
        is_featured=row.is_featured,
    )
