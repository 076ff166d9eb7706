"""Get vehicle detail by slug use case."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from caradvice.domain.catalog_query import normalize_catalog_string
from caradvice.domain.errors import NotFoundError
from caradvice.domain.query_serializer import CATALOG_PATH, safe_return_to
from caradvice.domain.vehicle import Vehicle, viewing_now
from caradvice.ports.vehicle_store import VehicleStore

MAX_SIMILAR_VEHICLES = 3


@dataclass(frozen=True, slots=True)
class GetVehicleBySlugRequest:
    """Request to get a vehicle detail page."""

    slug: str
    return_to: str | None = None  # Catalog URL the visitor came from


@dataclass(frozen=True, slots=True)
class GetVehicleBySlugResponse:
    """Vehicle detail with the data the detail page shows around it."""

    vehicle: Vehicle
    similar: list[Vehicle] = field(default_factory=list)
    viewing_now: int = 0
    return_to: str = CATALOG_PATH


def find_similar_vehicles(
    vehicle: Vehicle, candidates: Sequence[Vehicle], limit: int = MAX_SIMILAR_VEHICLES
) -> list[Vehicle]:
    """Other listings of the same brand or the same type, in store order."""
    brand_key = normalize_catalog_string(vehicle.brand)
    similar = [
        candidate
        for candidate in candidates
        if candidate.slug != vehicle.slug
        and (
            normalize_catalog_string(candidate.brand) == brand_key
            or candidate.type == vehicle.type
        )
    ]
    return similar[:limit]


class GetVehicleBySlug:
    """
    Use case for a single vehicle detail page.

    Responsibilities:
    - Delegate lookup to the store (which signals absence with None)
    - Raise NotFoundError if the vehicle doesn't exist
    - Attach similar vehicles, the viewing-now counter and a safe return link
    """

    def __init__(self, vehicle_store: VehicleStore) -> None:
        self._vehicle_store = vehicle_store

    def execute(self, request: GetVehicleBySlugRequest) -> GetVehicleBySlugResponse:
        """
        Execute the get vehicle by slug use case.

        Args:
            request: Request containing the slug and optional return link

        Returns:
            GetVehicleBySlugResponse with the vehicle and its surroundings

        Raises:
            NotFoundError: If no vehicle has the given slug
        """
        vehicle = self._vehicle_store.get_by_slug(request.slug)

        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.slug)

        return GetVehicleBySlugResponse(
            vehicle=vehicle,
            similar=find_similar_vehicles(vehicle, self._vehicle_store.all()),
            viewing_now=viewing_now(vehicle.slug),
            return_to=safe_return_to(request.return_to),
        )
