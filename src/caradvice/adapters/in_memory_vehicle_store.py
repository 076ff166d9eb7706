from __future__ import annotations

from typing import Iterable, Sequence

from caradvice.domain.vehicle import Vehicle
from caradvice.ports.vehicle_store import VehicleStore


class InMemoryVehicleStore(VehicleStore):
    """
    Immutable snapshot of the catalog.

    - Stores vehicles in insertion order (a tuple, never mutated)
    - Indexes slugs once; the first vehicle wins on duplicate slugs
    """

    def __init__(self, vehicles: Iterable[Vehicle]) -> None:
        self._vehicles: tuple[Vehicle, ...] = tuple(vehicles)
        self._by_slug: dict[str, Vehicle] = {}
        for vehicle in self._vehicles:
            self._by_slug.setdefault(vehicle.slug, vehicle)

    def all(self) -> Sequence[Vehicle]:
        return self._vehicles

    def get_by_slug(self, slug: str) -> Vehicle | None:
        return self._by_slug.get(slug)
