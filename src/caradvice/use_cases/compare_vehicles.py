"""Side-by-side vehicle comparison use case."""

from __future__ import annotations

from dataclasses import dataclass, field

from caradvice.domain.vehicle import Vehicle
from caradvice.ports.vehicle_store import VehicleStore

MIN_COMPARED_VEHICLES = 2
MAX_COMPARED_VEHICLES = 5


def parse_compare_slugs(raw: str | None) -> list[str]:
    """
    Parse the `vehiculos` parameter (slug1,slug2,...).

    Slugs are trimmed and lowercased; duplicates and blanks are dropped and
    at most MAX_COMPARED_VEHICLES are kept, in the order given.
    """
    if not raw:
        return []

    slugs: list[str] = []
    for part in raw.split(","):
        slug = part.strip().lower()
        if slug and slug not in slugs:
            slugs.append(slug)
    return slugs[:MAX_COMPARED_VEHICLES]


@dataclass(frozen=True, slots=True)
class CompareVehiclesRequest:
    slugs: list[str]


@dataclass(frozen=True, slots=True)
class CompareVehiclesResponse:
    vehicles: list[Vehicle] = field(default_factory=list)
    slugs: list[str] = field(default_factory=list)  # Slugs that resolved

    @property
    def is_comparable(self) -> bool:
        return len(self.vehicles) >= MIN_COMPARED_VEHICLES


class CompareVehicles:
    """
    Resolve slugs to vehicles for the comparison table.

    Unknown slugs are silently dropped; fewer than two resolved vehicles is
    an empty-state comparison, not an error.
    """

    def __init__(self, vehicle_store: VehicleStore) -> None:
        self._vehicle_store = vehicle_store

    def execute(self, request: CompareVehiclesRequest) -> CompareVehiclesResponse:
        vehicles = [
            vehicle
            for vehicle in (
                self._vehicle_store.get_by_slug(slug)
                for slug in request.slugs[:MAX_COMPARED_VEHICLES]
            )
            if vehicle is not None
        ]
        return CompareVehiclesResponse(
            vehicles=vehicles,
            slugs=[vehicle.slug for vehicle in vehicles],
        )
