from __future__ import annotations

from caradvice.domain.filter_metadata import FilterMetadata, build_filter_metadata
from caradvice.ports.vehicle_store import VehicleStore


class GetFilterMetadata:
    """
    Derive the filter option sets for the catalog UI.

    Recomputed on every call: the store is immutable and small, so there is
    no snapshot to invalidate.
    """

    def __init__(self, vehicle_store: VehicleStore, current_year: int | None = None) -> None:
        self._vehicle_store = vehicle_store
        self._current_year = current_year

    def execute(self) -> FilterMetadata:
        return build_filter_metadata(self._vehicle_store.all(), current_year=self._current_year)
