"""
Dependency injection for FastAPI routes.

Key principle: the vehicle store is built once per process by build_app()
and kept on app.state. Use cases are cheap and created per request.
No module-level singletons, no lru_cache.
"""

from __future__ import annotations

from fastapi import Depends, Request

from caradvice.ports.vehicle_store import VehicleStore
from caradvice.use_cases.compare_vehicles import CompareVehicles
from caradvice.use_cases.get_filter_metadata import GetFilterMetadata
from caradvice.use_cases.get_vehicle_by_slug import GetVehicleBySlug
from caradvice.use_cases.search_catalog import SearchCatalog
from caradvice.use_cases.submit_lead import SubmitLead


def get_vehicle_store(request: Request) -> VehicleStore:
    """
    Provides the process-wide, read-only vehicle store.

    The store is attached to app.state when the app is built, so every
    request shares the same immutable snapshot without locking.

    Returns:
        VehicleStore: The catalog snapshot
    """
    return request.app.state.vehicle_store


def get_search_catalog_use_case(
    store: VehicleStore = Depends(get_vehicle_store),
) -> SearchCatalog:
    """
    Factory function that returns a configured SearchCatalog use case.

    Args:
        store: Vehicle store (injected by FastAPI via Depends(get_vehicle_store))

    Returns:
        SearchCatalog: Configured use case instance
    """
    return SearchCatalog(vehicle_store=store)


def get_filter_metadata_use_case(
    store: VehicleStore = Depends(get_vehicle_store),
) -> GetFilterMetadata:
    return GetFilterMetadata(vehicle_store=store)


def get_vehicle_by_slug_use_case(
    store: VehicleStore = Depends(get_vehicle_store),
) -> GetVehicleBySlug:
    return GetVehicleBySlug(vehicle_store=store)


def get_compare_vehicles_use_case(
    store: VehicleStore = Depends(get_vehicle_store),
) -> CompareVehicles:
    return CompareVehicles(vehicle_store=store)


def get_submit_lead_use_case() -> SubmitLead:
    return SubmitLead()
