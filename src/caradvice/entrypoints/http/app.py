from __future__ import annotations

from fastapi import FastAPI

from caradvice.adapters.json_vehicle_store import load_vehicle_store
from caradvice.entrypoints.http.exception_handlers import register_exception_handlers
from caradvice.entrypoints.http.routes.catalog import router as catalog_router
from caradvice.entrypoints.http.routes.health import router as health_router
from caradvice.entrypoints.http.routes.leads import router as leads_router
from caradvice.entrypoints.http.routes.vehicles import router as vehicles_router
from caradvice.infra.config import catalog_data_path, log_level
from caradvice.infra.logging_config import configure_logging
from caradvice.ports.vehicle_store import VehicleStore


def build_app(vehicle_store: VehicleStore | None = None) -> FastAPI:
    """
    Build the API application.

    Args:
        vehicle_store: Catalog snapshot to serve. When omitted, the JSON file
                       at CATALOG_DATA_PATH (or the packaged dataset) is
                       loaded once, here.

    Raises:
        CatalogLoadError: If the catalog file cannot be loaded
    """
    configure_logging(log_level())

    app = FastAPI(
        title="Car Advice Catalog API",
        description="""
        Vehicle catalog API for the Car Advice dealership website.

        ## Features
        - Search the catalog with filters, sorting and pagination
        - Filter options for the catalog UI (brand → model → version cascades)
        - Vehicle detail with similar listings
        - Vehicle comparison
        - Contact lead submission

        ## Authentication
        No authentication required (public catalog).

        ## Error Handling
        Catalog search never rejects parameters: malformed values are ignored.
        Other errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        contact={
            "name": "Car Advice",
            "email": "web@caradvice.com.ar",
        },
        license_info={
            "name": "Proprietary",
        },
    )

    # Immutable snapshot shared by every request
    app.state.vehicle_store = (
        vehicle_store if vehicle_store is not None else load_vehicle_store(catalog_data_path())
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(catalog_router, prefix="/v1")
    app.include_router(vehicles_router, prefix="/v1")
    app.include_router(leads_router, prefix="/v1")

    return app
