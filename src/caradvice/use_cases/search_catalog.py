from __future__ import annotations

import logging
from dataclasses import dataclass

from caradvice.domain.catalog_engine import CatalogSearchResult, search_vehicles
from caradvice.domain.catalog_query import CatalogQuery
from caradvice.ports.vehicle_store import VehicleStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchCatalogRequest:
    query: CatalogQuery


class SearchCatalog:
    """
    Catalog search with filters, sorting and pagination.

    The query arrives already normalized (parse_catalog_params), so there is
    nothing left to validate: every CatalogQuery is a servable search.
    Out-of-range pages are clamped, over-constrained filters return an
    empty page.
    """

    def __init__(self, vehicle_store: VehicleStore) -> None:
        self._vehicle_store = vehicle_store

    def execute(self, request: SearchCatalogRequest) -> CatalogSearchResult:
        result = search_vehicles(request.query, self._vehicle_store.all())

        if result.page != request.query.page:
            logger.debug(
                "Requested page clamped",
                extra={"requested_page": request.query.page, "served_page": result.page},
            )

        return result
