"""Test suite for SearchCatalog use case."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from caradvice.domain.catalog_query import CatalogQuery
from caradvice.ports.vehicle_store import VehicleStore
from caradvice.use_cases.search_catalog import SearchCatalog, SearchCatalogRequest


@pytest.fixture()
def mock_store(make_vehicle) -> Mock:
    """Mock VehicleStore holding three vehicles."""
    store = Mock(spec=VehicleStore)
    store.all.return_value = (
        make_vehicle(slug="toyota-corolla-2020", year=2020),
        make_vehicle(slug="ford-ka-2017", brand="Ford", model="Ka", year=2017),
        make_vehicle(slug="toyota-etios-2019", model="Etios", year=2019),
    )
    return store


# ==============================================================================
# Happy Path Tests
# ==============================================================================


def test_execute_reads_the_store_once(mock_store: Mock) -> None:
    """Use case searches the full store snapshot."""
    use_case = SearchCatalog(vehicle_store=mock_store)

    use_case.execute(SearchCatalogRequest(query=CatalogQuery()))

    mock_store.all.assert_called_once_with()


def test_execute_applies_filters_and_sort(mock_store: Mock) -> None:
    """Use case returns filtered, sorted vehicles."""
    use_case = SearchCatalog(vehicle_store=mock_store)

    result = use_case.execute(
        SearchCatalogRequest(query=CatalogQuery(marca="toyota", sort="anio-asc"))
    )

    assert [vehicle.slug for vehicle in result.items] == [
        "toyota-etios-2019",
        "toyota-corolla-2020",
    ]
    assert result.total == 2


def test_execute_clamps_out_of_range_page(mock_store: Mock) -> None:
    """An out-of-range page is served as the last page."""
    use_case = SearchCatalog(vehicle_store=mock_store)

    result = use_case.execute(SearchCatalogRequest(query=CatalogQuery(page=40)))

    assert result.page == 1
    assert result.applied_params.page == 1
    assert len(result.items) == 3


# ==============================================================================
# Empty Store
# ==============================================================================


def test_execute_on_empty_store() -> None:
    """An empty catalog yields a single empty page, not an error."""
    store = Mock(spec=VehicleStore)
    store.all.return_value = ()
    use_case = SearchCatalog(vehicle_store=store)

    result = use_case.execute(SearchCatalogRequest(query=CatalogQuery(marca="Ford")))

    assert result.items == []
    assert result.total == 0
    assert result.total_pages == 1
