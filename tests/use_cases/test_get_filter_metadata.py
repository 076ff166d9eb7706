"""Test suite for GetFilterMetadata use case."""

from __future__ import annotations

from unittest.mock import Mock

from caradvice.domain.filter_metadata import NumericRange
from caradvice.ports.vehicle_store import VehicleStore
from caradvice.use_cases.get_filter_metadata import GetFilterMetadata


def test_execute_builds_metadata_from_store(make_vehicle) -> None:
    """Use case derives option lists from every stored vehicle."""
    store = Mock(spec=VehicleStore)
    store.all.return_value = (
        make_vehicle(slug="a", brand="BMW", model="X1"),
        make_vehicle(slug="b", brand="bmw ", model="Serie 3"),
        make_vehicle(slug="c", brand="Audi", model="A3", year=2017),
    )
    use_case = GetFilterMetadata(vehicle_store=store, current_year=2026)

    metadata = use_case.execute()

    assert metadata.brands == ["Audi", "BMW"]
    assert metadata.models_by_brand["BMW"] == ["Serie 3", "X1"]
    assert metadata.year_range == NumericRange(2017, 2020)


def test_execute_on_empty_store_uses_current_year() -> None:
    """Empty catalogs fall back to the year sentinel ending next year."""
    store = Mock(spec=VehicleStore)
    store.all.return_value = ()
    use_case = GetFilterMetadata(vehicle_store=store, current_year=2030)

    metadata = use_case.execute()

    assert metadata.year_range == NumericRange(1980, 2031)
