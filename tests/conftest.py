"""Shared fixtures: a vehicle factory with realistic defaults."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from caradvice.domain.vehicle import Vehicle


def build_vehicle(**overrides: Any) -> Vehicle:
    slug = overrides.pop("slug", "toyota-corolla-xei-2020")
    fields: dict[str, Any] = {
        "id": slug,
        "slug": slug,
        "type": "usados",
        "tipologia": "sedan",
        "condicion": "usados",
        "brand": "Toyota",
        "model": "Corolla",
        "version": "2.0 XEI CVT",
        "year": 2020,
        "km": 40000,
        "price_ars": 20_000_000,
        "price_usd": 0,
        "transmission": "Automática",
        "fuel": "Nafta",
        "cover_image": f"https://cdn.example.com/{slug}/cover.jpg",
    }
    fields.update(overrides)
    return Vehicle(**fields)


@pytest.fixture()
def make_vehicle() -> Callable[..., Vehicle]:
    """Factory fixture: make_vehicle(slug="...", brand="...", ...)."""
    return build_vehicle
