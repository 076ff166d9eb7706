"""
Test suite for parse_catalog_params.

Normalization never fails: every raw input maps to a valid CatalogQuery.

Test sections:
- Defaults
- Strings: trimming, blanks, first value of multi-valued inputs, q length cap
- Enums: allow-lists and fallbacks
- Integers: lenient parsing, negatives dropped
- Ranges: swapping and the legacy `anio` parameter
- Paging: page and perPage
- Idempotence
"""

from __future__ import annotations

import pytest

from caradvice.domain.catalog_query import (
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    DEFAULT_SORT,
    MAX_QUERY_LENGTH,
    CatalogQuery,
)
from caradvice.domain.query_normalizer import parse_catalog_params
from caradvice.domain.query_serializer import serialize_catalog_params


class FakeMultiDict(dict):
    """Minimal multi-dict exposing getlist(), like starlette's QueryParams."""

    def getlist(self, key: str) -> list[str]:
        return list(self.get(key, []))


# ==============================================================================
# Defaults
# ==============================================================================


def test_empty_input_yields_default_query() -> None:
    assert parse_catalog_params({}) == CatalogQuery()


def test_defaults_for_paging_and_sort() -> None:
    query = parse_catalog_params({})

    assert query.sort == DEFAULT_SORT == "recomendados"
    assert query.page == DEFAULT_PAGE == 1
    assert query.per_page == DEFAULT_PER_PAGE == 12


def test_unknown_keys_are_ignored() -> None:
    assert parse_catalog_params({"utm_source": "instagram", "foo": "bar"}) == CatalogQuery()


# ==============================================================================
# Strings
# ==============================================================================


def test_strings_are_trimmed() -> None:
    query = parse_catalog_params({"marca": "  Toyota ", "modelo": "\tCorolla\n"})

    assert query.marca == "Toyota"
    assert query.modelo == "Corolla"


def test_blank_strings_are_absent() -> None:
    query = parse_catalog_params({"marca": "   ", "color": "", "extras": " "})

    assert query.marca is None
    assert query.color is None
    assert query.extras is None


def test_none_values_are_absent() -> None:
    assert parse_catalog_params({"marca": None, "page": None}) == CatalogQuery()


def test_multi_valued_input_takes_first_element() -> None:
    query = parse_catalog_params({"marca": ["Ford", "Fiat"], "page": ["2", "5"]})

    assert query.marca == "Ford"
    assert query.page == 2


def test_empty_list_is_absent() -> None:
    assert parse_catalog_params({"marca": []}).marca is None


def test_multi_dict_input_takes_first_value() -> None:
    raw = FakeMultiDict({"marca": ["Peugeot", "Renault"], "sort": ["km-asc"]})

    query = parse_catalog_params(raw)

    assert query.marca == "Peugeot"
    assert query.sort == "km-asc"


def test_q_is_capped_at_max_length() -> None:
    query = parse_catalog_params({"q": "a" * 200})

    assert query.q == "a" * MAX_QUERY_LENGTH


def test_q_truncation_does_not_leave_trailing_whitespace() -> None:
    raw_q = "x" * (MAX_QUERY_LENGTH - 1) + " tail"

    query = parse_catalog_params({"q": raw_q})

    assert query.q == "x" * (MAX_QUERY_LENGTH - 1)


def test_free_text_keeps_inner_spacing_and_case() -> None:
    query = parse_catalog_params({"q": "Corolla  XEI", "version": "2.0 XEI CVT"})

    assert query.q == "Corolla  XEI"
    assert query.version == "2.0 XEI CVT"


# ==============================================================================
# Enums
# ==============================================================================


@pytest.mark.parametrize(
    ("key", "value", "attribute"),
    [
        ("tipo", "motos", "tipo"),
        ("tipologia", "pickup", "tipologia"),
        ("condicion", "proximo_ingreso", "condicion"),
        ("condicion", "0km", "condicion"),
        ("moneda", "dolares", "moneda"),
    ],
)
def test_valid_enum_values_are_kept(key: str, value: str, attribute: str) -> None:
    assert getattr(parse_catalog_params({key: value}), attribute) == value


@pytest.mark.parametrize(
    ("key", "attribute"),
    [
        ("tipo", "tipo"),
        ("tipologia", "tipologia"),
        ("condicion", "condicion"),
        ("moneda", "moneda"),
    ],
)
def test_unknown_enum_values_are_unset(key: str, attribute: str) -> None:
    assert getattr(parse_catalog_params({key: "camion"}), attribute) is None


def test_enum_values_are_trimmed_before_matching() -> None:
    assert parse_catalog_params({"tipo": " usados "}).tipo == "usados"


def test_unknown_sort_falls_back_to_default() -> None:
    assert parse_catalog_params({"sort": "cheapest"}).sort == "recomendados"


@pytest.mark.parametrize(
    "sort",
    ["recomendados", "precio-asc", "precio-desc", "anio-desc", "anio-asc", "km-asc", "km-desc"],
)
def test_all_sort_values_are_accepted(sort: str) -> None:
    assert parse_catalog_params({"sort": sort}).sort == sort


# ==============================================================================
# Integers
# ==============================================================================


def test_integers_are_parsed() -> None:
    query = parse_catalog_params({"kmMax": "50000", "puertas": "4"})

    assert query.km_max == 50000
    assert query.puertas == 4


def test_integers_parse_leading_digits() -> None:
    query = parse_catalog_params({"precioMin": "1500000abc", "puertas": " 5 puertas"})

    assert query.precio_min == 1500000
    assert query.puertas == 5


@pytest.mark.parametrize("value", ["abc", "", "  ", "-", "+", "x12"])
def test_non_numeric_integers_are_dropped(value: str) -> None:
    assert parse_catalog_params({"kmMax": value}).km_max is None


def test_negative_integers_are_dropped() -> None:
    query = parse_catalog_params({"kmMin": "-10", "precioMax": "-1"})

    assert query.km_min is None
    assert query.precio_max is None


def test_zero_is_a_valid_bound() -> None:
    assert parse_catalog_params({"kmMax": "0"}).km_max == 0


@pytest.mark.parametrize("key", ["page", "perPage", "kmMin", "precioMax", "anio", "puertas"])
def test_overlong_digit_runs_are_dropped(key: str) -> None:
    query = parse_catalog_params({key: "9" * 5000})

    assert query == CatalogQuery()


def test_decimal_input_keeps_integer_part() -> None:
    assert parse_catalog_params({"precioMax": "25000.99"}).precio_max == 25000


# ==============================================================================
# Ranges
# ==============================================================================


def test_reversed_ranges_are_swapped() -> None:
    query = parse_catalog_params(
        {
            "anioMin": "2022",
            "anioMax": "2018",
            "precioMin": "900",
            "precioMax": "100",
            "kmMin": "80000",
            "kmMax": "1000",
        }
    )

    assert (query.anio_min, query.anio_max) == (2018, 2022)
    assert (query.precio_min, query.precio_max) == (100, 900)
    assert (query.km_min, query.km_max) == (1000, 80000)


def test_half_open_ranges_are_kept() -> None:
    query = parse_catalog_params({"anioMin": "2019", "kmMax": "60000"})

    assert (query.anio_min, query.anio_max) == (2019, None)
    assert (query.km_min, query.km_max) == (None, 60000)


def test_legacy_anio_seeds_both_bounds() -> None:
    query = parse_catalog_params({"anio": "2020"})

    assert (query.anio_min, query.anio_max) == (2020, 2020)


def test_explicit_year_bounds_win_over_legacy_anio() -> None:
    query = parse_catalog_params({"anio": "2020", "anioMin": "2015", "anioMax": "2023"})

    assert (query.anio_min, query.anio_max) == (2015, 2023)


def test_legacy_anio_fills_only_the_missing_bound() -> None:
    query = parse_catalog_params({"anio": "2024", "anioMin": "2019"})

    assert (query.anio_min, query.anio_max) == (2019, 2024)


def test_legacy_anio_seed_is_swapped_when_reversed() -> None:
    query = parse_catalog_params({"anio": "2010", "anioMin": "2019"})

    assert (query.anio_min, query.anio_max) == (2010, 2019)


# ==============================================================================
# Paging
# ==============================================================================


def test_page_is_parsed() -> None:
    assert parse_catalog_params({"page": "3"}).page == 3


@pytest.mark.parametrize("value", ["0", "-2", "abc", ""])
def test_invalid_page_falls_back_to_first(value: str) -> None:
    assert parse_catalog_params({"page": value}).page == 1


def test_huge_page_is_kept_for_the_engine_to_clamp() -> None:
    assert parse_catalog_params({"page": "999999"}).page == 999999


@pytest.mark.parametrize("value", ["12", "18", "24"])
def test_allowed_per_page_values(value: str) -> None:
    assert parse_catalog_params({"perPage": value}).per_page == int(value)


@pytest.mark.parametrize("value", ["10", "100", "0", "-12", "x"])
def test_disallowed_per_page_falls_back_to_default(value: str) -> None:
    assert parse_catalog_params({"perPage": value}).per_page == 12


# ==============================================================================
# Idempotence
# ==============================================================================


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"marca": " Toyota ", "anio": "2020", "sort": "bogus", "page": "0"},
        {"precioMin": "50", "precioMax": "10", "moneda": "dolares", "perPage": "24"},
        {"q": "  corolla   " + "z" * 100, "extras": " techo , cuero ", "puertas": "4x"},
        {"tipo": ["nuevos", "usados"], "tipologia": "suv", "condicion": "0km", "page": "7"},
    ],
)
def test_normalizing_a_normalized_query_changes_nothing(raw: dict) -> None:
    once = parse_catalog_params(raw)

    twice = parse_catalog_params(dict(serialize_catalog_params(once)))

    assert twice == once
