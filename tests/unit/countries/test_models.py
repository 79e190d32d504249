from __future__ import annotations

import pytest
from pydantic import ValidationError

from atlas.countries import CountriesSnapshot, Country, CountryFilters
from tests.factories import country_payload, make_country


def test_country_reads_api_shape() -> None:
    country = Country.model_validate(country_payload("jpn", "Japan", languages={"jpn": "Japanese"}))

    assert country.code == "JPN"
    assert country.name == "Japan"
    assert country.official_name == "Official Japan"
    assert country.region == "Asia"
    assert country.languages == {"jpn": "Japanese"}


def test_country_accepts_flat_name() -> None:
    country = Country.model_validate({"code": "PER", "name": "Peru"})

    assert country.name == "Peru"
    assert country.official_name == "Peru"
    assert country.region is None
    assert country.languages == {}


def test_country_keeps_unknown_fields() -> None:
    country = make_country("FRA", "France", population=68_000_000, borders=["BEL", "DEU"])

    assert country.attribute("population") == 68_000_000
    assert country.attribute("borders") == ["BEL", "DEU"]
    assert country.attribute("flags", "none") == "none"


def test_country_payload_round_trips() -> None:
    country = make_country("FRA", "France", flags={"png": "https://flags.test/fra.png"})

    restored = Country.model_validate(country.to_payload())

    assert restored == country
    assert restored.attribute("flags") == {"png": "https://flags.test/fra.png"}


def test_null_languages_become_empty() -> None:
    country = Country.model_validate({"cca3": "ATA", "name": {"common": "Antarctica"}, "languages": None})

    assert country.languages == {}


@pytest.mark.parametrize(
    "payload",
    [
        {"name": {"common": "Nowhere"}},
        {"cca3": "JPN"},
        {"cca3": "JPN", "name": {"official": "Japan"}},
        {"cca3": "JP", "name": "Japan"},
        {"cca3": "JPN", "name": ""},
    ],
)
def test_country_requires_code_and_name(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        Country.model_validate(payload)


def test_country_is_immutable() -> None:
    country = make_country("JPN", "Japan")

    with pytest.raises(ValidationError):
        country.name = "Nippon"  # type: ignore[misc]


def test_snapshot_lookups_ignore_case() -> None:
    japan = make_country("JPN", "Japan")
    snapshot = CountriesSnapshot(countries=(japan,), favorites=(japan,))

    assert snapshot.find_country(" jpn ") == japan
    assert snapshot.find_country("FRA") is None
    assert snapshot.is_favorite("jpn")
    assert not snapshot.is_favorite("FRA")


def test_filters_empty_when_search_is_blank() -> None:
    assert CountryFilters(search="   ").is_empty
    assert not CountryFilters(region="Asia").is_empty
