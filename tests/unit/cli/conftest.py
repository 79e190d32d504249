from __future__ import annotations

import httpx
import pytest
from pytest_mock import MockerFixture

from atlas.countries import RestCountriesClient
from tests.factories import country_payload

COUNTRIES = [
    country_payload("JPN", "Japan", region="Asia", languages={"jpn": "Japanese"}, population=125_700_000, cca2="JP"),
    country_payload("FRA", "France", region="Europe", languages={"fra": "French"}, capital=["Paris"]),
    country_payload("BEL", "Belgium", region="Europe", languages={"nld": "Dutch", "fra": "French"}),
    country_payload("PER", "Peru", region="Americas", languages={"spa": "Spanish", "que": "Quechua"}),
]


def _alpha_codes(country: dict[str, object]) -> tuple[str, str]:
    return str(country["cca3"]).casefold(), str(country.get("cca2")).casefold()


class FakeRestCountries:
    """Answers the REST Countries endpoints from ``countries``; ``status`` forces an error response."""

    def __init__(self, countries: list[dict[str, object]]) -> None:
        self.countries = countries
        self.status = 200
        self.paths: list[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.paths.append(path)
        if self.status != 200:
            return httpx.Response(self.status, json={"status": self.status})

        _, endpoint, *rest = path.strip("/").split("/")
        term = rest[0].casefold() if rest else ""
        match endpoint:
            case "all":
                matches = self.countries
            case "name":
                matches = [c for c in self.countries if term in c["name"]["common"].casefold()]
            case "region":
                matches = [c for c in self.countries if str(c["region"]).casefold() == term]
            case "alpha":
                matches = [c for c in self.countries if term in _alpha_codes(c)]
            case _:
                matches = []

        if not matches and endpoint != "all":
            return httpx.Response(404, json={"status": 404, "message": "Not Found"})
        return httpx.Response(200, json=matches)


@pytest.fixture
def api(mocker: MockerFixture) -> FakeRestCountries:
    fake = FakeRestCountries(COUNTRIES)

    def build_client(_: object) -> RestCountriesClient:
        transport = httpx.MockTransport(fake)
        http_client = httpx.AsyncClient(transport=transport, base_url="https://restcountries.test")
        return RestCountriesClient(http_client=http_client)

    mocker.patch("atlas.cli.deps.build_client", side_effect=build_client)
    return fake
