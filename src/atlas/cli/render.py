"""Terminal rendering of countries."""

from __future__ import annotations

from collections.abc import Iterable

import typer

from atlas.countries import Country

NOT_AVAILABLE = "Not available"


def echo_country_line(country: Country, *, favorite: bool = False) -> None:
    marker = "♥" if favorite else " "
    region = country.region or NOT_AVAILABLE
    typer.echo(f"{marker} {country.code}  {country.name:<32} {region}")


def echo_country_details(country: Country, *, favorite: bool = False) -> None:
    title = f"{country.name} ♥" if favorite else country.name
    typer.secho(title, fg=typer.colors.CYAN, bold=True)
    for label, value in country_details(country):
        typer.echo(f"{label + ':':<18} {value or NOT_AVAILABLE}")


def country_details(country: Country) -> list[tuple[str, str | None]]:
    region = country.region
    subregion = country.attribute("subregion")
    if region and subregion:
        region = f"{region} • {subregion}"

    return [
        ("Official name", country.official_name),
        ("Code", country.code),
        ("Region", region),
        ("Capital", _join(country.attribute("capital"))),
        ("Population", _number(country.attribute("population"))),
        ("Area", _area(country.attribute("area"))),
        ("Languages", ", ".join(country.languages.values()) or None),
        ("Currencies", _currencies(country.attribute("currencies"))),
        ("Borders", _join(country.attribute("borders"))),
        ("Timezones", _join(country.attribute("timezones"))),
        ("Top-level domain", _join(country.attribute("tld"))),
        ("Calling code", _calling_code(country.attribute("idd"))),
        ("Driving side", _driving_side(country.attribute("car"))),
        ("UN member", _yes_no(country.attribute("unMember"))),
        ("Map", _map_link(country.attribute("maps"))),
    ]


def _join(value: object) -> str | None:
    if isinstance(value, Iterable) and not isinstance(value, (str, dict)):
        joined = ", ".join(str(item) for item in value)
        return joined or None
    return str(value) if value else None


def _number(value: object) -> str | None:
    return f"{value:,}" if isinstance(value, (int, float)) else None


def _area(value: object) -> str | None:
    number = _number(value)
    return f"{number} km²" if number else None


def _currencies(value: object) -> str | None:
    if not isinstance(value, dict) or not value:
        return None
    parts = []
    for code, currency in value.items():
        currency = currency if isinstance(currency, dict) else {}
        parts.append(f"{currency.get('name', code)} ({currency.get('symbol') or code})")
    return ", ".join(parts)


def _calling_code(value: object) -> str | None:
    if not isinstance(value, dict):
        return None
    root = value.get("root")
    suffixes = value.get("suffixes") or []
    if not root or not suffixes:
        return None
    return f"{root}{suffixes[0]}"


def _driving_side(value: object) -> str | None:
    side = value.get("side") if isinstance(value, dict) else None
    return side.capitalize() if isinstance(side, str) and side else None


def _yes_no(value: object) -> str | None:
    if value is None:
        return None
    return "Yes" if value else "No"


def _map_link(value: object) -> str | None:
    return value.get("googleMaps") if isinstance(value, dict) else None
