"""Pure views derived from a country list."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import Country, CountryFilters

KNOWN_REGIONS = ("Africa", "Americas", "Asia", "Europe", "Oceania")


def filter_countries(countries: Sequence[Country], filters: CountryFilters) -> list[Country]:
    """Countries matching every non-empty filter, in input order.

    Region is an exact match, language matches any language name a country
    lists, and search is a case-insensitive substring of the display name.
    """
    matched: Iterable[Country] = countries

    if filters.region:
        matched = (country for country in matched if country.region == filters.region)

    if filters.language:
        matched = (country for country in matched if filters.language in country.languages.values())

    term = filters.search.strip().casefold()
    if term:
        matched = (country for country in matched if term in country.name.casefold())

    return list(matched)


def distinct_languages(countries: Iterable[Country]) -> list[str]:
    return sorted({language for country in countries for language in country.languages.values()})


class CountryViews:
    """Memoized :func:`filter_countries` and :func:`distinct_languages`.

    Results are reused while the same country tuple (by identity) and equal
    filters are passed in, which is the case between store updates that do
    not touch ``countries``.
    """

    def __init__(self) -> None:
        self._filtered_key: tuple[tuple[Country, ...], CountryFilters] | None = None
        self._filtered: tuple[Country, ...] = ()
        self._languages_source: tuple[Country, ...] | None = None
        self._languages: tuple[str, ...] = ()

    def filtered(self, countries: tuple[Country, ...], filters: CountryFilters) -> tuple[Country, ...]:
        key = self._filtered_key
        if key is None or key[0] is not countries or key[1] != filters:
            self._filtered = tuple(filter_countries(countries, filters))
            self._filtered_key = (countries, filters)
        return self._filtered

    def languages(self, countries: tuple[Country, ...]) -> tuple[str, ...]:
        if self._languages_source is not countries:
            self._languages = tuple(distinct_languages(countries))
            self._languages_source = countries
        return self._languages
