"""Country browsing: remote source, state store, favorites and derived views."""

from .client import RestCountriesClient, parse_countries
from .favorites import FavoritesRepository
from .models import (
    CountriesSnapshot,
    Country,
    CountryErrorType,
    CountryFilters,
    CountryHttpError,
    CountryNetworkError,
    CountryPayloadError,
    CountrySourceError,
    FavoritesError,
    FetchOutcome,
    FetchStatus,
)
from .protocol import CountriesResult, CountrySource
from .query import build_filter_query, parse_filter_query
from .store import CountryStore
from .views import KNOWN_REGIONS, CountryViews, distinct_languages, filter_countries

__all__ = [
    "KNOWN_REGIONS",
    "CountriesResult",
    "CountriesSnapshot",
    "Country",
    "CountryErrorType",
    "CountryFilters",
    "CountryHttpError",
    "CountryNetworkError",
    "CountryPayloadError",
    "CountrySource",
    "CountrySourceError",
    "CountryStore",
    "CountryViews",
    "FavoritesError",
    "FavoritesRepository",
    "FetchOutcome",
    "FetchStatus",
    "RestCountriesClient",
    "build_filter_query",
    "distinct_languages",
    "filter_countries",
    "parse_countries",
    "parse_filter_query",
]
