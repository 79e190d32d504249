"""Round-trip region and language filters through a URL query string.

Only ``region`` and ``language`` are shared this way; the free-text search
stays local.
"""

from __future__ import annotations

from urllib.parse import parse_qs, urlencode

from .models import CountryFilters

_SHARED_KEYS = ("region", "language")


def parse_filter_query(query: str, *, search: str = "") -> CountryFilters:
    params = parse_qs(query.strip().lstrip("?"))
    region, language = (_first(params.get(key)) for key in _SHARED_KEYS)
    return CountryFilters(search=search, region=region, language=language)


def build_filter_query(filters: CountryFilters) -> str:
    pairs = ((key, getattr(filters, key)) for key in _SHARED_KEYS)
    return urlencode([(key, value) for key, value in pairs if value])


def _first(values: list[str] | None) -> str:
    return values[0].strip() if values else ""
