"""Country source protocol."""

from __future__ import annotations

from typing import Protocol, TypeAlias

from result import Result

from .models import Country, CountrySourceError

CountriesResult: TypeAlias = Result[list[Country], CountrySourceError]


class CountrySource(Protocol):
    """Remote provider of country records."""

    async def fetch_all(self) -> CountriesResult:
        """Every known country."""
        ...

    async def fetch_by_name(self, name: str) -> CountriesResult:
        """Countries whose name matches ``name``."""
        ...

    async def fetch_by_region(self, region: str) -> CountriesResult:
        """Countries in ``region``."""
        ...

    async def fetch_by_code(self, code: str) -> CountriesResult:
        """At most one country matching ``code``."""
        ...
