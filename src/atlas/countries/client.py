"""REST Countries HTTP client."""

from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType
from typing import Self
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError
from result import Err, Ok

from atlas.common import create_logger
from atlas.constants import DEFAULT_API_BASE_URL, DEFAULT_API_TIMEOUT, DEFAULT_LIST_FIELDS

from .models import Country, CountryHttpError, CountryNetworkError, CountryPayloadError
from .protocol import CountriesResult

logger = create_logger("countries.client")

_COUNTRY_LIST = TypeAdapter(list[Country])


class RestCountriesClient:
    """Async client for the REST Countries v3.1 API.

    Use as an async context manager, or call :meth:`aclose` when done. A
    caller-provided ``http_client`` is never closed by this class.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        *,
        timeout: float = DEFAULT_API_TIMEOUT,
        list_fields: Sequence[str] = DEFAULT_LIST_FIELDS,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._list_fields = tuple(list_fields)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch_all(self) -> CountriesResult:
        params = {"fields": ",".join(self._list_fields)} if self._list_fields else None
        return await self._get_countries("/v3.1/all", params=params)

    async def fetch_by_name(self, name: str) -> CountriesResult:
        return await self._get_countries(f"/v3.1/name/{_segment(name)}")

    async def fetch_by_region(self, region: str) -> CountriesResult:
        return await self._get_countries(f"/v3.1/region/{_segment(region)}")

    async def fetch_by_code(self, code: str) -> CountriesResult:
        return await self._get_countries(f"/v3.1/alpha/{_segment(code)}")

    async def _get_countries(self, path: str, params: dict[str, str] | None = None) -> CountriesResult:
        logger.debug("Requesting countries", path=path)

        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            url = str(exc.request.url) if _has_request(exc) else path
            logger.warning("Country request failed", url=url, error=str(exc))
            return Err(CountryNetworkError(url=url, message=str(exc) or type(exc).__name__))

        url = str(response.request.url)
        if not response.is_success:
            logger.warning("Country request rejected", url=url, status=response.status_code)
            return Err(
                CountryHttpError(
                    url=url,
                    status_code=response.status_code,
                    message=f"{response.status_code} {response.reason_phrase}".strip(),
                )
            )

        try:
            payload = response.json()
        except ValueError as exc:
            return Err(CountryPayloadError(url=url, message=f"Response is not JSON: {exc}"))

        return parse_countries(payload, url).inspect(
            lambda countries: logger.debug("Countries received", url=url, count=len(countries))
        )


def parse_countries(payload: object, url: str) -> CountriesResult:
    """Validate a decoded response body as a list of countries."""
    # /alpha/{code} answers with a bare object on some API versions
    if isinstance(payload, dict):
        payload = [payload]

    if not isinstance(payload, list):
        return Err(CountryPayloadError(url=url, message="Expected a JSON array of countries"))

    try:
        return Ok(_COUNTRY_LIST.validate_python(payload))
    except ValidationError as exc:
        details = [f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()]
        logger.warning("Country payload rejected", url=url, errors=len(details))
        return Err(CountryPayloadError(url=url, message="Invalid country payload", details=details))


def _segment(value: str) -> str:
    return quote(value.strip(), safe="")


def _has_request(exc: httpx.HTTPError) -> bool:
    try:
        exc.request
    except RuntimeError:
        return False
    return True
