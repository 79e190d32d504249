"""Country records, store snapshots and country error models."""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from atlas.common import CountryCode, JsonDict, NonEmptyString


class Country(BaseModel):
    """A country record from the REST Countries API.

    Only ``code`` and ``name`` are required. ``region`` and ``languages`` are
    read for filtering; every other field in the payload (population, flags,
    borders, ...) is kept untouched as an extra and written back out by
    :meth:`to_payload`.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    code: CountryCode = Field(validation_alias=AliasChoices("code", "cca3"))
    name: NonEmptyString
    region: str | None = None
    languages: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _flatten_name(cls, data: object) -> object:
        # API payloads carry {"common": ..., "official": ..., "nativeName": ...}
        if isinstance(data, dict) and isinstance(data.get("name"), dict):
            names = data["name"]
            data = {**data, "name": names.get("common"), "names": names}
        return data

    @field_validator("code", mode="before")
    @classmethod
    def _upper_code(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("languages", mode="before")
    @classmethod
    def _default_languages(cls, value: object) -> object:
        return {} if value is None else value

    @property
    def official_name(self) -> str:
        names = self.attribute("names")
        if isinstance(names, dict) and isinstance(names.get("official"), str):
            return names["official"]
        return self.name

    def attribute(self, key: str, default: object = None) -> object:
        """Read a pass-through field of the API payload."""
        return (self.model_extra or {}).get(key, default)

    def to_payload(self) -> JsonDict:
        return self.model_dump(mode="json")


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FetchOutcome(str, Enum):
    """How a fetch task resolved against the store."""

    APPLIED = "applied"
    STALE = "stale"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class CountriesSnapshot:
    countries: tuple[Country, ...] = ()
    favorites: tuple[Country, ...] = ()
    status: FetchStatus = FetchStatus.IDLE
    error: str | None = None
    # source error behind a failed fetch; None when the source raised instead
    cause: CountrySourceError | None = None
    last_updated: datetime | None = None
    # set when the last favorites change could not be written to storage
    favorites_error: str | None = None

    @property
    def not_found(self) -> bool:
        return isinstance(self.cause, CountryHttpError) and self.cause.status_code == 404

    def find_country(self, code: str) -> Country | None:
        wanted = code.strip().upper()
        return next((country for country in self.countries if country.code == wanted), None)

    def find_favorite(self, code: str) -> Country | None:
        wanted = code.strip().upper()
        return next((country for country in self.favorites if country.code == wanted), None)

    def is_favorite(self, code: str) -> bool:
        return self.find_favorite(code) is not None


@dataclass(frozen=True, slots=True)
class CountryFilters:
    """Conjunctive filters applied to a country list. Empty values match everything."""

    search: str = ""
    region: str = ""
    language: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.search.strip() or self.region or self.language)


class CountrySourceError(BaseModel):
    """Base error for a failed request to the country source."""

    model_config = ConfigDict(extra="forbid")

    url: str
    message: str


class CountryNetworkError(CountrySourceError):
    """The request never produced a response."""


class CountryHttpError(CountrySourceError):
    """The source answered with a non-success status."""

    status_code: int


class CountryPayloadError(CountrySourceError):
    """The response body was not a list of country records."""

    details: list[str] = Field(default_factory=list)


class FavoritesError(BaseModel):
    """Favorites could not be written to or removed from storage."""

    model_config = ConfigDict(extra="forbid")

    message: str


CountryErrorType: TypeAlias = CountryNetworkError | CountryHttpError | CountryPayloadError
