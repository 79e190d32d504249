"""Reusable Pydantic field annotations."""

from __future__ import annotations

from typing import Annotated, TypeAlias

from pydantic import Field, StrictStr

JsonValue: TypeAlias = dict[str, object] | list[object] | str | int | float | bool | None
JsonDict: TypeAlias = dict[str, object]

NonEmptyString = Annotated[StrictStr, Field(min_length=1, frozen=True)]

# ISO 3166-1 alpha-3 code as returned in the `cca3` field
CountryCode = Annotated[
    StrictStr,
    Field(
        pattern=r"^[A-Z]{3}$",
        frozen=True,
        description="Three-letter country code (cca3)",
    ),
]

__all__ = [
    "CountryCode",
    "JsonDict",
    "JsonValue",
    "NonEmptyString",
]
