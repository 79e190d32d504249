"""DataStore protocol."""

from __future__ import annotations

from typing import Protocol

from result import Result

from atlas.common import JsonValue

from .models import DataStoreError


class DataStore(Protocol):
    """Keyed JSON slots within a single namespace."""

    def save(self, key: str, data: JsonValue) -> Result[None, DataStoreError]: ...

    def load(self, key: str) -> Result[JsonValue, DataStoreError]: ...

    def delete(self, key: str) -> Result[None, DataStoreError]: ...
