"""DataStore error models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DataStoreError(BaseModel):
    """Base datastore error."""

    model_config = ConfigDict(extra="forbid")

    namespace: str
    key: str
    message: str


class DataStoreReadError(DataStoreError):
    """The namespace file exists but could not be read or parsed."""


class DataStoreWriteError(DataStoreError):
    """The namespace file could not be written."""


class DataStoreKeyNotFoundError(DataStoreError):
    """Nothing is stored under the key."""
