"""Atlas DataStore module."""

from .file import FileDataStore
from .models import DataStoreError, DataStoreKeyNotFoundError, DataStoreReadError, DataStoreWriteError
from .protocol import DataStore

__all__ = [
    "DataStore",
    "DataStoreError",
    "DataStoreKeyNotFoundError",
    "DataStoreReadError",
    "DataStoreWriteError",
    "FileDataStore",
]
