"""File-based DataStore implementation.

Each namespace is a single JSON object on disk at
``$XDG_DATA_HOME/{app_name}/{namespace}/data.json``; keys are its top-level
members. Writes go through a sibling temp file and an atomic rename. A file
that no longer parses is reported by ``load`` and replaced by the next write.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from result import Err, Ok, Result

from atlas.common import AppDirectories, JsonValue, create_logger, get_data_directory_from_dirs

from .models import DataStoreError, DataStoreKeyNotFoundError, DataStoreReadError, DataStoreWriteError

logger = create_logger("datastore")

_FILE_ERRORS = (OSError, json.JSONDecodeError, TypeError, ValueError)


class FileDataStore:
    """File-based implementation of DataStore protocol."""

    def __init__(self, namespace: str, directories: AppDirectories) -> None:
        self._namespace = namespace
        self._directories = directories

    @property
    def path(self) -> Path:
        return get_data_directory_from_dirs(self._directories) / self._namespace / "data.json"

    def save(self, key: str, data: JsonValue) -> Result[None, DataStoreError]:
        try:
            contents = self._read_for_write() or {}
            contents[key] = data
            self._write_all(contents)
        except _FILE_ERRORS as e:
            logger.error("Datastore write failed", namespace=self._namespace, key=key, error=str(e))
            return Err(DataStoreWriteError(namespace=self._namespace, key=key, message=f"Failed to save data: {e}"))

        logger.debug("Datastore key saved", namespace=self._namespace, key=key)
        return Ok(None)

    def load(self, key: str) -> Result[JsonValue, DataStoreError]:
        try:
            contents = self._read_all()
        except _FILE_ERRORS as e:
            return Err(DataStoreReadError(namespace=self._namespace, key=key, message=f"Failed to read data: {e}"))

        if key not in contents:
            return Err(
                DataStoreKeyNotFoundError(
                    namespace=self._namespace,
                    key=key,
                    message=f"Key '{key}' not found in namespace '{self._namespace}'",
                )
            )

        return Ok(contents[key])

    def delete(self, key: str) -> Result[None, DataStoreError]:
        try:
            contents = self._read_for_write()
            if contents is None:
                self._write_all({})
            elif key in contents:
                del contents[key]
                self._write_all(contents)
        except _FILE_ERRORS as e:
            return Err(DataStoreWriteError(namespace=self._namespace, key=key, message=f"Failed to delete data: {e}"))

        logger.debug("Datastore key deleted", namespace=self._namespace, key=key)
        return Ok(None)

    def _read_all(self) -> dict[str, JsonValue]:
        data_file = self.path
        if not data_file.exists():
            return {}

        contents = json.loads(data_file.read_text(encoding="utf-8"))
        if not isinstance(contents, dict):
            raise TypeError("Stored data must be a JSON object")
        return contents

    def _read_for_write(self) -> dict[str, JsonValue] | None:
        """Current contents, or None when the file exists but cannot be parsed.

        An unparseable file is replaced on the next write.
        """
        try:
            return self._read_all()
        except (ValueError, TypeError) as e:
            logger.warning("Overwriting unreadable datastore file", namespace=self._namespace, error=str(e))
            return None

    def _write_all(self, contents: dict[str, JsonValue]) -> None:
        data_file = self.path
        data_file.parent.mkdir(parents=True, exist_ok=True)

        # an unserializable payload must leave the file untouched
        payload = json.dumps(contents, indent=2)
        temp_file = data_file.with_suffix(".json.tmp")
        temp_file.write_text(payload, encoding="utf-8")
        os.replace(temp_file, data_file)
