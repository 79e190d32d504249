"""Favorites persistence on top of a DataStore slot."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import TypeAdapter, ValidationError
from result import Err, Ok, Result

from atlas.common import create_logger
from atlas.constants import FAVORITES_KEY
from atlas.datastore import DataStore, DataStoreKeyNotFoundError

from .models import Country, FavoritesError

logger = create_logger("countries.favorites")

_FAVORITES = TypeAdapter(list[Country])


class FavoritesRepository:
    """Reads and writes the favorites sequence under a single key.

    ``load`` never fails: a missing slot, an unreadable file or a payload that
    does not validate all come back as an empty list.
    """

    def __init__(self, store: DataStore, key: str = FAVORITES_KEY) -> None:
        self._store = store
        self._key = key

    def load(self) -> list[Country]:
        match self._store.load(self._key):
            case Ok(raw):
                return self._parse(raw)
            case Err(DataStoreKeyNotFoundError()):
                logger.debug("No stored favorites", key=self._key)
                return []
            case Err(error):
                logger.warning("Failed to read stored favorites", key=self._key, error=error.message)
                return []

    def _parse(self, raw: object) -> list[Country]:
        try:
            favorites = _FAVORITES.validate_python(raw)
        except ValidationError as exc:
            logger.warning("Discarding unparseable favorites", key=self._key, errors=exc.error_count())
            return []

        return unique_by_code(favorites)

    def save(self, favorites: Sequence[Country]) -> Result[None, FavoritesError]:
        payload = [country.to_payload() for country in favorites]
        return self._store.save(self._key, payload).map_err(
            lambda error: FavoritesError(message=f"Failed to save favorites: {error.message}")
        )

    def clear(self) -> Result[None, FavoritesError]:
        return self._store.delete(self._key).map_err(
            lambda error: FavoritesError(message=f"Failed to clear favorites: {error.message}")
        )


def unique_by_code(countries: Iterable[Country]) -> list[Country]:
    seen: set[str] = set()
    unique: list[Country] = []
    for country in countries:
        if country.code in seen:
            continue
        seen.add(country.code)
        unique.append(country)
    return unique
