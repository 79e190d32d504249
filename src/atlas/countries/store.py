"""Country state store.

Holds the fetched country list, the request lifecycle and the favorites, and
notifies subscribers with a fresh :class:`CountriesSnapshot` after every change.

Fetch intents must be issued from inside a running event loop. Each one moves
the store to ``loading`` synchronously and hands back an :class:`asyncio.Task`
that applies the response when it arrives. Every fetch is tagged with a
generation number; a response whose generation is no longer the latest one
issued is dropped, so the most recently *issued* request wins.
"""

from __future__ import annotations

from typing import TypeAlias

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import replace
from datetime import UTC, datetime

from result import Err, Ok, Result

from atlas.common import create_logger

from .favorites import FavoritesRepository
from .models import CountriesSnapshot, Country, FavoritesError, FetchOutcome, FetchStatus
from .protocol import CountriesResult, CountrySource

logger = create_logger("countries.store")

Listener: TypeAlias = Callable[[CountriesSnapshot], None]
Unsubscribe: TypeAlias = Callable[[], None]

FETCH_ALL_ERROR = "Failed to fetch countries"
FETCH_BY_NAME_ERROR = "Country not found"
FETCH_BY_REGION_ERROR = "Failed to filter by region"
FETCH_ONE_ERROR = "Country not found"


def _utc_now() -> datetime:
    return datetime.now(UTC)


class CountryStore:
    def __init__(
        self,
        source: CountrySource,
        favorites: FavoritesRepository,
        *,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._source = source
        self._favorites = favorites
        self._clock = clock
        self._listeners: list[Listener] = []
        self._generation = 0
        self._snapshot = self._initial_snapshot()

    @property
    def snapshot(self) -> CountriesSnapshot:
        return self._snapshot

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, listener: Listener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def reset(self) -> None:
        """Return to the initial state; in-flight fetches become stale."""
        self._generation += 1
        self._replace_snapshot(self._initial_snapshot())

    # Fetch intents

    def fetch_all(self) -> asyncio.Task[FetchOutcome]:
        return self._dispatch("fetch_all", FETCH_ALL_ERROR, self._source.fetch_all, self._replace_countries)

    def fetch_by_name(self, name: str) -> asyncio.Task[FetchOutcome]:
        return self._dispatch(
            "fetch_by_name",
            FETCH_BY_NAME_ERROR,
            lambda: self._source.fetch_by_name(name),
            self._replace_countries,
        )

    def fetch_by_region(self, region: str) -> asyncio.Task[FetchOutcome]:
        return self._dispatch(
            "fetch_by_region",
            FETCH_BY_REGION_ERROR,
            lambda: self._source.fetch_by_region(region),
            self._replace_countries,
        )

    def fetch_one(self, code: str) -> asyncio.Task[FetchOutcome]:
        return self._dispatch(
            "fetch_one",
            FETCH_ONE_ERROR,
            lambda: self._source.fetch_by_code(code),
            self._append_first,
        )

    # Favorites intents

    def is_favorite(self, code: str) -> bool:
        return self._snapshot.is_favorite(code)

    def add_favorite(self, country: Country) -> bool:
        """Add ``country`` unless one with the same code is already a favorite.

        Returns True when the favorites changed.
        """
        if self.is_favorite(country.code):
            return False

        self._commit_favorites((*self._snapshot.favorites, country))
        logger.info("Favorite added", code=country.code)
        return True

    def remove_favorite(self, code: str) -> bool:
        wanted = code.strip().upper()
        remaining = tuple(country for country in self._snapshot.favorites if country.code != wanted)
        if len(remaining) == len(self._snapshot.favorites):
            return False

        self._commit_favorites(remaining)
        logger.info("Favorite removed", code=wanted)
        return True

    def toggle_favorite(self, country: Country) -> bool:
        """Flip ``country``'s favorite state. Returns True if it is now a favorite."""
        if self.remove_favorite(country.code):
            return False
        return self.add_favorite(country)

    def clear_favorites(self) -> None:
        self._update(
            favorites=(),
            favorites_error=self._persist_error(self._favorites.clear(), "Failed to clear stored favorites"),
            last_updated=self._clock(),
        )
        logger.info("Favorites cleared")

    def sync_favorites(self) -> None:
        """Reload favorites from storage, discarding the in-memory copy."""
        self._update(favorites=tuple(self._favorites.load()))

    def _initial_snapshot(self) -> CountriesSnapshot:
        return CountriesSnapshot(favorites=tuple(self._favorites.load()))

    def _dispatch(
        self,
        operation: str,
        failure_message: str,
        request: Callable[[], Awaitable[CountriesResult]],
        apply: Callable[[list[Country]], None],
    ) -> asyncio.Task[FetchOutcome]:
        loop = asyncio.get_running_loop()

        self._generation += 1
        generation = self._generation
        logger.debug("Fetch started", operation=operation, generation=generation)
        self._update(status=FetchStatus.LOADING, error=None, cause=None)

        return loop.create_task(self._resolve(operation, generation, failure_message, request, apply))

    async def _resolve(
        self,
        operation: str,
        generation: int,
        failure_message: str,
        request: Callable[[], Awaitable[CountriesResult]],
        apply: Callable[[list[Country]], None],
    ) -> FetchOutcome:
        try:
            result = await request()
        except Exception:
            logger.exception("Country source raised", operation=operation, generation=generation)
            result = None

        if generation != self._generation:
            logger.debug("Dropping stale response", operation=operation, generation=generation, latest=self._generation)
            return FetchOutcome.STALE

        match result:
            case Ok(countries):
                apply(countries)
                logger.debug("Fetch applied", operation=operation, count=len(countries))
                return FetchOutcome.APPLIED
            case Err(error):
                logger.warning("Fetch failed", operation=operation, error=error.message)
                self._update(status=FetchStatus.FAILED, error=failure_message, cause=error)
            case None:
                self._update(status=FetchStatus.FAILED, error=failure_message)

        return FetchOutcome.FAILED

    def _replace_countries(self, countries: list[Country]) -> None:
        self._update(status=FetchStatus.SUCCEEDED, countries=tuple(countries))

    def _append_first(self, countries: list[Country]) -> None:
        current = self._snapshot.countries
        if countries and self._snapshot.find_country(countries[0].code) is None:
            current = (*current, countries[0])
        self._update(status=FetchStatus.SUCCEEDED, countries=current)

    def _commit_favorites(self, favorites: tuple[Country, ...]) -> None:
        self._update(
            favorites=favorites,
            favorites_error=self._persist_error(self._favorites.save(favorites), "Failed to persist favorites"),
            last_updated=self._clock(),
        )

    def _persist_error(self, result: Result[None, FavoritesError], log_message: str) -> str | None:
        match result:
            case Err(error):
                logger.error(log_message, error=error.message)
                return error.message
            case _:
                return None

    def _update(self, **changes: object) -> None:
        self._replace_snapshot(replace(self._snapshot, **changes))

    def _replace_snapshot(self, snapshot: CountriesSnapshot) -> None:
        self._snapshot = snapshot
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Snapshot listener failed")
