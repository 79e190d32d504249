"""Signed-in user state, persisted across runs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import TypeVar

from pydantic import ValidationError
from result import Err, Ok, Result

from atlas.common import create_logger
from atlas.constants import USER_KEY
from atlas.datastore import DataStore, DataStoreKeyNotFoundError

from .models import SessionError, SessionState, User

T = TypeVar("T")

logger = create_logger("session")


class SessionStore:
    def __init__(self, store: DataStore, key: str = USER_KEY) -> None:
        self._store = store
        self._key = key
        self._state = SessionState(current_user=self._restore())

    @property
    def state(self) -> SessionState:
        return self._state

    def sign_in_start(self) -> None:
        self._state = replace(self._state, loading=True, error=None)

    def sign_in_success(self, user: User) -> Result[User, SessionError]:
        """Persist ``user`` and switch to signed-in; the state only changes once the write succeeds."""
        match self._store.save(self._key, user.model_dump(mode="json")):
            case Err(error):
                failure = SessionError(message=f"Failed to persist session: {error.message}")
                self.sign_in_failure(failure.message)
                return Err(failure)
            case _:
                self._state = SessionState(current_user=user)
                logger.info("Signed in", user_id=user.id)
                return Ok(user)

    def sign_in_failure(self, message: str) -> None:
        self._state = replace(self._state, loading=False, error=message)
        logger.warning("Sign-in failed", error=message)

    def sign_out(self) -> Result[None, SessionError]:
        user = self._state.current_user
        self._state = SessionState()
        if user is not None:
            logger.info("Signed out", user_id=user.id)
        return self._store.delete(self._key).map_err(
            lambda error: SessionError(message=f"Failed to clear session: {error.message}")
        )

    def _restore(self) -> User | None:
        match self._store.load(self._key):
            case Ok(raw):
                try:
                    return User.model_validate(raw)
                except ValidationError as exc:
                    logger.warning("Discarding unparseable session", errors=exc.error_count())
                    return None
            case Err(DataStoreKeyNotFoundError()):
                return None
            case Err(error):
                logger.warning("Failed to read session", error=error.message)
                return None


def visible_favorites(state: SessionState, favorites: Sequence[T]) -> tuple[T, ...]:
    """Favorites are only shown to a signed-in user."""
    return tuple(favorites) if state.is_signed_in else ()
