"""Session models."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from atlas.common import NonEmptyString


class User(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: NonEmptyString
    username: NonEmptyString
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    profile_picture: str | None = None


@dataclass(frozen=True, slots=True)
class SessionState:
    current_user: User | None = None
    loading: bool = False
    error: str | None = None

    @property
    def is_signed_in(self) -> bool:
        return self.current_user is not None


class SessionError(BaseModel):
    model_config = ConfigDict(extra="forbid")

    message: str
