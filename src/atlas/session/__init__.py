"""Optional local sign-in that gates favorites."""

from .models import SessionError, SessionState, User
from .store import SessionStore, visible_favorites

__all__ = [
    "SessionError",
    "SessionState",
    "SessionStore",
    "User",
    "visible_favorites",
]
