"""Use-case backing the route guard for protected pages."""

from __future__ import annotations

from glassauth.domain.users.entities import SessionData
from glassauth.domain.users.repositories import SessionStore


class CurrentSessionUseCase:
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def execute(self, token: str | None) -> SessionData | None:
        if not token:
            return None
        session = self._sessions.get(token)
        return session.data if session else None
