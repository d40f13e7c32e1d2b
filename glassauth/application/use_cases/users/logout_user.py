"""Use-case for destroying browser sessions."""

from __future__ import annotations

from glassauth.domain.users.repositories import SessionStore


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def execute(self, token: str | None) -> None:
        if token:
            self._sessions.destroy(token)
