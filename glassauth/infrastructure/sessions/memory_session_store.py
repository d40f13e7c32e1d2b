# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Process-local session table keyed by random cookie tokens."""

from __future__ import annotations

import secrets
import threading
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from glassauth.domain.users.entities import Session, SessionData
from glassauth.domain.users.repositories import SessionStore
from glassauth.shared.logging import logger

MIN_TOKEN_BYTES = 16


def _utcnow() -> datetime:
    return datetime.now(UTC)


class InMemorySessionStore(SessionStore):
    """Thread-safe session table with absolute expiry.

    Expired entries are dropped when they are looked up, and swept in bulk
    every ``purge_every`` creations so abandoned sessions do not accumulate.
    """

    def __init__(
        self,
        *,
        lifetime: timedelta,
        clock: Callable[[], datetime] = _utcnow,
        token_bytes: int = 32,
        purge_every: int = 100,
    ) -> None:
        if token_bytes < MIN_TOKEN_BYTES:
            raise ValueError(f"token_bytes must be at least {MIN_TOKEN_BYTES}")
        if lifetime <= timedelta(0):
            raise ValueError("lifetime must be positive")
        self._lifetime = lifetime
        self._clock = clock
        self._token_bytes = token_bytes
        self._purge_every = max(purge_every, 1)
        self._sessions: dict[str, Session] = {}
        self._created = 0
        self._lock = threading.Lock()

    def create(self, data: SessionData) -> Session:
        now = self._clock()
        with self._lock:
            token = secrets.token_urlsafe(self._token_bytes)
            while token in self._sessions:
                token = secrets.token_urlsafe(self._token_bytes)
            session = Session(token=token, data=data, expires_at=now + self._lifetime)
            self._sessions[token] = session
            self._created += 1
            should_purge = self._created % self._purge_every == 0

        if should_purge:
            self.purge_expired()
        logger.debug(f"sessions.create: user_id={data.user_id} exp={session.expires_at.isoformat()}")
        return session

    def get(self, token: str) -> Session | None:
        if not token:
            return None
        now = self._clock()
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if session.is_expired(now):
                del self._sessions[token]
                logger.debug(f"sessions.get: expired user_id={session.data.user_id}")
                return None
            return session

    def destroy(self, token: str) -> None:
        if not token:
            return
        with self._lock:
            session = self._sessions.pop(token, None)
        if session is not None:
            logger.debug(f"sessions.destroy: user_id={session.data.user_id}")

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [token for token, s in self._sessions.items() if s.is_expired(now)]
            for token in expired:
                del self._sessions[token]
        if expired:
            logger.info(f"sessions.purge: removed {len(expired)} expired sessions")
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
