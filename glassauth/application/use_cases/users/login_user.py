# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from glassauth.domain.users.entities import Session, SessionData
from glassauth.domain.users.exceptions import InvalidCredentialsError
from glassauth.domain.users.policies import normalize_email
from glassauth.domain.users.repositories import PasswordHasher, SessionStore, UserRepository
from glassauth.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionStore,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._password_hasher = password_hasher

    def execute(
        self, email: str, password: str, current_token: str | None = None
    ) -> Session:
        normalized = normalize_email(email)
        user = self._users.find_by_email(normalized) if normalized else None
        password_valid = user is not None and self._password_hasher.verify(
            password, user.password_hash
        )

        # unknown email and wrong password must look the same to the caller
        if not password_valid or user is None:
            logger.info("auth.login: failed")
            raise InvalidCredentialsError()

        if current_token:
            self._sessions.destroy(current_token)

        session = self._sessions.create(SessionData(user_id=user.id, user_email=user.email))
        logger.info(f"auth.login: ok user_id={user.id}")
        return session
