# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from glassauth.domain.users.entities import Session, SessionData, User
from glassauth.domain.users.exceptions import (
    EmailRequiredError,
    PasswordMismatchError,
    PasswordTooShortError,
    UserAlreadyExistsError,
)
from glassauth.domain.users.policies import MIN_PASSWORD_LENGTH, normalize_email
from glassauth.domain.users.repositories import PasswordHasher, SessionStore, UserRepository
from glassauth.shared.logging import logger


class RegisterUserUseCase:
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
        self,
        email: str,
        password: str,
        confirm_password: str,
        phone: str | None = None,
    ) -> tuple[User, Session]:
        normalized = normalize_email(email)
        if not normalized:
            raise EmailRequiredError()
        if password != confirm_password:
            raise PasswordMismatchError()
        if len(password) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError(context={"min_length": MIN_PASSWORD_LENGTH})

        if self._users.find_by_email(normalized):
            logger.info("auth.register: email already registered")
            raise UserAlreadyExistsError()

        hashed = self._password_hasher.hash(password)
        # add() raises UserAlreadyExistsError too if a concurrent request won the race
        persisted = self._users.add(normalized, hashed, phone=(phone or "").strip() or None)
        session = self._sessions.create(
            SessionData(user_id=persisted.id, user_email=persisted.email)
        )
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return persisted, session
