# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from glassauth.domain.users.entities import User as DomainUser
from glassauth.domain.users.exceptions import StoreUnavailableError, UserAlreadyExistsError
from glassauth.domain.users.repositories import UserRepository
from glassauth.infrastructure.db.models import User
from glassauth.infrastructure.db.session import session_scope
from glassauth.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        email=row.email,
        phone=row.phone,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        try:
            with session_scope(self._session_factory) as session:
                row = session.scalars(select(User).where(User.email == email)).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(message="Something went wrong, please try again") from exc

    def find_by_id(self, user_id: int) -> DomainUser | None:
        try:
            with session_scope(self._session_factory) as session:
                row = session.get(User, user_id)
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(message="Something went wrong, please try again") from exc

    def add(self, email: str, password_hash: str, phone: str | None = None) -> DomainUser:
        try:
            with session_scope(self._session_factory) as session:
                row = User(email=email, phone=phone, password_hash=password_hash)
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            # unique index on users.email decides concurrent registrations
            logger.info("users.add: duplicate email rejected by unique index")
            raise UserAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            logger.error(f"users.add: store failure {type(exc).__name__}")
            raise StoreUnavailableError() from exc

    def count(self) -> int:
        try:
            with session_scope(self._session_factory) as session:
                return int(session.scalar(select(func.count()).select_from(User)) or 0)
        except SQLAlchemyError as exc:
            raise StoreUnavailableError() from exc
