# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Session, SessionData, User


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def add(self, email: str, password_hash: str, phone: str | None = None) -> User: ...
    def count(self) -> int: ...


class SessionStore(Protocol):
    def create(self, data: SessionData) -> Session: ...
    def get(self, token: str) -> Session | None: ...
    def destroy(self, token: str) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...
