# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Session, SessionData, User
from .exceptions import (
    EmailRequiredError,
    InvalidCredentialsError,
    PasswordMismatchError,
    PasswordTooShortError,
    StoreUnavailableError,
    UserAlreadyExistsError,
)
from .policies import MIN_PASSWORD_LENGTH, normalize_email
from .repositories import PasswordHasher, SessionStore, UserRepository

__all__ = [
    "EmailRequiredError",
    "InvalidCredentialsError",
    "MIN_PASSWORD_LENGTH",
    "PasswordHasher",
    "PasswordMismatchError",
    "PasswordTooShortError",
    "Session",
    "SessionData",
    "SessionStore",
    "StoreUnavailableError",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
    "normalize_email",
]
