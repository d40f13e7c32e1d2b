# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from glassauth.shared.errors.base import DomainError, InfrastructureError, ValidationError

from .policies import MIN_PASSWORD_LENGTH


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT
    message = "Email already registered"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid credentials"


class EmailRequiredError(ValidationError):
    code = "email_required"
    message = "Email is required"


class PasswordMismatchError(ValidationError):
    code = "password_mismatch"
    message = "Passwords do not match"


class PasswordTooShortError(ValidationError):
    code = "password_too_short"
    message = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"


class StoreUnavailableError(InfrastructureError):
    code = "store_unavailable"
    message = "Registration failed"
