# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    """Base error carrying a machine code, an HTTP status and a user-facing message.

    Subclasses declare ``code``, ``status`` and ``message`` as class attributes;
    constructor arguments override them per instance.
    """

    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    @property
    def user_message(self) -> str:
        return self.message or self.code.replace("_", " ").capitalize()

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code, "message": self.user_message}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


def _declared(error: AppError, name: str, default: Any) -> Any:
    # unset slots raise AttributeError, so getattr falls back to the default
    return getattr(error, name, default)


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            code=code or cast(str, _declared(self, "code", "domain_error")),
            status=status or cast(HTTPStatus, _declared(self, "status", HTTPStatus.BAD_REQUEST)),
            context=context,
            message=message or _declared(self, "message", None),
        )


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str | None = None,
        *,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            code=code or cast(str, _declared(self, "code", "infrastructure_error")),
            status=status or HTTPStatus.SERVICE_UNAVAILABLE,
            context=context,
            message=message or _declared(self, "message", None),
        )


class ValidationError(AppError):
    def __init__(
        self,
        code: str | None = None,
        *,
        context: Mapping[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            code=code or cast(str, _declared(self, "code", "validation_error")),
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            context=context,
            message=message or _declared(self, "message", None),
        )
