# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, redirect, request, url_for

from glassauth.application.use_cases.users.current_session import CurrentSessionUseCase
from glassauth.shared.logging import logger


def session_required(
    current_session: CurrentSessionUseCase, *, cookie_name: str
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Redirect to the login page unless the cookie resolves to a live session."""

    def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(f)
        def inner(*a, **kw):
            token = request.cookies.get(cookie_name, "")
            data = current_session.execute(token)
            if data is None:
                logger.info(
                    f"Auth redirect ({'stale' if token else 'no'} session) "
                    f"on {request.method} {request.path}"
                )
                resp = redirect(url_for("auth.login_page"))
                if token:
                    resp.delete_cookie(cookie_name)
                return resp

            g.user_id = data.user_id
            g.session_data = data
            return f(*a, **kw)

        return inner

    return decorator


__all__ = ["session_required"]
