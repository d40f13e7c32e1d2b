# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TypeVar

from flask import Blueprint, Response, redirect, render_template, request, url_for
from pydantic import BaseModel, ValidationError

from glassauth.application.use_cases.users.login_user import LoginUserUseCase
from glassauth.application.use_cases.users.logout_user import LogoutUserUseCase
from glassauth.application.use_cases.users.register_user import RegisterUserUseCase
from glassauth.domain.users.entities import Session
from glassauth.domain.users.exceptions import InvalidCredentialsError
from glassauth.infrastructure.observability import Metrics
from glassauth.interfaces.http.dto.auth import LoginFormDTO, RegisterFormDTO
from glassauth.shared.config import AppConfig
from glassauth.shared.errors import AppError
from glassauth.shared.errors.validation import raise_validation_error
from glassauth.shared.logging import logger

_DTO = TypeVar("_DTO", bound=BaseModel)


def _parse_form(model: type[_DTO]) -> _DTO:
    try:
        return model.model_validate(request.form.to_dict())
    except ValidationError as exc:
        raise_validation_error(exc)


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        config: AppConfig,
        metrics: Metrics | None = None,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._config = config
        self._metrics = metrics

    def _record(self, action: str, outcome: str) -> None:
        if self._metrics is not None:
            self._metrics.record_auth_event(action, outcome)

    @property
    def _cookie_name(self) -> str:
        return self._config.session.cookie_name

    def _set_session_cookie(self, response: Response, session: Session) -> None:
        response.set_cookie(
            self._cookie_name,
            session.token,
            httponly=True,
            samesite=self._config.security.cookie_samesite,
            secure=self._config.security.cookie_secure,
            max_age=self._config.session.lifetime_seconds,
        )

    def _render_login(self, error: str = "") -> str:
        demo = self._config.demo if self._config.demo.enabled else None
        return render_template("login.html", error=error, demo=demo)

    def _render_register(self, error: str = "") -> str:
        return render_template("register.html", error=error)

    def index(self) -> Response:
        return redirect(url_for("auth.login_page"))

    def login_page(self) -> str:
        return self._render_login()

    def login(self) -> Response | str:
        try:
            dto = _parse_form(LoginFormDTO)
        except AppError:
            # same answer as bad credentials
            self._record("login", "failed")
            return self._render_login(InvalidCredentialsError().user_message)

        try:
            session = self._login_use_case.execute(
                dto.email,
                dto.password,
                current_token=request.cookies.get(self._cookie_name),
            )
        except AppError as exc:
            self._record("login", "failed")
            return self._render_login(exc.user_message)

        self._record("login", "ok")
        response = redirect(url_for("dashboard.dashboard"))
        self._set_session_cookie(response, session)
        return response

    def register_page(self) -> str:
        return self._render_register()

    def register(self) -> Response | str:
        try:
            dto = _parse_form(RegisterFormDTO)
            user, session = self._register_use_case.execute(
                dto.email, dto.password, dto.confirm_password, phone=dto.phone
            )
        except AppError as exc:
            logger.info(f"auth.register: rejected code={exc.code}")
            self._record("register", "rejected")
            return self._render_register(exc.user_message)

        # a stale session from before registration is no longer needed
        self._logout_use_case.execute(request.cookies.get(self._cookie_name))

        response = redirect(url_for("dashboard.dashboard"))
        self._set_session_cookie(response, session)
        self._record("register", "ok")
        logger.info(f"auth.register: session issued user_id={user.id}")
        return response

    def logout(self) -> Response:
        self._logout_use_case.execute(request.cookies.get(self._cookie_name))

        response = redirect(url_for("auth.login_page"))
        response.delete_cookie(
            self._cookie_name,
            httponly=True,
            samesite=self._config.security.cookie_samesite,
            secure=self._config.security.cookie_secure,
        )
        self._record("logout", "ok")
        logger.info("auth.logout: ok")
        return response

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/", endpoint="index", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/login", endpoint="login_page", view_func=self.login_page, methods=["GET"])
        bp.add_url_rule("/login", endpoint="login", view_func=self.login, methods=["POST"])
        bp.add_url_rule(
            "/register", endpoint="register_page", view_func=self.register_page, methods=["GET"]
        )
        bp.add_url_rule("/register", endpoint="register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/logout", endpoint="logout", view_func=self.logout, methods=["POST"])
        return bp
