# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, g, render_template

from glassauth.application.use_cases.users.current_session import CurrentSessionUseCase
from glassauth.domain.users.entities import SessionData
from glassauth.interfaces.http.guards import session_required


class DashboardController:
    def __init__(self, *, current_session_use_case: CurrentSessionUseCase, cookie_name: str) -> None:
        self._current_session_use_case = current_session_use_case
        self._cookie_name = cookie_name

    def dashboard(self) -> str:
        data: SessionData = g.session_data
        return render_template("dashboard.html", email=data.user_email)

    def as_blueprint(self) -> Blueprint:
        guard = session_required(self._current_session_use_case, cookie_name=self._cookie_name)
        bp = Blueprint("dashboard", __name__)
        bp.add_url_rule(
            "/dashboard", endpoint="dashboard", view_func=guard(self.dashboard), methods=["GET"]
        )
        return bp
