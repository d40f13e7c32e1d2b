# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, abort, jsonify
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from glassauth.infrastructure.health import check_database
from glassauth.infrastructure.observability import Metrics
from glassauth.shared.logging import logger


class MiscController:
    def __init__(self, *, engine: Engine, metrics: Metrics | None = None) -> None:
        self._engine = engine
        self._metrics = metrics

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule("/metrics", view_func=self.metrics, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            check_database(self._engine)
            status["database"] = "ok"
        except SQLAlchemyError as exc:
            logger.error(f"health: database check failed {type(exc).__name__}")
            status["ok"] = False
            status["database"] = "error"
            return jsonify(status), 503
        return jsonify(status)

    def metrics(self) -> Response:
        if self._metrics is None or not self._metrics.enabled:
            abort(404)
        payload, content_type = self._metrics.render()
        return Response(payload, mimetype=content_type)
