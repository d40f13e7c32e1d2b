# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time

from flask import Flask, Response, g, request

from glassauth.infrastructure.observability import Metrics


def configure_request_metrics(app: Flask, metrics: Metrics) -> None:
    if not metrics.enabled:
        return

    @app.before_request
    def _start_timer() -> None:
        g.metrics_start_time = time.perf_counter()

    @app.after_request
    def _observe(response: Response) -> Response:
        start_time = getattr(g, "metrics_start_time", None)
        if start_time is not None:
            metrics.observe_request(
                request.endpoint or "unmatched",
                response.status_code,
                time.perf_counter() - start_time,
            )
        return response


__all__ = ["configure_request_metrics"]
