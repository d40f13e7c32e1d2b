# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)


class Metrics:
    """Prometheus collectors for one application instance.

    Each instance owns its registry so several apps (tests) can live in one process.
    """

    def __init__(self, *, enabled: bool = True, registry: CollectorRegistry | None = None) -> None:
        self.enabled = enabled
        self.registry = registry or CollectorRegistry()

        self.request_latency = Histogram(
            "glassauth_request_latency_seconds",
            "Request latency",
            buckets=(0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5),
            registry=self.registry,
        )
        self.request_counter = Counter(
            "glassauth_requests_total",
            "Number of processed requests",
            labelnames=("endpoint", "status"),
            registry=self.registry,
        )
        self.auth_events = Counter(
            "glassauth_auth_events_total",
            "Auth workflow outcomes",
            labelnames=("action", "outcome"),
            registry=self.registry,
        )
        self.active_sessions = Gauge(
            "glassauth_active_sessions",
            "Sessions held by the session store",
            registry=self.registry,
        )

    def observe_request(self, endpoint: str, status: int, duration: float) -> None:
        if not self.enabled:
            return
        self.request_latency.observe(duration)
        self.request_counter.labels(endpoint=endpoint, status=str(status)).inc()

    def record_auth_event(self, action: str, outcome: str) -> None:
        if self.enabled:
            self.auth_events.labels(action=action, outcome=outcome).inc()

    def track_sessions(self, size: Callable[[], int]) -> None:
        self.active_sessions.set_function(lambda: float(size()))

    def render(self) -> tuple[bytes, str]:
        return generate_latest(self.registry), CONTENT_TYPE_LATEST


__all__ = ["Metrics"]
