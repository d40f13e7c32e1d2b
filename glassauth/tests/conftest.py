from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from glassauth.app import create_app
from glassauth.application.services.password_hashing import WerkzeugPasswordHasher
from glassauth.infrastructure.container import Container
from glassauth.infrastructure.sessions import InMemorySessionStore
from glassauth.shared.config import AppConfig, DatabaseConfig, DemoConfig, SessionConfig

# cheap hash parameters keep the suite fast; production uses werkzeug's default
FAST_HASH_METHOD = "pbkdf2:sha256:1000"


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        APP_ENV="test",
        LOG_LEVEL="WARNING",
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'auth.db'}"),
        session=SessionConfig(SESSION_LIFETIME=60 * 60 * 24, SESSION_COOKIE_NAME="session_id"),
        demo=DemoConfig(DEMO_SEED_ENABLED=False),
    )


@pytest.fixture()
def container(config: AppConfig, clock: FakeClock) -> Iterator[Container]:
    c = Container(config)
    c.password_hasher = WerkzeugPasswordHasher(method=FAST_HASH_METHOD)
    c.session_store = InMemorySessionStore(
        lifetime=timedelta(seconds=config.session.lifetime_seconds), clock=clock
    )
    yield c
    c.dispose()


@pytest.fixture()
def app(container: Container) -> Flask:
    flask_app = create_app(container.config, container)
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
