from __future__ import annotations

import pytest

from glassauth.shared.config import AppConfig, SecurityConfig, SessionConfig
from glassauth.shared.logging.sensitive_filter import sanitize_message, sanitize_record


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("PORT", "SESSION_LIFETIME", "COOKIE_SECURE", "APP_ENV"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = AppConfig()

    assert config.port == 3000
    assert config.database.url == "sqlite:///auth.db"
    assert config.session.cookie_name == "session_id"
    assert config.session.lifetime_seconds == 86400
    assert config.security.cookie_secure is False
    assert config.security.cookie_samesite == "Lax"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SESSION_LIFETIME", "120")
    monkeypatch.setenv("COOKIE_SECURE", "true")

    assert AppConfig().port == 8080
    assert SessionConfig().lifetime_seconds == 120
    assert SecurityConfig().cookie_secure is True


def test_production_warns_about_insecure_cookie(capsys: pytest.CaptureFixture[str]) -> None:
    AppConfig(APP_ENV="production")

    assert "Cookie Secure flag is DISABLED" in capsys.readouterr().err


@pytest.mark.parametrize(
    ("raw", "leaked"),
    [
        ("password=hunter22", "hunter22"),
        ("session_id=" + "x" * 43, "x" * 43),
        ("user alice@example.com logged in", "alice"),
        ("postgresql://app:s3cret@db/auth", "s3cret"),
    ],
)
def test_sanitize_message_redacts(raw: str, leaked: str) -> None:
    assert leaked not in sanitize_message(raw)


def test_sanitize_record_keeps_domain() -> None:
    record = {"message": "auth.register: ok email=bob@glassauth.io"}

    sanitize_record(record)

    assert record["message"] == "auth.register: ok email=***@glassauth.io"
