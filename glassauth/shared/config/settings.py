# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SETTINGS_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    validate_by_name=True,
)


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "y", "on")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///auth.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _SETTINGS_CONFIG


class SessionConfig(BaseSettings):
    lifetime_seconds: int = Field(60 * 60 * 24, ge=1, alias="SESSION_LIFETIME")
    cookie_name: str = Field("session_id", min_length=1, alias="SESSION_COOKIE_NAME")

    model_config = _SETTINGS_CONFIG


class SecurityConfig(BaseSettings):
    # Secure is off by default so the demo works over plain HTTP.
    cookie_secure: bool = Field(False, alias="COOKIE_SECURE")
    cookie_samesite: str = Field("Lax", alias="COOKIE_SAMESITE")
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = _SETTINGS_CONFIG

    @field_validator("cookie_secure", "enable_hsts", mode="before")
    @classmethod
    def _parse_flags(cls, value: str | bool) -> bool:
        return _parse_bool(value)


class ObservabilityConfig(BaseSettings):
    metrics_enabled: bool = Field(True, alias="METRICS_ENABLED")

    model_config = _SETTINGS_CONFIG

    @field_validator("metrics_enabled", mode="before")
    @classmethod
    def _parse_metrics_enabled(cls, value: str | bool) -> bool:
        return _parse_bool(value)


class DemoConfig(BaseSettings):
    enabled: bool = Field(True, alias="DEMO_SEED_ENABLED")
    email: str = Field("demo@glassauth.io", alias="DEMO_EMAIL")
    password: str = Field("demo2024", min_length=6, alias="DEMO_PASSWORD")
    phone: str | None = Field("+1 (555) 987-6543", max_length=20, alias="DEMO_PHONE")

    model_config = _SETTINGS_CONFIG

    @field_validator("enabled", mode="before")
    @classmethod
    def _parse_enabled(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _session_config_factory() -> SessionConfig:
    return SessionConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


def _demo_config_factory() -> DemoConfig:
    return DemoConfig()  # type: ignore[call-arg]


def _observability_config_factory() -> ObservabilityConfig:
    return ObservabilityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_name: str = Field("3D Glass Auth", alias="APP_NAME")
    app_env: str = Field("development", alias="APP_ENV")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3000, ge=1, le=65535, alias="PORT")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    session: SessionConfig = Field(default_factory=_session_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)
    demo: DemoConfig = Field(default_factory=_demo_config_factory)
    observability: ObservabilityConfig = Field(default_factory=_observability_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        warnings = []
        if not self.security.cookie_secure:
            warnings.append("⚠️  Cookie Secure flag is DISABLED (use HTTPS!)")
        if not self.security.enable_hsts:
            warnings.append("⚠️  HSTS is DISABLED (recommended for HTTPS)")
        if self.demo.enabled:
            warnings.append("⚠️  Demo account seeding is ENABLED")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)
            print(
                "   Consider enabling these security features in production.\n",
                file=sys.stderr,
            )

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "DemoConfig",
    "ObservabilityConfig",
    "SecurityConfig",
    "SessionConfig",
    "load_config",
]
