# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from glassauth.application.services.password_hashing import WerkzeugPasswordHasher
from glassauth.application.use_cases.users.current_session import CurrentSessionUseCase
from glassauth.application.use_cases.users.login_user import LoginUserUseCase
from glassauth.application.use_cases.users.logout_user import LogoutUserUseCase
from glassauth.application.use_cases.users.register_user import RegisterUserUseCase
from glassauth.infrastructure.db import create_db_engine, create_session_factory
from glassauth.infrastructure.observability import Metrics
from glassauth.infrastructure.repositories.users import SqlAlchemyUserRepository
from glassauth.infrastructure.sessions import InMemorySessionStore
from glassauth.interfaces.http.controllers import (
    AuthController,
    DashboardController,
    MiscController,
)
from glassauth.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def engine(self) -> Engine:
        return create_db_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return create_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def session_store(self) -> InMemorySessionStore:
        return InMemorySessionStore(
            lifetime=timedelta(seconds=self.config.session.lifetime_seconds)
        )

    @cached_property
    def metrics(self) -> Metrics:
        metrics = Metrics(enabled=self.config.observability.metrics_enabled)
        metrics.track_sessions(lambda: len(self.session_store))
        return metrics

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            sessions=self.session_store,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            sessions=self.session_store,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_store)

    @cached_property
    def current_session_use_case(self) -> CurrentSessionUseCase:
        return CurrentSessionUseCase(sessions=self.session_store)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            config=self.config,
            metrics=self.metrics,
        )

    @cached_property
    def dashboard_controller(self) -> DashboardController:
        return DashboardController(
            current_session_use_case=self.current_session_use_case,
            cookie_name=self.config.session.cookie_name,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine, metrics=self.metrics)

    def dispose(self) -> None:
        if "engine" in self.__dict__:
            self.engine.dispose()
