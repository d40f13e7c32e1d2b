# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from glassauth.shared.config import DatabaseConfig
from glassauth.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _is_sqlite_memory(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def create_db_engine(config: DatabaseConfig) -> Engine:
    url = config.url
    if not url.startswith("sqlite"):
        return create_engine(
            url,
            echo=False,
            future=True,
            pool_pre_ping=True,
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
        )

    connect_args: dict[str, object] = {
        "check_same_thread": False,
        "timeout": int(config.pool_timeout),
    }
    if _is_sqlite_memory(url):
        # one shared connection, otherwise every checkout sees an empty database
        return create_engine(
            url, echo=False, future=True, connect_args=connect_args, poolclass=StaticPool
        )
    return create_engine(
        url,
        echo=False,
        future=True,
        pool_pre_ping=True,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
        connect_args=connect_args,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@contextmanager
def session_scope(factory: Callable[[], Session]) -> Iterator[Session]:
    session = factory()
    logger.debug("db.session: opened session")
    try:
        yield session
        session.commit()
        logger.debug("db.session: committed session")
    except Exception as exc:
        logger.warning(f"db.session: {type(exc).__name__}, rolling back")
        session.rollback()
        raise
    finally:
        session.close()
        logger.debug("db.session: closed session")


def init_db(engine: Engine) -> None:
    # models must be imported so their tables are registered on Base.metadata
    from glassauth.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ensured")
