from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy import text

from glassauth.domain.users.exceptions import StoreUnavailableError, UserAlreadyExistsError
from glassauth.infrastructure.container import Container
from glassauth.infrastructure.db import init_db
from glassauth.infrastructure.demo_seed import seed_demo_user
from glassauth.infrastructure.repositories.users import SqlAlchemyUserRepository
from glassauth.shared.config import DemoConfig


@pytest.fixture()
def repository(container: Container) -> SqlAlchemyUserRepository:
    init_db(container.engine)
    return container.user_repository


def test_add_and_find_user(repository: SqlAlchemyUserRepository) -> None:
    created = repository.add("a@b.com", "hash-value", phone="+1 555 0100")

    by_email = repository.find_by_email("a@b.com")
    by_id = repository.find_by_id(created.id)

    assert created.id > 0
    assert by_email is not None and by_email.id == created.id
    assert by_id is not None and by_id.email == "a@b.com"
    assert by_email.phone == "+1 555 0100"
    assert by_email.password_hash == "hash-value"
    assert by_email.created_at is not None


def test_find_missing_user_returns_none(repository: SqlAlchemyUserRepository) -> None:
    assert repository.find_by_email("nobody@b.com") is None
    assert repository.find_by_id(999) is None


def test_duplicate_email_is_a_distinct_error(repository: SqlAlchemyUserRepository) -> None:
    repository.add("a@b.com", "hash-1")

    with pytest.raises(UserAlreadyExistsError):
        repository.add("a@b.com", "hash-2")

    assert repository.count() == 1


def test_concurrent_duplicate_inserts_yield_one_success(
    repository: SqlAlchemyUserRepository,
) -> None:
    barrier = threading.Barrier(2)

    def _insert(i: int) -> str:
        barrier.wait()
        try:
            repository.add("race@b.com", f"hash-{i}")
            return "created"
        except UserAlreadyExistsError:
            return "exists"

    with ThreadPoolExecutor(max_workers=2) as pool:
        outcomes = sorted(pool.map(_insert, range(2)))

    assert outcomes == ["created", "exists"]
    assert repository.count() == 1


def test_store_failure_is_reported_as_unavailable(
    repository: SqlAlchemyUserRepository, container: Container
) -> None:
    with container.engine.begin() as conn:
        conn.execute(text("DROP TABLE users"))

    with pytest.raises(StoreUnavailableError) as exc_info:
        repository.add("a@b.com", "hash")

    assert exc_info.value.user_message == "Registration failed"
    assert not isinstance(exc_info.value, UserAlreadyExistsError)


def test_seed_demo_user_only_when_empty(
    repository: SqlAlchemyUserRepository, container: Container
) -> None:
    demo = DemoConfig(DEMO_SEED_ENABLED=True, DEMO_EMAIL="Demo@GlassAuth.io", DEMO_PASSWORD="demo2024")

    seeded = seed_demo_user(repository, container.password_hasher, demo)
    again = seed_demo_user(repository, container.password_hasher, demo)

    assert seeded is not None
    assert seeded.email == "demo@glassauth.io"
    assert container.password_hasher.verify("demo2024", seeded.password_hash)
    assert again is None
    assert repository.count() == 1


def test_seed_demo_user_skips_populated_or_disabled_store(
    repository: SqlAlchemyUserRepository, container: Container
) -> None:
    assert seed_demo_user(repository, container.password_hasher, DemoConfig(DEMO_SEED_ENABLED=False)) is None
    assert repository.count() == 0

    repository.add("someone@b.com", "hash")
    assert seed_demo_user(repository, container.password_hasher, DemoConfig(DEMO_SEED_ENABLED=True)) is None
    assert repository.count() == 1
