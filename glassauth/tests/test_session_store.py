from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

import pytest

from glassauth.domain.users.entities import SessionData
from glassauth.infrastructure.sessions import InMemorySessionStore


@pytest.fixture()
def store(clock) -> InMemorySessionStore:
    return InMemorySessionStore(lifetime=timedelta(hours=24), clock=clock)


def test_create_and_get_returns_typed_payload(store: InMemorySessionStore, clock) -> None:
    session = store.create(SessionData(user_id=7, user_email="a@b.com"))

    found = store.get(session.token)

    assert found is not None
    assert found.data == SessionData(user_id=7, user_email="a@b.com")
    assert session.expires_at == clock.now + timedelta(hours=24)


def test_tokens_are_long_and_unique(store: InMemorySessionStore) -> None:
    tokens = {store.create(SessionData(user_id=i, user_email=f"u{i}@x.io")).token for i in range(50)}

    assert len(tokens) == 50
    # 32 random bytes encode to 43 urlsafe characters
    assert all(len(t) >= 43 for t in tokens)


def test_unknown_and_empty_tokens_are_not_found(store: InMemorySessionStore) -> None:
    assert store.get("does-not-exist") is None
    assert store.get("") is None


def test_expired_session_behaves_like_not_found(store: InMemorySessionStore, clock) -> None:
    session = store.create(SessionData(user_id=1, user_email="a@b.com"))

    clock.advance(timedelta(hours=23, minutes=59))
    assert store.get(session.token) is not None

    clock.advance(timedelta(minutes=1))
    assert store.get(session.token) is None
    assert len(store) == 0


def test_destroy_is_idempotent(store: InMemorySessionStore) -> None:
    session = store.create(SessionData(user_id=1, user_email="a@b.com"))

    store.destroy(session.token)
    store.destroy(session.token)
    store.destroy("never-issued")
    store.destroy("")

    assert store.get(session.token) is None


def test_purge_expired_removes_only_stale_sessions(store: InMemorySessionStore, clock) -> None:
    old = store.create(SessionData(user_id=1, user_email="old@b.com"))
    clock.advance(timedelta(hours=12))
    fresh = store.create(SessionData(user_id=2, user_email="new@b.com"))
    clock.advance(timedelta(hours=12))

    assert store.purge_expired() == 1
    assert store.get(old.token) is None
    assert store.get(fresh.token) is not None


def test_periodic_purge_runs_on_create(clock) -> None:
    store = InMemorySessionStore(lifetime=timedelta(minutes=5), clock=clock, purge_every=3)
    store.create(SessionData(user_id=1, user_email="a@b.com"))
    store.create(SessionData(user_id=2, user_email="b@b.com"))
    clock.advance(timedelta(minutes=10))

    store.create(SessionData(user_id=3, user_email="c@b.com"))

    assert len(store) == 1


def test_rejects_weak_token_size(clock) -> None:
    with pytest.raises(ValueError):
        InMemorySessionStore(lifetime=timedelta(hours=1), clock=clock, token_bytes=8)


def test_concurrent_creates_do_not_lose_sessions(store: InMemorySessionStore) -> None:
    def _create(i: int) -> str:
        return store.create(SessionData(user_id=i, user_email=f"u{i}@x.io")).token

    with ThreadPoolExecutor(max_workers=8) as pool:
        tokens = list(pool.map(_create, range(200)))

    assert len(set(tokens)) == 200
    assert len(store) == 200
