from __future__ import annotations

import pytest

from glassauth.application.services.password_hashing import WerkzeugPasswordHasher

FAST_HASH_METHOD = "pbkdf2:sha256:1000"


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method=FAST_HASH_METHOD)


def test_hash_is_salted_and_never_plaintext(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("secret6")
    second = hasher.hash("secret6")

    assert "secret6" not in first
    assert first != second
    assert first.startswith("pbkdf2:sha256:1000$")


def test_verify_accepts_matching_password(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("secret6")

    assert hasher.verify("secret6", hashed) is True
    assert hasher.verify("secret7", hashed) is False


def test_default_method_round_trips() -> None:
    hasher = WerkzeugPasswordHasher()
    hashed = hasher.hash("demo2024")

    assert hasher.verify("demo2024", hashed) is True


@pytest.mark.parametrize(
    "bad_hash",
    [
        "",
        "not-a-hash",
        "unknown-method$salt$digest",
        "pbkdf2:sha256:abc$salt$digest",
        "pbkdf2:sha256:99999999999999999999$salt$abcd",
        "scrypt:99999999999999999999:8:1$salt$abcd",
    ],
)
def test_verify_returns_false_for_malformed_hash(
    hasher: WerkzeugPasswordHasher, bad_hash: str
) -> None:
    assert hasher.verify("secret6", bad_hash) is False
