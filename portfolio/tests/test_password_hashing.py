from __future__ import annotations

import pytest

from portfolio.application.services.password_hashing import WerkzeugPasswordHasher
from portfolio.domain.users.exceptions import CorruptCredentialError


@pytest.fixture(scope="module")
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher()


def test_hash_then_verify(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("s3cret!")

    assert hashed != "s3cret!"
    assert hasher.verify("s3cret!", hashed) is True
    assert hasher.verify("wrong", hashed) is False


def test_hash_is_salted(hasher: WerkzeugPasswordHasher) -> None:
    assert hasher.hash("same-password") != hasher.hash("same-password")


def test_empty_password_never_verifies(hasher: WerkzeugPasswordHasher) -> None:
    hashed = hasher.hash("s3cret!")

    assert hasher.verify("", hashed) is False
    with pytest.raises(ValueError):
        hasher.hash("")


@pytest.mark.parametrize("stored", ["", "plaintext", "scrypt:32768:8:1$onlysalt"])
def test_corrupt_hash_is_reported(hasher: WerkzeugPasswordHasher, stored: str) -> None:
    with pytest.raises(CorruptCredentialError):
        hasher.verify("s3cret!", stored)
