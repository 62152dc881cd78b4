"""Unit tests for PasswordHasher."""

import bcrypt
import pytest

from social.util.password import PasswordHasher


@pytest.fixture
def hasher():
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


def test_hash_verifies(hasher):
    password_hash = hasher.hash("s3cret")

    assert password_hash.startswith("$2b$04$")
    assert hasher.verify("s3cret", password_hash)
    assert not hasher.verify("wrong", password_hash)


def test_default_cost_is_ten():
    assert PasswordHasher().hash("s3cret").startswith("$2b$10$")


def test_hashes_are_salted(hasher):
    assert hasher.hash("s3cret") != hasher.hash("s3cret")


def test_verifies_hash_written_by_bcrypt_directly():
    """Hashes stored by other bcrypt implementations verify unchanged."""
    stored = bcrypt.hashpw(b"alice-pass", bcrypt.gensalt(10)).decode()

    assert PasswordHasher().verify("alice-pass", stored)
    assert not PasswordHasher().verify("bob-pass", stored)


def test_cost_travels_with_hash(hasher):
    password_hash = PasswordHasher(rounds=5).hash("s3cret")

    assert hasher.verify("s3cret", password_hash)


def test_overlong_password_is_rejected(hasher):
    with pytest.raises(ValueError):
        hasher.hash("x" * 73)


@pytest.mark.parametrize(
    "stored", ["", "plaintext", "scrypt$16384$8$1$AAAA$AAAA", "$2b$10$short"]
)
def test_malformed_hash_never_verifies(hasher, stored):
    assert not hasher.verify("s3cret", stored)
