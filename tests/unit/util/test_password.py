"""Unit tests for password hashing."""

import pytest

from pact.util.password import PasswordError, hash_password, verify_password


def test_hash_then_verify():
    hashed = hash_password("correct horse", rounds=4)

    assert hashed.startswith("$2")
    assert verify_password("correct horse", hashed)
    assert not verify_password("Correct horse", hashed)


def test_hashes_are_salted():
    assert hash_password("same", rounds=4) != hash_password("same", rounds=4)


def test_password_over_72_bytes_rejected():
    with pytest.raises(PasswordError):
        hash_password("x" * 73, rounds=4)

    assert not verify_password("x" * 73, hash_password("x" * 72, rounds=4))


def test_malformed_stored_hash_never_matches():
    assert not verify_password("anything", "not-a-bcrypt-hash")
