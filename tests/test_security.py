import pytest

from app.core.security import hash_password, verify_password


def test_hash_and_verify():
    hashed = hash_password("s3cret-pass")
    assert hashed != "s3cret-pass"
    assert verify_password("s3cret-pass", hashed)
    assert not verify_password("wrong-pass", hashed)


def test_hash_uses_a_slow_key_derivation():
    method = hash_password("s3cret-pass").split("$", 1)[0]
    assert method.split(":", 1)[0] in ("scrypt", "pbkdf2")
    assert not method.startswith("sha256")


def test_hashes_are_salted():
    assert hash_password("s3cret-pass") != hash_password("s3cret-pass")


def test_short_password_is_rejected():
    with pytest.raises(ValueError):
        hash_password("abc")


def test_empty_hash_never_matches():
    assert not verify_password("s3cret-pass", "")
