"""
Password hashing and session token helpers.

Stored password format is ``<hex key>.<hex salt>``: a 64-byte key derived
with bcrypt's KDF from the password and a random 16-byte salt.
"""

import hmac
import secrets

import bcrypt

from app.config import settings

KEY_BYTES = 64
SALT_BYTES = 16

# Verified against when the username is unknown so both failure paths do the same work.
_DUMMY_HASH = f"{'00' * KEY_BYTES}.{'00' * SALT_BYTES}"


def _derive(password: str, salt: bytes) -> bytes:
    return bcrypt.kdf(
        password=password.encode("utf-8"),
        salt=salt,
        desired_key_bytes=KEY_BYTES,
        rounds=settings.password_kdf_rounds,
        ignore_few_rounds=settings.is_testing(),
    )


def hash_password(password: str) -> str:
    """Hash a password with a fresh random salt"""
    salt = secrets.token_bytes(SALT_BYTES)
    return f"{_derive(password, salt).hex()}.{salt.hex()}"


def verify_password(password: str, stored: str) -> bool:
    """Re-derive the key from the stored salt and compare in constant time"""
    if not password:
        return False
    try:
        hashed, salt = stored.split(".")
        expected = bytes.fromhex(hashed)
        salt_bytes = bytes.fromhex(salt)
    except ValueError:
        return False
    return hmac.compare_digest(expected, _derive(password, salt_bytes))


def burn_password_check(password: str) -> None:
    """Spend the same time as a real verification when there is no user to check"""
    verify_password(password, _DUMMY_HASH)


def new_session_token() -> str:
    return secrets.token_urlsafe(32)
