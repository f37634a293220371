"""Password hashing helpers."""

import bcrypt

from credit_system.core.config import settings

# bcrypt only reads the first 72 bytes of a password
_MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh bcrypt salt."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    hash_bytes = bcrypt.hashpw(password.encode("utf-8")[:_MAX_PASSWORD_BYTES], salt)
    return hash_bytes.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    return bcrypt.checkpw(
        plain_password.encode("utf-8")[:_MAX_PASSWORD_BYTES],
        hashed_password.encode("utf-8"),
    )
