from typing import Optional

from flask import current_app
from passlib.hash import bcrypt


def _truncate_password(plain_password: str) -> str:
    """Helper to consistently truncate password to its first 72 UTF-8 bytes."""
    # bcrypt only looks at 72 bytes; cut on a character boundary
    password_bytes = plain_password.encode('utf-8')[:72]
    return password_bytes.decode('utf-8', errors='ignore')


def hash_password(plain_password: str, rounds: Optional[int] = None) -> str:
    """
    Hash password using bcrypt. It is truncated to the first 72 bytes
    of its UTF-8 encoding before hashing.
    """
    if rounds is None:
        rounds = current_app.config["PASSWORD_HASH_ROUNDS"]
    truncated = _truncate_password(plain_password)
    return bcrypt.using(rounds=rounds).hash(truncated)


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Verify a password against a hash, using the same truncation as hash_password."""
    truncated = _truncate_password(plain_password)
    return bcrypt.verify(truncated, password_hash)


def validate_password(password: str) -> tuple[bool, str | None]:
    """
    Basic server-side password validation.
    Returns (is_valid, error_message).
    """
    min_length = current_app.config["MIN_PASSWORD_LENGTH"]
    if len(password) < min_length:
        return False, f"Password must be at least {min_length} characters long"

    return True, None
