"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and a fixed work factor.
"""

from __future__ import annotations

import bcrypt

from utils.errors import HashingError, PasswordMismatchError, PasswordTooLongError

BCRYPT_ROUNDS = 10
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a password with bcrypt (auto-salted, work factor 10)."""
    raw = password.encode()
    if len(raw) > MAX_PASSWORD_BYTES:
        raise PasswordTooLongError(detail=f"password is {len(raw)} bytes")
    try:
        return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode()
    except (ValueError, TypeError) as exc:
        raise HashingError(detail=str(exc)) from exc


def verify_password(password_hash: str, password: str) -> None:
    """
    Constant-time comparison against a bcrypt hash.

    Wrong password, corrupt hash and library errors all raise
    ``PasswordMismatchError`` so callers cannot tell them apart.
    """
    try:
        matches = bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, TypeError) as exc:
        raise PasswordMismatchError(detail=f"unusable hash: {exc}") from exc
    if not matches:
        raise PasswordMismatchError(detail="password mismatch")
