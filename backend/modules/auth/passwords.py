"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic salting. The work factor
comes from ``Settings.bcrypt_rounds``.

bcrypt only reads the first 72 bytes of a password. Both functions cut the
encoded password there, so a longer password hashes and verifies the same
way instead of being rejected by the library.
"""

from typing import Optional

import bcrypt

from shared.config import get_settings

BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode()[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a password with bcrypt (auto-salted)."""
    rounds = rounds or get_settings().bcrypt_rounds
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode())
    except (ValueError, TypeError):
        return False
