# File: med_portal/core/security.py

"""
Password hashing helpers.

Hashes are standard ``$2b$`` bcrypt strings, so files written by other
bcrypt implementations verify here too.
"""

import bcrypt

from med_portal.core.config import settings

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int | None = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Compare a plain password with a stored hash.

    A malformed hash raises ValueError from bcrypt; callers treat that as a
    server error, not a wrong password.
    """
    return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
