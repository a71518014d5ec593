# File: med_portal/services/auth_service.py

"""
Registration and login against a credential store.

Both calls reload the whole store, so there is no state kept between
requests. Failures are raised as AuthError subclasses; anything else
(I/O, bcrypt) propagates untouched.
"""

import logging
from typing import Optional

from med_portal.core.errors import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from med_portal.core.security import hash_password, verify_password
from med_portal.services.user_store import UserStore

logger = logging.getLogger(__name__)

REGISTER_OK = "Registered successfully."
LOGIN_OK = "Login successful"


def register(
    store: UserStore,
    *,
    name: Optional[str],
    email: Optional[str],
    password: Optional[str],
) -> str:
    if not name or not email or not password:
        raise ValidationError("Name, email, password required.")

    users = store.load()
    if email.lower() in users:
        raise ConflictError("Email already registered.")

    store.append(email, name, hash_password(password))
    logger.info("Registered %s", email.lower())
    return REGISTER_OK


def login(
    store: UserStore,
    *,
    email: Optional[str],
    password: Optional[str],
) -> str:
    """
    Check a password and return the user's display name.
    """
    if not email or not password:
        raise ValidationError("Email and password required.")

    users = store.load()
    entry = users.get(email.lower())
    if entry is None:
        raise NotFoundError("Wrong credentials: email not found.")

    if not verify_password(password, entry.password_hash):
        raise InvalidCredentialsError("Wrong credentials: incorrect password.")

    return entry.name
