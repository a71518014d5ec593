# File: med_portal/core/errors.py

"""
Errors raised by the auth service.

Each carries the HTTP status the route layer answers with and the message
shown to the client.
"""

from fastapi import status


class AuthError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AuthError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AuthError):
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(AuthError):
    """Unknown email. Reported as 401 so login failures share a status."""

    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidCredentialsError(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
