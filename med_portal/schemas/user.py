# File: med_portal/schemas/user.py

from typing import Optional

from pydantic import BaseModel


# -----------------------------
# Stored credentials
# -----------------------------

class UserRecord(BaseModel):
    email: str
    name: str
    password_hash: str


# -----------------------------
# Request / response bodies
# -----------------------------

class LoginRequest(BaseModel):
    # Optional so a missing field reaches the service and becomes a 400
    email: Optional[str] = None
    password: Optional[str] = None


class RegisterRequest(LoginRequest):
    name: Optional[str] = None


class AuthReply(BaseModel):
    ok: bool
    msg: str
    name: Optional[str] = None
