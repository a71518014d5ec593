# File: med_portal/api/routes_auth.py

"""
Register / login endpoints.

Both answer with ``{"ok": bool, "msg": str}``; a successful login also
carries the stored ``name``. There are no sessions or tokens.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from med_portal.api.deps import get_user_store, read_payload
from med_portal.core.errors import AuthError
from med_portal.schemas.user import AuthReply, LoginRequest, RegisterRequest
from med_portal.services import auth_service
from med_portal.services.user_store import UserStore

logger = logging.getLogger(__name__)

router = APIRouter()

SERVER_ERROR = "Server error."


def reply(status_code: int, msg: str, *, name: Optional[str] = None) -> JSONResponse:
    body = AuthReply(ok=status_code == status.HTTP_200_OK, msg=msg, name=name)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post("/register", response_model=AuthReply, summary="Register a new user")
async def register(request: Request, store: UserStore = Depends(get_user_store)):
    try:
        payload = await read_payload(request, RegisterRequest)
        # bcrypt is slow on purpose; keep it off the event loop
        msg = await run_in_threadpool(
            auth_service.register,
            store,
            name=payload.name,
            email=payload.email,
            password=payload.password,
        )
    except AuthError as exc:
        logger.info("Register rejected (%s): %s", exc.status_code, exc.message)
        return reply(exc.status_code, exc.message)
    except Exception:
        logger.exception("REGISTER ERROR")
        return reply(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR)

    return reply(status.HTTP_200_OK, msg)


@router.post("/login", response_model=AuthReply, summary="Check email and password")
async def login(request: Request, store: UserStore = Depends(get_user_store)):
    try:
        payload = await read_payload(request, LoginRequest)
        name = await run_in_threadpool(
            auth_service.login,
            store,
            email=payload.email,
            password=payload.password,
        )
    except AuthError as exc:
        logger.info("Login rejected (%s): %s", exc.status_code, exc.message)
        return reply(exc.status_code, exc.message)
    except Exception:
        logger.exception("LOGIN ERROR")
        return reply(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR)

    return reply(status.HTTP_200_OK, auth_service.LOGIN_OK, name=name)
