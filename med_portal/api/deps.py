# File: med_portal/api/deps.py

import json
from functools import lru_cache
from typing import Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException

from med_portal.core.config import get_settings
from med_portal.core.errors import ValidationError
from med_portal.services.user_store import UserStore, build_user_store

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

PayloadT = TypeVar("PayloadT", bound=BaseModel)


@lru_cache
def get_user_store() -> UserStore:
    """
    FastAPI dependency that provides the configured credential store.

    Tests swap it out with:
        app.dependency_overrides[get_user_store] = lambda: store
    """
    return build_user_store(get_settings())


def is_json_type(content_type: str) -> bool:
    """application/json, or an application/*+json type like express.json()."""
    media_type = content_type.split(";")[0].strip()
    if media_type == "application/json":
        return True
    return media_type.startswith("application/") and media_type.endswith("+json")


async def read_payload(request: Request, schema: Type[PayloadT]) -> PayloadT:
    """
    Read a JSON or form body into ``schema``.

    Any other content type counts as an empty body, so the service reports
    the missing fields. An unreadable body or non-string values are a 400.
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_TYPES):
        try:
            form = await request.form()
        except (HTTPException, MultiPartException):
            # Starlette reports a bad form body (e.g. no boundary) as HTTP 400
            raise ValidationError("Invalid request body.")
        data = {k: v for k, v in form.items() if isinstance(v, str)}
    elif is_json_type(content_type):
        raw = await request.body()
        try:
            data = json.loads(raw) if raw.strip() else {}
        except ValueError:
            raise ValidationError("Invalid request body.")
    else:
        data = {}

    if not isinstance(data, dict):
        raise ValidationError("Invalid request body.")

    try:
        return schema.model_validate(data)
    except SchemaError:
        raise ValidationError("Invalid request body.")
