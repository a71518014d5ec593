from fastapi import APIRouter

from med_portal.api.routes_auth import router as auth_router
from med_portal.api.routes_pages import router as pages_router


api_router = APIRouter()

api_router.include_router(pages_router, tags=["pages"])
api_router.include_router(auth_router, tags=["auth"])
