# File: med_portal/api/routes_pages.py

from fastapi import APIRouter
from fastapi.responses import FileResponse

from med_portal.core.config import settings

router = APIRouter()


@router.get("/", summary="Landing page", include_in_schema=False)
def index():
    return FileResponse(settings.static_dir / "main.html")


@router.get("/healthz", summary="Liveness check")
def healthz():
    return {"status": "ok"}
