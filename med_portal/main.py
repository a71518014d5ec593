# med_portal/main.py

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from med_portal.core.config import settings
from med_portal.core.logging import setup_logging
from med_portal.api.api import api_router

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
    )

    # ---------- CORS ----------
    # Pages are served from the same origin; only needed for a separate frontend
    if settings.backend_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.backend_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # ---------- ROUTERS ----------
    app.include_router(api_router)

    # ---------- STATIC FILES ----------
    # main.html, login.html, register.html. Mounted last so the routes above win.
    app.mount("/", StaticFiles(directory=settings.static_dir), name="static")

    return app


app = create_application()


def run() -> None:
    logger.info("Running at http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
