# File: med_portal/core/config.py

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, field_validator

# Directory holding main.py; static pages live next to it
APP_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseModel):
    # env-derived defaults go through the validators too
    model_config = ConfigDict(validate_default=True)

    # Basic app info
    PROJECT_NAME: str = "Med Portal"
    VERSION: str = "0.1.0"

    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    backend_cors_origins: List[str] = os.getenv("BACKEND_CORS_ORIGINS", "")

    # Credential storage
    user_store_backend: Literal["file", "memory", "sql"] = os.getenv(
        "USER_STORE_BACKEND", "file"
    )
    users_file: Path = Path(os.getenv("USERS_FILE", "users.txt"))
    static_dir: Path = Path(os.getenv("STATIC_DIR", str(APP_ROOT / "static")))

    # Only used when user_store_backend == "sql"
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./users.db")

    # Password hashing
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
