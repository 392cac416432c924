"""Runtime configuration read from the environment.

Values may come from a ``.env`` file at the project root (loaded with
python-dotenv) or from the process environment.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"

DEFAULT_LICENSE_API_URL = "http://localhost:8000/verify-license"
DEFAULT_FLIGHT_LOG_API_URL = "http://localhost:8000/log-flight"
DEFAULT_HTTP_TIMEOUT = 15.0
DEFAULT_CORS_ORIGINS = "http://localhost:5173"
DEFAULT_MAX_SESSIONS = 1000


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    license_api_url: str = DEFAULT_LICENSE_API_URL
    flight_log_api_url: str = DEFAULT_FLIGHT_LOG_API_URL
    http_timeout: float = Field(default=DEFAULT_HTTP_TIMEOUT, gt=0)
    cors_origins: list[str] = Field(default_factory=lambda: [DEFAULT_CORS_ORIGINS])
    max_sessions: int = Field(default=DEFAULT_MAX_SESSIONS, ge=1)


def load_settings() -> Settings:
    """Build settings from the current environment (``.env`` does not override)."""
    if ENV_PATH.exists():
        load_dotenv(ENV_PATH, override=False)

    origins = os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return Settings(
        license_api_url=os.environ.get("DRONELOG_LICENSE_API_URL", DEFAULT_LICENSE_API_URL),
        flight_log_api_url=os.environ.get(
            "DRONELOG_FLIGHT_LOG_API_URL", DEFAULT_FLIGHT_LOG_API_URL
        ),
        http_timeout=float(os.environ.get("DRONELOG_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        max_sessions=int(os.environ.get("DRONELOG_MAX_SESSIONS", DEFAULT_MAX_SESSIONS)),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide cached settings."""
    return load_settings()
