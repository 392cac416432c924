"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dronelog.api.routes import submissions
from dronelog.config import get_settings
from dronelog.services.flight_log_client import FlightLogClient
from dronelog.services.license_client import LicenseClient
from dronelog.services.orchestrator import SubmissionOrchestrator
from dronelog.services.sessions import SessionRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open one shared HTTP client for both collaborators."""
    settings = get_settings()
    http_client = httpx.AsyncClient(timeout=settings.http_timeout)
    license_client = LicenseClient(settings.license_api_url, http_client=http_client)
    flight_log_client = FlightLogClient(settings.flight_log_api_url, http_client=http_client)

    def new_orchestrator() -> SubmissionOrchestrator:
        return SubmissionOrchestrator(
            license_client.verify_license, flight_log_client.log_flight
        )

    app.state.sessions = SessionRegistry(
        new_orchestrator, max_sessions=settings.max_sessions
    )
    logger.info(
        "License verification at %s, flight logging at %s (timeout %.1fs, %d sessions max)",
        settings.license_api_url,
        settings.flight_log_api_url,
        settings.http_timeout,
        settings.max_sessions,
    )
    try:
        yield
    finally:
        await http_client.aclose()


app = FastAPI(
    title="Drone Flight Log API",
    description="Drone flight request submission and restricted-zone verdicts",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(submissions.router, prefix="/api")


@app.get("/api/health")
async def health():
    sessions = getattr(app.state, "sessions", None)
    return {
        "status": "ok",
        "sessions": len(sessions) if sessions is not None else 0,
    }
