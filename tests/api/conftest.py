"""Shared fixtures for API tests."""

from __future__ import annotations

import httpx
import pytest

from dronelog.api.app import app
from dronelog.services.sessions import SessionRegistry
from tests.services.fake_services import (
    FakeFlightLogService,
    FakeLicenseService,
    make_orchestrator,
)


@pytest.fixture
def license_service():
    return FakeLicenseService()


@pytest.fixture
def flight_log_service():
    return FakeFlightLogService()


@pytest.fixture
def test_app(license_service, flight_log_service):
    """FastAPI app whose sessions talk to in-memory collaborators."""
    app.state.sessions = SessionRegistry(
        lambda: make_orchestrator(license_service, flight_log_service)
    )
    yield app
    del app.state.sessions


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
