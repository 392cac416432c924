"""In-memory stand-ins for the license verification and flight logging services.

Each fake records every call and answers from a scripted response; a response
that is an exception instance is raised instead of returned.
"""

from __future__ import annotations

import asyncio
from datetime import date
from typing import Any

from dronelog.contracts.flight import FlightLogResponse, FlightRequest
from dronelog.contracts.license import LicenseCheckResult
from dronelog.services.orchestrator import SubmissionOrchestrator

FIXED_TODAY = date(2025, 6, 15)


class FakeLicenseService:
    def __init__(self, response: Any = None):
        self.response = response if response is not None else LicenseCheckResult(is_valid=True)
        self.calls: list[str] = []

    async def verify_license(self, license: str) -> LicenseCheckResult:
        self.calls.append(license)
        if isinstance(self.response, BaseException):
            raise self.response
        return self.response


class FakeFlightLogService:
    def __init__(self, response: Any = None):
        self.response = (
            response if response is not None else FlightLogResponse(status="APPROVED")
        )
        self.calls: list[FlightRequest] = []
        self.gate: asyncio.Event | None = None

    async def log_flight(self, request: FlightRequest) -> FlightLogResponse:
        self.calls.append(request)
        if self.gate is not None:
            await self.gate.wait()
        if isinstance(self.response, BaseException):
            raise self.response
        return self.response


def make_orchestrator(
    license_service: FakeLicenseService,
    flight_log_service: FakeFlightLogService,
    today: date = FIXED_TODAY,
) -> SubmissionOrchestrator:
    return SubmissionOrchestrator(
        license_service.verify_license,
        flight_log_service.log_flight,
        today=lambda: today,
    )
