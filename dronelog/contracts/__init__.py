"""Drone flight log data contracts — Pydantic v2 models.

Data authority
--------------

**License verification service** (external, read-only):
- ``LicenseVerificationResponse`` — raw payload, collapsed to ``LicenseCheckResult``

**Flight logging service** (external, records and evaluates requests):
- ``FlightRequest`` — posted by the submission workflow
- ``FlightLogResponse`` — APPROVED / RESTRICTED verdict
- ``RestrictedZone`` — how the verdict is decided; never handled locally

Calculated (never persisted)
----------------------------
- ``SubmissionState`` — view state, in-flight flag, surfaced error, result
- ``FlightDetails`` — coordinates and resolved window of a completed submission
"""

from dronelog.contracts.enums import (
    FailureKind,
    FlightStatus,
    VerificationOutcome,
    ViewState,
)
from dronelog.contracts.common import Coordinates, WireModel
from dronelog.contracts.result import ServiceError, ServiceResult
from dronelog.contracts.flight import FlightDetails, FlightLogResponse, FlightRequest
from dronelog.contracts.license import LicenseCheckResult, LicenseVerificationResponse
from dronelog.contracts.zone import RestrictedZone
from dronelog.contracts.submission import SubmissionForm, SubmissionState

__all__ = [
    # Enums
    "FailureKind",
    "FlightStatus",
    "VerificationOutcome",
    "ViewState",
    # Common
    "Coordinates",
    "WireModel",
    # Result
    "ServiceError",
    "ServiceResult",
    # Domain models
    "FlightDetails",
    "FlightLogResponse",
    "FlightRequest",
    "LicenseCheckResult",
    "LicenseVerificationResponse",
    "RestrictedZone",
    "SubmissionForm",
    "SubmissionState",
]
