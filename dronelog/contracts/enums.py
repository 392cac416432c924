"""Enumerations shared across all drone flight log contracts."""

from enum import Enum


class FlightStatus(str, Enum):
    """Verdict returned by the flight logging service."""
    APPROVED = "APPROVED"
    RESTRICTED = "RESTRICTED"


class ViewState(str, Enum):
    """Screen the operator is looking at."""
    FORM = "FORM"
    SUCCESS = "SUCCESS"
    RESTRICTED = "RESTRICTED"


class VerificationOutcome(str, Enum):
    """Raw ``result`` values of the license verification service."""
    SUCCESS = "success"
    ERROR = "error"
    NOT_FOUND = "not_found"


class FailureKind(str, Enum):
    """Why a submission ended back on the form."""
    INVALID_LICENSE = "invalid_license"
    TRANSPORT_OR_CONTRACT = "transport_or_contract"
