"""Tests for SubmissionState, SubmissionForm, RestrictedZone and ServiceResult."""

import pytest
from pydantic import ValidationError

from dronelog.contracts.common import Coordinates
from dronelog.contracts.enums import FailureKind, ViewState
from dronelog.contracts.flight import FlightDetails, FlightLogResponse
from dronelog.contracts.result import ServiceResult
from dronelog.contracts.submission import SubmissionForm, SubmissionState
from dronelog.contracts.zone import RestrictedZone

DETAILS = FlightDetails(
    coords=Coordinates(lat=6.9271, lng=79.8612),
    start="2025-06-15 09:00",
    end="2025-06-15 10:00",
)


class TestSubmissionState:
    def test_default_is_form(self):
        state = SubmissionState()
        assert state.view == ViewState.FORM
        assert state.submitting is False

    def test_success_requires_result(self):
        with pytest.raises(ValidationError):
            SubmissionState(view=ViewState.SUCCESS)

    def test_restricted_requires_details(self):
        with pytest.raises(ValidationError):
            SubmissionState(
                view=ViewState.RESTRICTED, result=FlightLogResponse(status="RESTRICTED")
            )

    def test_form_rejects_stale_result(self):
        with pytest.raises(ValidationError):
            SubmissionState(result=FlightLogResponse(status="APPROVED"), details=DETAILS)

    def test_frozen(self):
        state = SubmissionState()
        with pytest.raises(ValidationError):
            state.submitting = True

    def test_wire_dump(self):
        state = SubmissionState(
            view=ViewState.SUCCESS,
            result=FlightLogResponse(status="APPROVED", warning_note="Note"),
            details=DETAILS,
        )
        data = state.to_wire()
        assert data["view"] == "SUCCESS"
        assert data["result"]["warningNote"] == "Note"
        assert data["details"]["coords"] == {"lat": 6.9271, "lng": 79.8612}


class TestSubmissionForm:
    def test_from_wire(self):
        form = SubmissionForm.from_wire({
            "license": "  SL-1234 ",
            "startTime": "09:00",
            "endTime": "10:00",
            "coords": {"lat": 6.9271, "lng": 79.8612},
        })
        assert form.license == "SL-1234"
        assert form.start_time == "09:00"
        assert form.coords == Coordinates(lat=6.9271, lng=79.8612)

    def test_blank_license(self):
        with pytest.raises(ValidationError):
            SubmissionForm.from_wire({
                "license": "   ",
                "startTime": "09:00",
                "endTime": "10:00",
                "coords": {"lat": 0, "lng": 0},
            })


class TestRestrictedZone:
    def test_zone(self):
        zone = RestrictedZone(
            lat=7.1808, lng=79.8841, radius=5000, name="Bandaranaike Airport", type="airport"
        )
        assert zone.to_wire()["name"] == "Bandaranaike Airport"

    def test_radius_positive(self):
        with pytest.raises(ValidationError):
            RestrictedZone(lat=0, lng=0, radius=0, name="Nowhere")


class TestServiceResult:
    def test_ok(self):
        result = ServiceResult.ok("data")
        assert result.success is True
        assert result.data == "data"
        assert result.error is None

    def test_fail(self):
        result = ServiceResult.fail(FailureKind.INVALID_LICENSE, "License expired")
        assert result.success is False
        assert result.error.code == FailureKind.INVALID_LICENSE
        assert result.error.message == "License expired"
