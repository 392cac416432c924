"""Submission workflow: verify the license, then log the flight.

The orchestrator owns a single ``SubmissionState`` and replaces it on every
transition:

    FORM --submit--> SUBMITTING --license invalid--> FORM (service message)
                                --APPROVED--------> SUCCESS
                                --RESTRICTED------> RESTRICTED
                                --any failure-----> FORM (generic message)
    any --reset--> FORM

Collaborator calls are wrapped into ``ServiceResult`` values so the two
failure kinds stay distinct up to the point where they are surfaced.
Failures never escape ``submit()``.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Awaitable, Callable

from pydantic import ValidationError

from dronelog.contracts.common import Coordinates
from dronelog.contracts.enums import FailureKind, ViewState
from dronelog.contracts.flight import FlightDetails, FlightLogResponse, FlightRequest
from dronelog.contracts.license import LicenseCheckResult
from dronelog.contracts.result import ServiceResult
from dronelog.contracts.submission import SubmissionState
from dronelog.services.normalize import (
    build_flight_request,
    build_flight_window,
    is_overnight,
)

logger = logging.getLogger(__name__)

INVALID_LICENSE_MESSAGE = "Invalid License Number. Please check and try again."
GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again."

LicenseVerifier = Callable[[str], Awaitable[LicenseCheckResult | dict]]
FlightLogger = Callable[[FlightRequest], Awaitable[FlightLogResponse | dict]]


class SubmissionOrchestrator:
    """Drives one operator's verify-then-log cycle and owns its view state.

    Args:
        verify_license: async callable returning a ``LicenseCheckResult`` or its
            wire shape ``{isValid, message}``
        log_flight: async callable returning a ``FlightLogResponse`` or its wire
            shape ``{status, reason, warningNote}``
        today: returns the operator's local calendar date; read once per submit
    """

    def __init__(
        self,
        verify_license: LicenseVerifier,
        log_flight: FlightLogger,
        today: Callable[[], date] = date.today,
    ):
        self._verify_license = verify_license
        self._log_flight = log_flight
        self._today = today
        self._state = SubmissionState()

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def is_submitting(self) -> bool:
        return self._state.submitting

    def reset(self) -> None:
        """Back to the form, dropping any result, details and error."""
        self._transition(SubmissionState())

    def clear_error(self) -> None:
        """Dismiss the surfaced error without touching anything else."""
        if self._state.error is not None:
            self._transition(self._state.model_copy(update={"error": None}))

    async def submit(
        self,
        license: str,
        start_time: str,
        end_time: str,
        coords: Coordinates,
    ) -> None:
        """Run one submission; the outcome is read back from ``state``.

        A call made while another submission is in flight is ignored.
        """
        if self._state.submitting:
            logger.warning("Submission already in flight; ignoring submit for %s", license)
            return

        # Entering SUBMITTING always starts from a clean form.
        self._transition(SubmissionState(submitting=True))
        try:
            outcome = await self._run(license, start_time, end_time, coords)
            if outcome.success:
                response, details = outcome.data
                view = ViewState.RESTRICTED if response.is_restricted else ViewState.SUCCESS
                self._transition(SubmissionState(view=view, result=response, details=details))
            else:
                self._transition(SubmissionState(error=outcome.error.message))
        finally:
            if self._state.submitting:
                self._transition(self._state.model_copy(update={"submitting": False}))

    async def _run(
        self,
        license: str,
        start_time: str,
        end_time: str,
        coords: Coordinates,
    ) -> ServiceResult[tuple[FlightLogResponse, FlightDetails]]:
        try:
            start, end = build_flight_window(self._today(), start_time, end_time)
        except ValueError:
            logger.exception("Could not build flight window from %r-%r", start_time, end_time)
            return ServiceResult.fail(FailureKind.TRANSPORT_OR_CONTRACT, GENERIC_ERROR_MESSAGE)
        if is_overnight(start_time, end_time):
            logger.warning("Flight window ends before it starts: %s -> %s", start, end)

        verification = await self._verify(license)
        if not verification.success:
            return verification

        try:
            request = build_flight_request(license, coords, start, end)
        except ValueError:
            logger.exception("Could not build flight request for %s", license)
            return ServiceResult.fail(FailureKind.TRANSPORT_OR_CONTRACT, GENERIC_ERROR_MESSAGE)

        logged = await self._log(request)
        if not logged.success:
            return logged

        details = FlightDetails(coords=coords, start=start, end=end)
        return ServiceResult.ok((logged.data, details))

    async def _verify(self, license: str) -> ServiceResult[LicenseCheckResult]:
        try:
            raw = await self._verify_license(license)
        except Exception:
            logger.exception("License verification failed for %s", license)
            return ServiceResult.fail(FailureKind.TRANSPORT_OR_CONTRACT, GENERIC_ERROR_MESSAGE)

        try:
            check = LicenseCheckResult.model_validate(raw)
        except ValidationError:
            logger.exception("License verification returned %r", raw)
            return ServiceResult.fail(FailureKind.TRANSPORT_OR_CONTRACT, GENERIC_ERROR_MESSAGE)
        if not check.is_valid:
            logger.info("License %s rejected: %s", license, check.message)
            return ServiceResult.fail(
                FailureKind.INVALID_LICENSE, check.message or INVALID_LICENSE_MESSAGE
            )
        return ServiceResult.ok(check)

    async def _log(self, request: FlightRequest) -> ServiceResult[FlightLogResponse]:
        try:
            raw = await self._log_flight(request)
        except Exception:
            logger.exception("Flight logging failed for %s", request.license)
            return ServiceResult.fail(FailureKind.TRANSPORT_OR_CONTRACT, GENERIC_ERROR_MESSAGE)

        try:
            response = FlightLogResponse.model_validate(raw)
        except ValidationError:
            logger.exception("Flight logging returned %r", raw)
            return ServiceResult.fail(FailureKind.TRANSPORT_OR_CONTRACT, GENERIC_ERROR_MESSAGE)
        return ServiceResult.ok(response)

    def _transition(self, new_state: SubmissionState) -> None:
        logger.debug(
            "Submission state %s%s -> %s%s",
            self._state.view,
            " (submitting)" if self._state.submitting else "",
            new_state.view,
            " (submitting)" if new_state.submitting else "",
        )
        self._state = new_state
