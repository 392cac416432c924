"""Flight logging / geofence evaluation service client."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from dronelog.contracts.flight import FlightLogResponse, FlightRequest
from dronelog.errors import ContractViolationError

logger = logging.getLogger(__name__)

SERVICE_NAME = "flight logging"


class FlightLogClient:
    """Async HTTP client that records a flight request and returns the verdict."""

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 15.0,
    ):
        self._url = base_url
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def log_flight(self, request: FlightRequest) -> FlightLogResponse:
        """Post a flight request; the service answers APPROVED or RESTRICTED."""
        resp = await self._client.post(self._url, json=request.to_wire())
        resp.raise_for_status()
        try:
            data = resp.json()
        except ValueError as exc:
            raise ContractViolationError(SERVICE_NAME, "response is not JSON") from exc
        response = _parse_log_response(data)
        logger.info(
            "Flight at %s logged: %s", request.coordinates, response.status
        )
        return response


def _parse_log_response(raw) -> FlightLogResponse:
    if not isinstance(raw, dict):
        raise ContractViolationError(SERVICE_NAME, f"expected an object, got {type(raw).__name__}")
    try:
        return FlightLogResponse.from_wire(raw)
    except ValidationError as exc:
        raise ContractViolationError(SERVICE_NAME, str(exc)) from exc
