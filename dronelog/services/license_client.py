"""License verification service client."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from dronelog.contracts.license import LicenseCheckResult, LicenseVerificationResponse
from dronelog.errors import ContractViolationError

logger = logging.getLogger(__name__)

SERVICE_NAME = "license verification"


class LicenseClient:
    """Async HTTP client for license checks."""

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 15.0,
    ):
        self._url = base_url
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def verify_license(self, license: str) -> LicenseCheckResult:
        """Ask the verification service whether ``license`` is currently valid."""
        resp = await self._client.get(self._url, params={"license": license})
        resp.raise_for_status()
        try:
            data = resp.json()
        except ValueError as exc:
            raise ContractViolationError(SERVICE_NAME, "response is not JSON") from exc
        return _parse_verification(data)


def _parse_verification(raw) -> LicenseCheckResult:
    """Collapse a raw verification payload into ``LicenseCheckResult``."""
    if not isinstance(raw, dict):
        raise ContractViolationError(SERVICE_NAME, f"expected an object, got {type(raw).__name__}")
    try:
        parsed = LicenseVerificationResponse.from_wire(raw)
    except ValidationError as exc:
        raise ContractViolationError(SERVICE_NAME, str(exc)) from exc
    logger.debug("License verification result: %s", parsed.result)
    return parsed.to_check_result()
