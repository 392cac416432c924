"""Tests for the license verification client with mocked HTTP responses."""

from __future__ import annotations

import httpx
import pytest

from dronelog.errors import ContractViolationError
from dronelog.services.license_client import LicenseClient

VERIFY_URL = "https://licenses.test/verify"


def _client(http: httpx.AsyncClient) -> LicenseClient:
    return LicenseClient(VERIFY_URL, http_client=http)


class TestLicenseClient:
    async def test_success_is_valid(self):
        transport = httpx.MockTransport(
            lambda req: httpx.Response(
                200, json={"result": "success", "holder": "A. Perera", "expires": "2026-01-01"}
            )
        )
        async with httpx.AsyncClient(transport=transport) as http:
            check = await _client(http).verify_license("SL-1234")
            assert check.is_valid is True
            assert check.message is None

    async def test_not_found_is_invalid(self):
        transport = httpx.MockTransport(
            lambda req: httpx.Response(200, json={"result": "not_found"})
        )
        async with httpx.AsyncClient(transport=transport) as http:
            check = await _client(http).verify_license("SL-0000")
            assert check.is_valid is False
            assert check.message is None

    async def test_error_carries_message(self):
        transport = httpx.MockTransport(
            lambda req: httpx.Response(200, json={"result": "error", "message": "License expired"})
        )
        async with httpx.AsyncClient(transport=transport) as http:
            check = await _client(http).verify_license("SL-1234")
            assert check.is_valid is False
            assert check.message == "License expired"

    async def test_license_sent_as_query_param(self):
        captured_request = None

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal captured_request
            captured_request = request
            return httpx.Response(200, json={"result": "success"})

        transport = httpx.MockTransport(handler)
        async with httpx.AsyncClient(transport=transport) as http:
            await _client(http).verify_license("SL-1234")

        assert captured_request is not None
        assert captured_request.method == "GET"
        assert captured_request.url.params["license"] == "SL-1234"

    async def test_http_error_raises(self):
        transport = httpx.MockTransport(lambda req: httpx.Response(503))
        async with httpx.AsyncClient(transport=transport) as http:
            with pytest.raises(httpx.HTTPStatusError):
                await _client(http).verify_license("SL-1234")

    async def test_unknown_result_is_contract_violation(self):
        transport = httpx.MockTransport(
            lambda req: httpx.Response(200, json={"result": "maybe"})
        )
        async with httpx.AsyncClient(transport=transport) as http:
            with pytest.raises(ContractViolationError):
                await _client(http).verify_license("SL-1234")

    async def test_non_json_is_contract_violation(self):
        transport = httpx.MockTransport(
            lambda req: httpx.Response(200, text="<html>oops</html>")
        )
        async with httpx.AsyncClient(transport=transport) as http:
            with pytest.raises(ContractViolationError):
                await _client(http).verify_license("SL-1234")

    async def test_list_payload_is_contract_violation(self):
        transport = httpx.MockTransport(lambda req: httpx.Response(200, json=[]))
        async with httpx.AsyncClient(transport=transport) as http:
            with pytest.raises(ContractViolationError):
                await _client(http).verify_license("SL-1234")
