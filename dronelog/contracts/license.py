"""License verification contract.

The verification service answers with a loose payload keyed on ``result``.
The core only consumes ``LicenseCheckResult``; everything else in the raw
payload is dropped when collapsing.
"""

from pydantic import ConfigDict, Field

from dronelog.contracts.common import WireModel
from dronelog.contracts.enums import VerificationOutcome


class LicenseCheckResult(WireModel):
    """Whether a license is valid, with an optional operator-facing message."""

    is_valid: bool = Field(..., alias="isValid")
    message: str | None = None


class LicenseVerificationResponse(WireModel):
    """Raw verification payload: ``{result: success|error|not_found, ...}``."""

    model_config = ConfigDict(extra="allow")

    result: VerificationOutcome
    message: str | None = None

    def to_check_result(self) -> LicenseCheckResult:
        if self.result == VerificationOutcome.SUCCESS:
            return LicenseCheckResult(is_valid=True)
        return LicenseCheckResult(is_valid=False, message=self.message or None)
