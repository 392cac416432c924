"""RestrictedZone — how the logging service decides a verdict.

Informational only: the submission workflow never builds or inspects zones,
it receives the verdict in ``FlightLogResponse``.
"""

from pydantic import Field

from dronelog.contracts.common import WireModel


class RestrictedZone(WireModel):
    """Named circular no-fly area."""

    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)
    radius: float = Field(..., gt=0, description="Radius in meters")
    name: str = Field(..., min_length=1)
    type: str | None = None
