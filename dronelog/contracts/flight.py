"""FlightRequest and FlightLogResponse — the flight logging service contract.

A ``FlightRequest`` is posted to the logging service, which records it and
evaluates it against restricted zones. The service answers with a
``FlightLogResponse`` verdict.
"""

import re

from pydantic import Field, field_validator, model_validator

from dronelog.contracts.common import Coordinates, WireModel
from dronelog.contracts.enums import FlightStatus

WINDOW_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$")


class FlightRequest(WireModel):
    """A request to fly at one point during a local-time window.

    ``lat``/``lon`` and ``coordinates`` describe the same point twice: the
    string form is a convenience for the receiving service and must agree
    with the numeric fields.
    """

    license: str = Field(..., min_length=1)
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)
    start: str = Field(..., alias="from", description="YYYY-MM-DD HH:MM, local time")
    end: str = Field(..., alias="to", description="YYYY-MM-DD HH:MM, local time")
    coordinates: str = Field(..., description='"lat,lng" encoding of lat/lon')

    @field_validator("start", "end")
    @classmethod
    def check_window_format(cls, v: str) -> str:
        if not WINDOW_PATTERN.match(v):
            raise ValueError(f"expected 'YYYY-MM-DD HH:MM', got {v!r}")
        return v

    @model_validator(mode="after")
    def check_coordinates_agree(self) -> "FlightRequest":
        expected = f"{self.lat},{self.lon}"
        if self.coordinates != expected:
            raise ValueError(
                f"coordinates {self.coordinates!r} disagree with lat/lon {expected!r}"
            )
        return self


class FlightLogResponse(WireModel):
    """Verdict from the flight logging service.

    ``reason`` is only meaningful for ``RESTRICTED``; ``warning_note`` only
    for ``APPROVED``.
    """

    status: FlightStatus
    reason: str | None = None
    warning_note: str | None = Field(default=None, alias="warningNote")

    @property
    def is_restricted(self) -> bool:
        return self.status == FlightStatus.RESTRICTED


class FlightDetails(WireModel):
    """Resolved details of a completed submission."""

    coords: Coordinates
    start: str
    end: str
