"""SubmissionState — the observable state of one operator's submission cycle.

States are immutable snapshots; the orchestrator replaces the whole value on
every transition so the view, in-flight flag and result never drift apart.
"""

from pydantic import ConfigDict, Field, field_validator, model_validator

from dronelog.contracts.common import Coordinates, WireModel
from dronelog.contracts.enums import ViewState
from dronelog.contracts.flight import FlightDetails, FlightLogResponse


class SubmissionState(WireModel):
    """Snapshot of view state, in-flight flag, surfaced error and result."""

    model_config = ConfigDict(frozen=True)

    view: ViewState = ViewState.FORM
    submitting: bool = False
    error: str | None = None
    result: FlightLogResponse | None = None
    details: FlightDetails | None = None

    @model_validator(mode="after")
    def check_terminal_has_result(self) -> "SubmissionState":
        if self.view != ViewState.FORM and (self.result is None or self.details is None):
            raise ValueError(f"{self.view} requires a flight log result and details")
        if self.view == ViewState.FORM and (self.result is not None or self.details is not None):
            raise ValueError("FORM must not carry a stale result")
        return self


class SubmissionForm(WireModel):
    """Raw form input as posted by the presentation layer."""

    license: str = Field(..., min_length=1)
    start_time: str = Field(..., alias="startTime", description="HH:MM, local time")
    end_time: str = Field(..., alias="endTime", description="HH:MM, local time")
    coords: Coordinates

    @field_validator("license", mode="before")
    @classmethod
    def strip_license(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v
