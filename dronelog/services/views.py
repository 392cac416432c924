"""Display summaries for the two terminal screens.

Pure mapping from a completed ``SubmissionState`` to the rows shown to the
operator, including the fallback wording when the service omits a field.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dronelog.contracts.enums import ViewState
from dronelog.contracts.submission import SubmissionState

NO_SPECIAL_NOTES = "No special notes."
GENERAL_NOTES = "- Max altitude: 120m - Avoid wildlife zones - Maintain VLOS"
DEFAULT_RESTRICTED_HEADLINE = "Restricted Zone"
UNKNOWN_ZONE = "Unknown Zone"
DEFAULT_RESTRICTED_REASON = "Falls within a restricted airspace"
RESTRICTED_STATUS = "Flight Restricted – Not Approved"
RESTRICTED_WARNING = (
    "Flying here is illegal. Violations may lead to fines, drone seizure, or "
    "imprisonment under Sri Lanka’s aviation safety and anti-terrorism laws."
)


@dataclass
class SummaryRow:
    label: str
    value: str


@dataclass
class SubmissionSummary:
    """Headline plus label/value rows for a terminal screen."""

    view: ViewState
    title: str
    headline: str
    rows: list[SummaryRow] = field(default_factory=list)
    warning: str | None = None

    def as_dict(self) -> dict:
        return {
            "view": ViewState(self.view).value,
            "title": self.title,
            "headline": self.headline,
            "rows": [{"label": r.label, "value": r.value} for r in self.rows],
            "warning": self.warning,
        }


def flight_window_text(start: str, end: str) -> str:
    return f"{start} → {end}"


def summarize(state: SubmissionState) -> SubmissionSummary:
    """Build the summary for a SUCCESS or RESTRICTED state."""
    if state.view == ViewState.SUCCESS:
        return _success_summary(state)
    if state.view == ViewState.RESTRICTED:
        return _restricted_summary(state)
    raise ValueError(f"no summary for view {state.view}")


def _success_summary(state: SubmissionState) -> SubmissionSummary:
    details = state.details
    coords = details.coords
    return SubmissionSummary(
        view=ViewState.SUCCESS,
        title="Flight Logged Successfully",
        headline="Your drone flight has been recorded. You are cleared to take off.",
        rows=[
            SummaryRow("Coordinates", f"Lat: {coords.lat:.4f}, Long: {coords.lng:.4f}"),
            SummaryRow("Approved Flight Time", flight_window_text(details.start, details.end)),
            SummaryRow("MOD Special Notes", state.result.warning_note or NO_SPECIAL_NOTES),
            SummaryRow("General Notes", GENERAL_NOTES),
        ],
    )


def _restricted_summary(state: SubmissionState) -> SubmissionSummary:
    reason = state.result.reason
    coords = state.details.coords
    return SubmissionSummary(
        view=ViewState.RESTRICTED,
        title="Flight Not Approved",
        headline=(
            "Your requested flight location falls within a restricted airspace: "
            f"{reason or DEFAULT_RESTRICTED_HEADLINE}."
        ),
        rows=[
            SummaryRow("Status", RESTRICTED_STATUS),
            SummaryRow("Restricted Zone", reason or UNKNOWN_ZONE),
            SummaryRow("Reason", reason or DEFAULT_RESTRICTED_REASON),
            SummaryRow("Coordinates", f"{coords.lat:.4f}, {coords.lng:.4f}"),
        ],
        warning=RESTRICTED_WARNING,
    )
