"""CLI entry point: submit one flight request and print the outcome.

Usage:
    python -m dronelog.cli --license SL-1234 --start 09:00 --end 10:00 \
        --lat 6.9271 --lng 79.8612

Exit codes: 0 approved, 2 restricted, 1 back on the form with an error.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

import httpx
from pydantic import ValidationError

from dronelog.config import get_settings
from dronelog.contracts.common import Coordinates
from dronelog.contracts.enums import ViewState
from dronelog.contracts.submission import SubmissionState
from dronelog.services.flight_log_client import FlightLogClient
from dronelog.services.license_client import LicenseClient
from dronelog.services.orchestrator import SubmissionOrchestrator
from dronelog.services.views import summarize

logger = logging.getLogger(__name__)

EXIT_CODES = {
    ViewState.SUCCESS: 0,
    ViewState.FORM: 1,
    ViewState.RESTRICTED: 2,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Submit a drone flight request")
    parser.add_argument("--license", required=True, help="Operator license number")
    parser.add_argument("--start", required=True, help="Start time of day, HH:MM")
    parser.add_argument("--end", required=True, help="End time of day, HH:MM")
    parser.add_argument("--lat", type=float, required=True, help="Latitude, WGS84 degrees")
    parser.add_argument("--lng", type=float, required=True, help="Longitude, WGS84 degrees")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def render(state: SubmissionState) -> str:
    """Plain-text rendering of the final state."""
    if state.view == ViewState.FORM:
        return f"Error: {state.error}" if state.error else "No submission made."
    summary = summarize(state)
    lines = [summary.title, summary.headline, ""]
    width = max(len(r.label) for r in summary.rows)
    lines.extend(f"{r.label.ljust(width)}  {r.value}" for r in summary.rows)
    if summary.warning:
        lines.extend(["", f"WARNING: {summary.warning}"])
    return "\n".join(lines)


async def run(args: argparse.Namespace, coords: Coordinates) -> SubmissionState:
    settings = get_settings()
    async with httpx.AsyncClient(timeout=settings.http_timeout) as http:
        orchestrator = SubmissionOrchestrator(
            LicenseClient(settings.license_api_url, http_client=http).verify_license,
            FlightLogClient(settings.flight_log_api_url, http_client=http).log_flight,
        )
        await orchestrator.submit(args.license, args.start, args.end, coords)
        return orchestrator.state


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        coords = Coordinates(lat=args.lat, lng=args.lng)
    except ValidationError as exc:
        parser.error(f"invalid coordinates: {exc}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info("Submitting flight request for license %s", args.license)
    state = asyncio.run(run(args, coords))
    print(render(state))
    return EXIT_CODES[ViewState(state.view)]


if __name__ == "__main__":
    sys.exit(main())
