"""Canonicalization of raw form input into the flight logging contract.

The flight window is built by prefixing each ``HH:MM`` with the operator's
local calendar date. The date is passed in explicitly; callers decide which
clock it comes from.
"""

from __future__ import annotations

import re
from datetime import date

from dronelog.contracts.common import Coordinates
from dronelog.contracts.flight import FlightRequest

TIME_OF_DAY = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def local_date_string(day: date) -> str:
    """``YYYY-MM-DD`` for a calendar date."""
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def _check_time_of_day(value: str) -> str:
    if not TIME_OF_DAY.match(value):
        raise ValueError(f"expected 'HH:MM' time of day, got {value!r}")
    return value


def build_flight_window(day: date, start_time: str, end_time: str) -> tuple[str, str]:
    """Return ``(from, to)`` strings for a same-day window.

    An end time earlier than the start time is kept as-is: the window is not
    rolled over to the next day.
    """
    date_str = local_date_string(day)
    start = f"{date_str} {_check_time_of_day(start_time)}"
    end = f"{date_str} {_check_time_of_day(end_time)}"
    return start, end


def is_overnight(start_time: str, end_time: str) -> bool:
    """True when ``end_time`` falls before ``start_time`` on the clock."""
    return end_time < start_time


def build_flight_request(
    license: str, coords: Coordinates, start: str, end: str
) -> FlightRequest:
    """Assemble the payload posted to the flight logging service."""
    return FlightRequest(
        license=license,
        lat=coords.lat,
        lon=coords.lng,
        start=start,
        end=end,
        coordinates=coords.as_text(),
    )
