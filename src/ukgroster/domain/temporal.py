"""Temporal parsing and formatting helpers.

Raw start/end values arrive as ISO strings, free-form calendar strings or
epoch milliseconds (as numbers or numeric strings). Every helper here works
in the observer's local time zone and returns naive local datetimes.
"""

import math
import re
from datetime import date, datetime
from typing import Optional

from dateutil import parser as date_parser

from ukgroster.exceptions import InvalidDateError

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_NUMERIC_RE = re.compile(r"^\s*[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?\s*$")
_YMD_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

# Two unrelated fill-in dates; a calendar string that names a full date
# parses to the same day under both.
_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2004, 2, 2)


def _to_local(value: datetime) -> datetime:
    """Drop tzinfo, converting aware datetimes to local wall time first."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def _from_epoch_millis(millis: float) -> Optional[datetime]:
    if not math.isfinite(millis):
        return None
    try:
        return datetime.fromtimestamp(millis / 1000)
    except (OverflowError, OSError, ValueError):
        return None


def _parse_calendar_text(text: str) -> datetime:
    """Parse free-form calendar text that names a year, month and day.

    Raises:
        ValueError: If the text is not a date, or leaves any date part to
            be filled in (e.g. "10:00", "Monday", "Aug").
    """
    first = date_parser.parse(text, default=_DEFAULT_A)
    second = date_parser.parse(text, default=_DEFAULT_B)
    if first.date() != second.date():
        raise ValueError(f"Incomplete date: {text!r}")
    return first


def parse_instant(value: object) -> Optional[datetime]:
    """Parse a raw start/end value to a local instant.

    Order of attempts:
    1. Numbers (not booleans) are epoch milliseconds.
    2. Strings are parsed as ISO-8601, then (unless purely numeric) as
       general calendar text naming a full date.
    3. Strings that fail both are read as a number of epoch milliseconds.

    Returns:
        Naive local datetime, or None if the value is unparseable.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _from_epoch_millis(float(value))
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    numeric = bool(_NUMERIC_RE.match(text))
    parsers = [date_parser.isoparse]
    if not numeric:
        parsers.append(_parse_calendar_text)
    for parse in parsers:
        try:
            return _to_local(parse(text))
        except (ValueError, OverflowError, OSError):
            continue

    if numeric:
        return _from_epoch_millis(float(text))
    return None


def local_ymd(value: datetime) -> str:
    """Local calendar date as YYYY-MM-DD."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def clock_hm(value: datetime) -> str:
    """Local 24-hour clock time as HH:MM."""
    return f"{value.hour:02d}:{value.minute:02d}"


def parse_ymd(text: str) -> date:
    """Parse a chosen export date.

    Raises:
        InvalidDateError: If text is not a valid YYYY-MM-DD date.
    """
    match = _YMD_RE.match(text.strip()) if isinstance(text, str) else None
    if match is None:
        raise InvalidDateError(text)
    try:
        return date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except ValueError:
        raise InvalidDateError(text)


def format_day_label(day: date) -> str:
    """Format a date as "<Weekday> DD/MM/YYYY", e.g. "Monday 11/08/2025"."""
    weekday = WEEKDAY_NAMES[day.weekday()]
    return f"{weekday} {day.day:02d}/{day.month:02d}/{day.year:04d}"
