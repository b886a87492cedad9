"""Derivation of the exportable calendar dates from a shift set."""

from typing import Iterable

from ukgroster.domain.models import Shift
from ukgroster.domain.temporal import local_ymd, parse_instant

DATES_KEY_SEPARATOR = "|"


class DateBucketer:
    """Collects the distinct local dates touched by shift starts and ends.

    Attributes:
        max_dates: Maximum number of dates returned, earliest first.
    """

    def __init__(self, max_dates: int = 7):
        self.max_dates = max_dates

    def bucket(self, shifts: Iterable[Shift]) -> list[str]:
        """Get sorted YYYY-MM-DD dates, truncated to max_dates.

        Unparseable start or end values are ignored individually.
        """
        dates = set()
        for shift in shifts:
            for raw in (shift.start, shift.end):
                instant = parse_instant(raw)
                if instant is not None:
                    dates.add(local_ymd(instant))
        return sorted(dates)[: self.max_dates]


def dates_key(dates: Iterable[str]) -> str:
    """Comparable key for a published date list."""
    return DATES_KEY_SEPARATOR.join(dates)
