"""Exceptions raised by the roster pipeline."""

from datetime import date


class RosterError(Exception):
    """Base class for roster errors."""


class InvalidDateError(RosterError, ValueError):
    """A chosen export date is not a valid YYYY-MM-DD date."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid date {value!r}, expected YYYY-MM-DD")


class NoShiftsForDateError(RosterError):
    """An export produced no rows for the chosen date.

    This is an informational outcome, not a pipeline failure.
    """

    def __init__(self, target_date: date):
        self.target_date = target_date
        super().__init__(f"No shifts found for {target_date.isoformat()}.")
