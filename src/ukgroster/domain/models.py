"""Domain models for the roster extraction pipeline.

This module contains the canonical data structures produced from captured
schedule payloads: employee references, shifts, the snapshot that pairs
shifts with the employee name index, and the rows of a per-day export.
"""

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

# Raw identifiers and instants are kept exactly as received from the payload.
RawId = Union[str, int, float]
RawInstant = Union[str, int, float]

CSV_HEADER = (
    "Day",
    "EmployeeID",
    "Employee Name",
    "Shift Start",
    "Shift End",
    "Break Required",
)


def _key_part(value: Optional[RawId]) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class EmployeeRef:
    """Reference from a shift to the employee working it.

    Attributes:
        id: Internal employee identifier, if the payload carried one.
        qualifier: Human-facing employee number, if the payload carried one.
    """

    id: Optional[RawId] = None
    qualifier: Optional[RawId] = None

    @property
    def has_identifier(self) -> bool:
        """True if at least one of id/qualifier is present."""
        return self.id is not None or self.qualifier is not None

    @property
    def display_id(self) -> str:
        """Identifier shown in exports: qualifier if present, else id."""
        if self.qualifier:
            return str(self.qualifier)
        if self.id:
            return str(self.id)
        return ""

    def lookup_keys(self) -> Iterator[str]:
        """Yield name-index keys in lookup order (qualifier first)."""
        if self.qualifier is not None:
            yield str(self.qualifier)
        if self.id is not None:
            yield str(self.id)


@dataclass(frozen=True)
class Shift:
    """A validated, scheduled working period for one employee.

    Start and end keep their raw payload representation; temporal parsing
    happens only when dates are bucketed or a day is exported.

    Attributes:
        start: Raw start value (ISO string, calendar string or epoch millis).
        end: Raw end value.
        employee: The employee working the shift.
        id: Shift identifier from the payload, if any.
    """

    start: RawInstant
    end: RawInstant
    employee: EmployeeRef
    id: Optional[RawId] = None

    @property
    def dedup_key(self) -> tuple[str, str, str, str]:
        """Identity of the shift: employee ids plus the raw start and end."""
        return (
            _key_part(self.employee.id),
            _key_part(self.employee.qualifier),
            str(self.start),
            str(self.end),
        )


@dataclass(frozen=True)
class ScheduleSnapshot:
    """Shifts and employee names taken from the same payload.

    The session replaces the whole snapshot on every qualifying payload, so
    readers always see a consistent pair.
    """

    shifts: tuple[Shift, ...] = ()
    employee_names: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def empty(cls) -> "ScheduleSnapshot":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.shifts

    def name_for(self, employee: EmployeeRef) -> str:
        """Resolve a display name, qualifier first, then id."""
        for key in employee.lookup_keys():
            name = self.employee_names.get(key)
            if name:
                return name
        return ""


@dataclass(frozen=True)
class ExportRow:
    """One line of a per-day roster export."""

    day_label: str
    employee_id: str
    employee_name: str
    shift_start: str  # HH:MM, local
    shift_end: str  # HH:MM, local
    break_required: str  # "Yes" / "No"

    def as_csv_fields(self) -> tuple[str, str, str, str, str, str]:
        return (
            self.day_label,
            self.employee_id,
            self.employee_name,
            self.shift_start,
            self.shift_end,
            self.break_required,
        )


@dataclass
class RosterExport:
    """The rows exported for one chosen date, sorted by shift start.

    Attributes:
        target_date: The chosen calendar date.
        day_label: Human readable label, e.g. "Monday 11/08/2025".
        rows: Export rows in shift-start order.
    """

    target_date: date
    day_label: str
    rows: list[ExportRow] = field(default_factory=list)

    @property
    def filename(self) -> str:
        """File name offered to the delivery collaborator."""
        return self.filename_for("csv")

    def filename_for(self, extension: str) -> str:
        return f"ukg_roster_{self.target_date.isoformat()}.{extension}"

    @property
    def break_required_count(self) -> int:
        return sum(1 for row in self.rows if row.break_required == "Yes")

    def __len__(self) -> int:
        return len(self.rows)
