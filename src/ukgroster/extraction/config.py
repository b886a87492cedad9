"""Configuration for payload extraction.

The upstream schema is vendor controlled and its field names drift between
payload types. Every fallback chain is therefore an explicit, ordered
``FieldResolver`` on ``ExtractionConfig`` rather than literals scattered
through the collectors.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from ukgroster.extraction.walker import lookup

DEFAULT_MESSAGE_PREFIX = "locationSchedule.employee.getScheduleForEmployeeList"


@dataclass(frozen=True)
class FieldResolver:
    """Ordered list of accessor paths tried in sequence.

    Each path starts with a source name (``record`` for the element being
    normalized, ``ref`` for its employee reference) followed by keys, e.g.
    ``"record.owner.employeeRef"``.

    Attributes:
        paths: Accessor paths in resolution order.
        truthy: If True, the first truthy value wins; otherwise the first
            value that is not None.
    """

    paths: tuple[tuple[str, ...], ...]
    truthy: bool = False

    @classmethod
    def of(cls, *paths: str, truthy: bool = False) -> "FieldResolver":
        return cls(paths=tuple(tuple(p.split(".")) for p in paths), truthy=truthy)

    def resolve(self, sources: Mapping[str, Any]) -> Any:
        """Resolve the field from the named sources.

        Returns:
            The first matching value, or None.
        """
        for source_name, *keys in self.paths:
            value = lookup(sources.get(source_name), tuple(keys))
            found = bool(value) if self.truthy else value is not None
            if found:
                return value
        return None


@dataclass(frozen=True)
class ExtractionConfig:
    """Field names and limits used to pull shifts and employees from payloads.

    Attributes:
        shift_containers: Object properties holding candidate shift lists.
        employee_containers: Object properties holding employee lists.
        kind: Record kind used to reject non-shift items.
        rejected_kind_pattern: Regex searched in the upper-cased kind.
        open_shift_flags: Boolean properties marking unassigned open shifts.
        shift_start: Raw start instant of a shift.
        shift_end: Raw end instant of a shift.
        shift_id: Identifier of a shift.
        employee_ref: Reference object from a shift to its employee.
        shift_employee_id: Employee id as seen from a shift.
        shift_employee_qualifier: Employee qualifier as seen from a shift.
        employee_name: Display name of an employee list entry.
        employee_name_parts: Name parts joined when no display name exists.
        employee_nested_ref: Nested reference on an employee list entry.
        employee_id: Id of an employee list entry.
        employee_qualifier: Qualifier of an employee list entry.
        message_name_field: Property carrying the message name.
        message_prefix: Prefix of relevant message names.
        max_dates: Maximum number of dates offered for export.
    """

    shift_containers: tuple[str, ...] = ("shifts", "employeeShifts", "scheduleItems")
    employee_containers: tuple[str, ...] = ("employees", "employeeList")

    kind: FieldResolver = field(
        default_factory=lambda: FieldResolver.of(
            "record.itemType",
            "record.type",
            "record.category",
            "record.shiftType",
            truthy=True,
        )
    )
    rejected_kind_pattern: str = r"BREAK|MEAL|TIME\s*OFF|AVAIL"
    open_shift_flags: tuple[str, ...] = ("isOpenShift", "openShift", "isOpen", "open")

    shift_start: FieldResolver = field(
        default_factory=lambda: FieldResolver.of(
            "record.startDateTime",
            "record.startTime",
            "record.start",
            "record.startDate",
        )
    )
    shift_end: FieldResolver = field(
        default_factory=lambda: FieldResolver.of(
            "record.endDateTime",
            "record.endTime",
            "record.end",
            "record.endDate",
        )
    )
    shift_id: FieldResolver = field(
        default_factory=lambda: FieldResolver.of("record.id", "record.shiftId")
    )
    employee_ref: FieldResolver = field(
        default_factory=lambda: FieldResolver.of(
            "record.employee",
            "record.employeeRef",
            "record.owner.employeeRef",
        )
    )
    shift_employee_id: FieldResolver = field(
        default_factory=lambda: FieldResolver.of(
            "ref.id",
            "ref.employeeId",
            "ref.personId",
            "record.employeeId",
            "record.personId",
        )
    )
    shift_employee_qualifier: FieldResolver = field(
        default_factory=lambda: FieldResolver.of("ref.qualifier", "record.employeeNumber")
    )

    employee_name: FieldResolver = field(
        default_factory=lambda: FieldResolver.of(
            "record.fullName", "record.name", truthy=True
        )
    )
    employee_name_parts: tuple[str, ...] = ("firstName", "lastName")
    employee_nested_ref: FieldResolver = field(
        default_factory=lambda: FieldResolver.of(
            "record.employeeRef", "record.personRef", truthy=True
        )
    )
    employee_id: FieldResolver = field(
        default_factory=lambda: FieldResolver.of(
            "ref.id",
            "record.id",
            "record.employeeId",
            "record.personId",
        )
    )
    employee_qualifier: FieldResolver = field(
        default_factory=lambda: FieldResolver.of(
            "ref.qualifier",
            "record.qualifier",
            "record.employeeNumber",
        )
    )

    message_name_field: str = "name"
    message_prefix: str = DEFAULT_MESSAGE_PREFIX
    max_dates: int = 7

    @property
    def rejected_kind_regex(self) -> "re.Pattern[str]":
        return re.compile(self.rejected_kind_pattern, re.IGNORECASE)
