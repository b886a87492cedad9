"""Per-day roster export.

Given a snapshot and a chosen date, the exporter selects the shifts that
start or end on that date, joins employee names, applies the break rule and
orders the rows by start time.
"""

import logging
from datetime import date, datetime
from typing import Optional, Union

from ukgroster.domain.models import ExportRow, RosterExport, ScheduleSnapshot, Shift
from ukgroster.domain.policies import BreakRulePolicy, DefaultBreakRulePolicy
from ukgroster.domain.temporal import (
    clock_hm,
    format_day_label,
    local_ymd,
    parse_instant,
    parse_ymd,
)
from ukgroster.exceptions import NoShiftsForDateError

logger = logging.getLogger(__name__)


class ScheduleExporter:
    """Builds the export rows for one calendar date.

    Example:
        >>> exporter = ScheduleExporter()
        >>> export = exporter.export(snapshot, "2025-08-11")
        >>> [row.break_required for row in export.rows]
        ['No', 'Yes']
    """

    def __init__(self, break_policy: Optional[BreakRulePolicy] = None):
        self.break_policy = break_policy or DefaultBreakRulePolicy()

    def export(
        self,
        snapshot: ScheduleSnapshot,
        target: Union[str, date],
    ) -> RosterExport:
        """Export the snapshot's shifts for one date.

        A shift crossing midnight is attributed to both its start and end
        day.

        Args:
            snapshot: Shifts and employee names from one payload.
            target: Chosen date, as a date or a YYYY-MM-DD string.

        Returns:
            RosterExport with rows sorted by local start time.

        Raises:
            InvalidDateError: If target is not a valid YYYY-MM-DD string.
            NoShiftsForDateError: If no shift falls on the chosen date.
        """
        if isinstance(target, datetime):
            target = target.date()
        target_date = target if isinstance(target, date) else parse_ymd(target)
        target_ymd = target_date.isoformat()
        day_label = format_day_label(target_date)

        rows = []
        for shift in snapshot.shifts:
            row = self.build_row(shift, snapshot, target_ymd, day_label)
            if row is not None:
                rows.append(row)

        if not rows:
            raise NoShiftsForDateError(target_date)

        rows.sort(key=lambda r: r.shift_start)
        logger.debug("Built %d rows for %s", len(rows), target_ymd)
        return RosterExport(target_date=target_date, day_label=day_label, rows=rows)

    def build_row(
        self,
        shift: Shift,
        snapshot: ScheduleSnapshot,
        target_ymd: str,
        day_label: str,
    ) -> Optional[ExportRow]:
        """Build the row for one shift, or None if it is not exported."""
        start = parse_instant(shift.start)
        end = parse_instant(shift.end)
        if start is None or end is None:
            return None

        if local_ymd(start) != target_ymd and local_ymd(end) != target_ymd:
            return None

        employee_id = shift.employee.display_id
        if not employee_id:
            return None

        hours = self.break_policy.duration_hours(start, end)
        if hours is None:
            logger.warning(
                "Skipping shift for employee %s: end %s is more than a day "
                "before start %s",
                employee_id,
                shift.end,
                shift.start,
            )
            return None

        return ExportRow(
            day_label=day_label,
            employee_id=employee_id,
            employee_name=snapshot.name_for(shift.employee),
            shift_start=clock_hm(start),
            shift_end=clock_hm(end),
            break_required=self.break_policy.break_flag(hours),
        )
