"""Domain models and business rules for roster extraction."""

from ukgroster.domain.models import (
    CSV_HEADER,
    EmployeeRef,
    ExportRow,
    RosterExport,
    ScheduleSnapshot,
    Shift,
)
from ukgroster.domain.policies import (
    BreakRulePolicy,
    DefaultBreakRulePolicy,
)
from ukgroster.domain.temporal import (
    clock_hm,
    format_day_label,
    local_ymd,
    parse_instant,
    parse_ymd,
)

__all__ = [
    # Models
    "CSV_HEADER",
    "EmployeeRef",
    "ExportRow",
    "RosterExport",
    "ScheduleSnapshot",
    "Shift",
    # Policies
    "BreakRulePolicy",
    "DefaultBreakRulePolicy",
    # Temporal helpers
    "clock_hm",
    "format_day_label",
    "local_ymd",
    "parse_instant",
    "parse_ymd",
]
