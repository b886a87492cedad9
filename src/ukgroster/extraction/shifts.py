"""Shift collection and normalization.

Every decoded root is searched for arrays under the configured container
properties. Each element is normalized into a canonical ``Shift`` or
rejected; rejection is deliberately strict so that breaks, meals, time off,
availability and open shifts never end up in an export.
"""

import logging
from typing import Any, Iterable, Optional

from ukgroster.domain.models import EmployeeRef, Shift
from ukgroster.extraction.config import ExtractionConfig
from ukgroster.extraction.walker import as_text, is_scalar, walk

logger = logging.getLogger(__name__)


class RecordCollector:
    """Finds shift lists in decoded payloads and normalizes their elements.

    Example:
        >>> collector = RecordCollector()
        >>> shifts = collector.collect_unique(roots)
    """

    def __init__(self, config: Optional[ExtractionConfig] = None):
        self.config = config or ExtractionConfig()
        self._rejected_kind = self.config.rejected_kind_regex

    def collect(self, roots: Iterable[Any]) -> list[Shift]:
        """Collect normalized shifts in traversal order, duplicates included."""
        shifts = []
        rejected = 0
        for root in roots:
            for node in walk(root):
                if not isinstance(node, dict):
                    continue
                for container_name in self.config.shift_containers:
                    container = node.get(container_name)
                    if not isinstance(container, list):
                        continue
                    for record in container:
                        shift = self.normalize(record)
                        if shift is None:
                            rejected += 1
                        else:
                            shifts.append(shift)

        if rejected:
            logger.debug("Rejected %d non-shift records", rejected)
        return shifts

    def collect_unique(self, roots: Iterable[Any]) -> list[Shift]:
        """Collect shifts and drop repeats seen in overlapping subtrees."""
        return deduplicate_shifts(self.collect(roots))

    def normalize(self, record: Any) -> Optional[Shift]:
        """Normalize one raw container element.

        Returns:
            The canonical shift, or None if the element is not an assigned,
            working shift with a start, an end and an employee identifier.
        """
        if not isinstance(record, dict):
            return None
        sources = {"record": record}

        if self._is_rejected_kind(sources) or self._is_open_shift(record):
            return None

        start = self.config.shift_start.resolve(sources)
        end = self.config.shift_end.resolve(sources)
        if not _is_instant(start) or not _is_instant(end):
            return None

        ref = self.config.employee_ref.resolve(sources)
        if not ref:
            return None
        sources["ref"] = ref if isinstance(ref, dict) else {}

        employee = EmployeeRef(
            id=_scalar_or_none(self.config.shift_employee_id.resolve(sources)),
            qualifier=_scalar_or_none(
                self.config.shift_employee_qualifier.resolve(sources)
            ),
        )
        if not employee.has_identifier:
            return None

        return Shift(
            start=start,
            end=end,
            employee=employee,
            id=_scalar_or_none(self.config.shift_id.resolve(sources)),
        )

    def _is_rejected_kind(self, sources: dict) -> bool:
        kind = as_text(self.config.kind.resolve(sources)).upper()
        return self._rejected_kind.search(kind) is not None

    def _is_open_shift(self, record: dict) -> bool:
        return any(record.get(flag) is True for flag in self.config.open_shift_flags)


def _is_instant(value: Any) -> bool:
    # Empty strings and zero count as missing.
    return is_scalar(value) and bool(value)


def _scalar_or_none(value: Any) -> Optional[Any]:
    return value if is_scalar(value) else None


def deduplicate_shifts(shifts: Iterable[Shift]) -> list[Shift]:
    """Keep the first shift for each (employee id, qualifier, start, end).

    The filter is stable and idempotent.
    """
    seen = set()
    unique = []
    for shift in shifts:
        key = shift.dedup_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(shift)
    return unique
