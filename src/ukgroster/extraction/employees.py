"""Employee name index built from employee lists in decoded payloads."""

import logging
from typing import Any, Iterable, Optional

from ukgroster.extraction.config import ExtractionConfig
from ukgroster.extraction.walker import as_text, is_scalar, walk

logger = logging.getLogger(__name__)


class EmployeeIndex:
    """Maps employee ids and qualifiers to display names.

    The index is rebuilt from scratch for every payload. Within one build a
    later entry for the same key overwrites an earlier one.
    """

    def __init__(self, config: Optional[ExtractionConfig] = None):
        self.config = config or ExtractionConfig()

    def build(self, roots: Iterable[Any]) -> dict[str, str]:
        """Build the identifier to name mapping for one payload.

        Args:
            roots: Decoded JSON roots of the payload.

        Returns:
            Dict keyed by str(id) and str(qualifier).
        """
        names: dict[str, str] = {}
        for root in roots:
            for node in walk(root):
                if not isinstance(node, dict):
                    continue
                for container_name in self.config.employee_containers:
                    container = node.get(container_name)
                    if isinstance(container, list):
                        for record in container:
                            self._add(names, record)

        logger.debug("Indexed %d employee keys", len(names))
        return names

    def employee_name(self, record: dict) -> str:
        """Display name: full name, name, or the joined name parts."""
        name = as_text(self.config.employee_name.resolve({"record": record}))
        if name:
            return name
        parts = (as_text(record.get(part)) for part in self.config.employee_name_parts)
        return " ".join(part for part in parts if part)

    def _add(self, names: dict[str, str], record: Any) -> None:
        if not isinstance(record, dict):
            return
        name = self.employee_name(record)
        if not name:
            return

        ref = self.config.employee_nested_ref.resolve({"record": record})
        sources = {"record": record, "ref": ref if isinstance(ref, dict) else {}}

        employee_id = self.config.employee_id.resolve(sources)
        qualifier = self.config.employee_qualifier.resolve(sources)
        if is_scalar(employee_id):
            names[str(employee_id)] = name
        if is_scalar(qualifier):
            names[str(qualifier)] = name
