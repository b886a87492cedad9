"""Policy definitions for roster rules.

Policies are kept separate from the exporter so that the break rule can be
tested and changed independently of extraction and formatting.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

MS_PER_HOUR = 3_600_000


class BreakRulePolicy(ABC):
    """Abstract base class for break-required rules."""

    @abstractmethod
    def duration_hours(self, start: datetime, end: datetime) -> Optional[float]:
        """Get the shift duration in hours.

        Args:
            start: Local start instant.
            end: Local end instant.

        Returns:
            Duration in hours, or None if the pair cannot describe a shift.
        """
        pass

    @abstractmethod
    def is_break_required(self, hours: float) -> bool:
        """Check if a shift of the given length requires a break."""
        pass

    def break_flag(self, hours: float) -> str:
        """Render the break rule as the export column value."""
        return "Yes" if self.is_break_required(hours) else "No"


@dataclass
class DefaultBreakRulePolicy(BreakRulePolicy):
    """Default break rule.

    - A break is required when the shift is strictly longer than 6 hours.
    - An end before the start is treated as a midnight wrap and moved
      forward by 24 hours, once.
    - If the end is still before the start after that single wrap the
      shift has no usable duration.
    """

    threshold_hours: float = 6.0
    wrap_hours: float = 24.0

    def duration_hours(self, start: datetime, end: datetime) -> Optional[float]:
        delta = end - start
        # Whole milliseconds, microseconds kept as a fraction.
        ms = delta.days * 86_400_000 + delta.seconds * 1000 + delta.microseconds / 1000
        if ms < 0:
            ms += self.wrap_hours * MS_PER_HOUR
        if ms < 0:
            return None
        return ms / MS_PER_HOUR

    def is_break_required(self, hours: float) -> bool:
        return hours > self.threshold_hours
