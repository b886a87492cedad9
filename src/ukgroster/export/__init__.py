"""Date bucketing and per-day roster export."""

from ukgroster.export.dates import DateBucketer, dates_key
from ukgroster.export.exporter import ScheduleExporter

__all__ = [
    "DateBucketer",
    "ScheduleExporter",
    "dates_key",
]
