"""Extraction of shifts and employees from captured schedule frames."""

from ukgroster.extraction.config import (
    DEFAULT_MESSAGE_PREFIX,
    ExtractionConfig,
    FieldResolver,
)
from ukgroster.extraction.employees import EmployeeIndex
from ukgroster.extraction.frames import (
    FrameDecoder,
    frame_to_text,
    is_schedule_message,
)
from ukgroster.extraction.shifts import RecordCollector, deduplicate_shifts
from ukgroster.extraction.walker import walk

__all__ = [
    # Configuration
    "DEFAULT_MESSAGE_PREFIX",
    "ExtractionConfig",
    "FieldResolver",
    # Frames
    "FrameDecoder",
    "frame_to_text",
    "is_schedule_message",
    # Collectors
    "EmployeeIndex",
    "RecordCollector",
    "deduplicate_shifts",
    "walk",
]
