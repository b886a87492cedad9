"""Roster session: owner of the current schedule snapshot.

The session is the single writer of process-wide state. Every qualifying
payload replaces the snapshot (shifts plus employee names) in one step, and
every export reads exactly one snapshot. Frames are processed to completion
one at a time; there is no locking.
"""

import logging
from datetime import date
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Iterable, Optional, Union

from ukgroster.domain.models import RosterExport, ScheduleSnapshot
from ukgroster.domain.policies import BreakRulePolicy
from ukgroster.exceptions import NoShiftsForDateError
from ukgroster.export.dates import DateBucketer, dates_key
from ukgroster.export.exporter import ScheduleExporter
from ukgroster.extraction.config import ExtractionConfig
from ukgroster.extraction.employees import EmployeeIndex
from ukgroster.extraction.frames import FrameDecoder, frame_to_text, is_schedule_message
from ukgroster.extraction.shifts import RecordCollector
from ukgroster.output.csv_generator import CSVGenerator
from ukgroster.output.delivery import Delivery
from ukgroster.output.pdf_generator import PDFGenerator

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("csv", "pdf")


class RosterSession:
    """Drives the pipeline from raw frames to delivered roster files.

    Example:
        >>> session = RosterSession(on_dates=print, delivery=DirectoryDelivery("out"))
        >>> for frame in frames:
        ...     session.handle_message(frame)
        >>> session.export_and_deliver("2025-08-11")

    Attributes:
        on_dates: Called with the new date list whenever it changes.
        on_notice: Called with informational messages for the user.
        delivery: Receives rendered files.
    """

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        break_policy: Optional[BreakRulePolicy] = None,
        on_dates: Optional[Callable[[list[str]], None]] = None,
        on_notice: Optional[Callable[[str], None]] = None,
        delivery: Optional[Delivery] = None,
    ):
        self.config = config or ExtractionConfig()
        self.decoder = FrameDecoder()
        self.collector = RecordCollector(self.config)
        self.employee_index = EmployeeIndex(self.config)
        self.bucketer = DateBucketer(self.config.max_dates)
        self.exporter = ScheduleExporter(break_policy)
        self.on_dates = on_dates
        self.on_notice = on_notice
        self.delivery = delivery

        self._snapshot = ScheduleSnapshot.empty()
        self._published_dates: list[str] = []

    @property
    def snapshot(self) -> ScheduleSnapshot:
        return self._snapshot

    @property
    def published_dates(self) -> list[str]:
        return list(self._published_dates)

    def handle_message(self, data: Any, filter_messages: bool = True) -> bool:
        """Handle one transport message.

        Messages whose decoded roots carry no name with the configured
        prefix are ignored when filter_messages is set.

        Returns:
            True if the snapshot was replaced.
        """
        roots = self.decoder.decode(frame_to_text(data))
        if filter_messages and not is_schedule_message(
            roots, self.config.message_prefix, self.config.message_name_field
        ):
            return False
        return self.process_roots(roots)

    def handle_frame(self, text: str) -> bool:
        """Handle one raw frame without the message-name filter."""
        return self.process_roots(self.decoder.decode(text))

    def process_roots(self, roots: Iterable[Any]) -> bool:
        """Rebuild the snapshot from one payload's decoded roots.

        The snapshot is left untouched if the payload yields no shifts or
        none of its shifts has a parseable date.

        Returns:
            True if the snapshot was replaced.
        """
        roots = list(roots)
        if not roots:
            return False

        shifts = self.collector.collect_unique(roots)
        if not shifts:
            logger.debug("Payload with %d roots contained no shifts", len(roots))
            return False

        names = self.employee_index.build(roots)
        dates = self.bucketer.bucket(shifts)
        if not dates:
            logger.debug("No parseable dates in %d shifts", len(shifts))
            return False

        self._snapshot = ScheduleSnapshot(
            shifts=tuple(shifts),
            employee_names=MappingProxyType(names),
        )
        logger.info(
            "Schedule snapshot replaced: %d shifts, %d employee keys",
            len(shifts),
            len(names),
        )

        if dates_key(dates) != dates_key(self._published_dates):
            self._published_dates = dates
            logger.info("Publishing dates: %s", ", ".join(dates))
            if self.on_dates is not None:
                self.on_dates(list(dates))
        return True

    def available_dates(self) -> list[str]:
        """Dates of the current snapshot, recomputed on demand."""
        return self.bucketer.bucket(self._snapshot.shifts)

    def export(self, target: Union[str, date]) -> RosterExport:
        """Export the current snapshot for one date.

        Raises:
            InvalidDateError: If target is not a valid YYYY-MM-DD string.
            NoShiftsForDateError: If no shift falls on the date.
        """
        return self.exporter.export(self._snapshot, target)

    def render(self, export: RosterExport, fmt: str = "csv") -> tuple[str, bytes]:
        """Render an export as (filename, content)."""
        if fmt == "csv":
            return export.filename, CSVGenerator().generate_to_bytes(export)
        if fmt == "pdf":
            buffer = PDFGenerator().generate_to_buffer(export)
            return export.filename_for("pdf"), buffer.getvalue()
        raise ValueError(f"Unsupported export format: {fmt!r}")

    def export_and_deliver(
        self,
        target: Union[str, date],
        fmt: str = "csv",
    ) -> Optional[Path]:
        """Export one date and hand the file to the delivery target.

        An empty export is reported through on_notice and nothing is
        delivered.

        Returns:
            Delivered path if the delivery target reports one, else None.
        """
        if self.delivery is None:
            raise ValueError("No delivery target configured")

        try:
            export = self.export(target)
        except NoShiftsForDateError as exc:
            logger.info("%s", exc)
            if self.on_notice is not None:
                self.on_notice(str(exc))
            return None

        filename, content = self.render(export, fmt)
        return self.delivery.deliver(filename, content)
