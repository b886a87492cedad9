"""CSV output for per-day roster exports.

The format is fixed: UTF-8, comma separated, rows joined by CRLF with no
trailing line break, and quoting only for fields that contain a double
quote, a comma or a newline (internal quotes doubled).
"""

from pathlib import Path
from typing import Iterable, Union

from ukgroster.domain.models import CSV_HEADER, RosterExport

LINE_SEPARATOR = "\r\n"
_NEEDS_QUOTING = ('"', ",", "\n")


def escape_field(value: object) -> str:
    """Quote a single field if it contains a quote, comma or newline."""
    text = "" if value is None else str(value)
    if any(ch in text for ch in _NEEDS_QUOTING):
        return '"' + text.replace('"', '""') + '"'
    return text


def format_line(fields: Iterable[object]) -> str:
    return ",".join(escape_field(f) for f in fields)


class CSVGenerator:
    """Generates the roster CSV for one exported date.

    Example:
        >>> generator = CSVGenerator()
        >>> generator.generate(export, "ukg_roster_2025-08-11.csv")
    """

    def generate(
        self,
        export: RosterExport,
        output_path: Union[str, Path],
    ) -> bytes:
        """Generate the CSV and save it to a file.

        Args:
            export: The rows exported for one date.
            output_path: Path to save the CSV file.

        Returns:
            The encoded CSV content.
        """
        content = self.generate_to_bytes(export)
        Path(output_path).write_bytes(content)
        return content

    def generate_to_string(self, export: RosterExport) -> str:
        """Generate the CSV text (header first, then one line per row)."""
        lines = [format_line(CSV_HEADER)]
        lines.extend(format_line(row.as_csv_fields()) for row in export.rows)
        return LINE_SEPARATOR.join(lines)

    def generate_to_bytes(self, export: RosterExport) -> bytes:
        return self.generate_to_string(export).encode("utf-8")
