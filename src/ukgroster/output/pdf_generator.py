"""PDF generation for roster output.

This module creates a printable version of a per-day roster export:
- A header with the day label and shift counts
- One table row per shift, with break-required rows highlighted
- Page numbers on every page
"""

from io import BytesIO
from pathlib import Path
from typing import Union

from ukgroster.domain.models import CSV_HEADER, RosterExport

# Color definitions (RGB tuples, 0-1 scale)
COLORS = {
    "header": (0.85, 0.85, 0.85),  # Gray
    "break_required": (0.9, 0.7, 0.7),  # Light red/pink
    "stripe": (0.95, 0.95, 0.95),  # Light gray
}

# Column widths as fractions of the usable page width, same order as CSV_HEADER
COLUMN_WEIGHTS = (0.24, 0.13, 0.29, 0.11, 0.11, 0.12)


class PDFGenerator:
    """Generates printable roster PDFs.

    Example:
        >>> generator = PDFGenerator()
        >>> generator.generate(export, "ukg_roster_2025-08-11.pdf")
    """

    def __init__(
        self,
        page_width: float = 792,  # Letter landscape width (11")
        page_height: float = 612,  # Letter landscape height (8.5")
        margin: float = 36,  # 0.5 inch margins
    ):
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin

    def generate(
        self,
        export: RosterExport,
        output_path: Union[str, Path],
    ) -> None:
        """Generate the roster PDF and save to file.

        Args:
            export: The rows exported for one date.
            output_path: Path to save the PDF.
        """
        canvas = _load_canvas()
        c = canvas.Canvas(str(output_path), pagesize=(self.page_width, self.page_height))
        self._draw_pages(c, export)
        c.save()

    def generate_to_buffer(self, export: RosterExport) -> BytesIO:
        """Generate the roster PDF and return it as a bytes buffer."""
        canvas = _load_canvas()
        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=(self.page_width, self.page_height))
        self._draw_pages(c, export)
        c.save()
        buffer.seek(0)
        return buffer

    def _draw_pages(self, c, export: RosterExport) -> None:
        """Draw the roster table, as many pages as needed."""
        row_height = 20
        header_height = 60
        footer_height = 30
        usable_height = self.page_height - 2 * self.margin - header_height - footer_height
        rows_per_page = max(1, int(usable_height / row_height) - 1)

        table_width = self.page_width - 2 * self.margin
        column_x = [self.margin]
        for weight in COLUMN_WEIGHTS[:-1]:
            column_x.append(column_x[-1] + weight * table_width)

        total_pages = max(1, (len(export.rows) + rows_per_page - 1) // rows_per_page)
        for page_index in range(total_pages):
            page_rows = export.rows[page_index * rows_per_page : (page_index + 1) * rows_per_page]

            self._draw_header(c, export)

            y = self.page_height - self.margin - header_height
            self._draw_row(c, CSV_HEADER, column_x, table_width, y, row_height, COLORS["header"], bold=True)

            for i, row in enumerate(page_rows):
                y -= row_height
                if row.break_required == "Yes":
                    fill = COLORS["break_required"]
                elif i % 2:
                    fill = COLORS["stripe"]
                else:
                    fill = None
                self._draw_row(c, row.as_csv_fields(), column_x, table_width, y, row_height, fill)

            self._draw_legend(c, self.margin, self.margin + 10)

            c.setFont("Helvetica", 9)
            c.drawCentredString(
                self.page_width / 2,
                self.margin - 10,
                f"Page {page_index + 1} of {total_pages}",
            )
            c.showPage()

    def _draw_header(self, c, export: RosterExport) -> None:
        """Draw page header with day label and counts."""
        c.setFont("Helvetica-Bold", 16)
        c.drawString(
            self.margin,
            self.page_height - self.margin - 20,
            f"Roster - {export.day_label}",
        )

        c.setFont("Helvetica", 10)
        c.drawString(
            self.margin,
            self.page_height - self.margin - 35,
            f"Shifts: {len(export.rows)}   Break required: {export.break_required_count}",
        )

    def _draw_row(
        self,
        c,
        fields,
        column_x: list[float],
        table_width: float,
        y: float,
        height: float,
        fill=None,
        bold: bool = False,
    ) -> None:
        """Draw one table row with an optional background."""
        if fill is not None:
            c.setFillColorRGB(*fill)
            c.rect(self.margin, y, table_width, height, fill=1, stroke=0)

        c.setStrokeColorRGB(0.7, 0.7, 0.7)
        c.setLineWidth(0.5)
        c.line(self.margin, y, self.margin + table_width, y)

        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica-Bold" if bold else "Helvetica", 9)
        for x, value in zip(column_x, fields):
            c.drawString(x + 4, y + height / 2 - 3, _truncate(str(value), 40))

    def _draw_legend(self, c, x: float, y: float) -> None:
        """Draw legend for the break highlight."""
        c.setFont("Helvetica-Bold", 8)
        c.drawString(x, y, "Legend:")

        c.setFont("Helvetica", 7)
        c.setFillColorRGB(*COLORS["break_required"])
        c.rect(x + 45, y - 2, 12, 10, fill=1, stroke=1)
        c.setFillColorRGB(0, 0, 0)
        c.drawString(x + 60, y, "Break required")


def _truncate(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[: limit - 3] + "..."


def _load_canvas():
    try:
        from reportlab.pdfgen import canvas
    except ImportError:
        raise ImportError(
            "reportlab is required for PDF generation. "
            "Install with: pip install reportlab"
        )
    return canvas

