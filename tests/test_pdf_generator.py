"""Tests for PDF roster output."""

from datetime import date

import pytest

pytest.importorskip("reportlab")

from ukgroster.domain.models import ExportRow, RosterExport  # noqa: E402
from ukgroster.output.pdf_generator import PDFGenerator  # noqa: E402

LABEL = "Monday 11/08/2025"


def _export(count: int) -> RosterExport:
    rows = [
        ExportRow(LABEL, str(1000 + i), f"Employee {i}", "08:00", "16:00", "Yes" if i % 2 else "No")
        for i in range(count)
    ]
    return RosterExport(target_date=date(2025, 8, 11), day_label=LABEL, rows=rows)


class TestPDFGenerator:
    """Tests for PDFGenerator."""

    @pytest.fixture
    def generator(self):
        return PDFGenerator()

    def test_buffer_is_pdf(self, generator):
        buffer = generator.generate_to_buffer(_export(3))
        assert buffer.getvalue().startswith(b"%PDF")

    def test_generate_writes_file(self, generator, tmp_path):
        path = tmp_path / "roster.pdf"
        generator.generate(_export(3), path)
        assert path.read_bytes().startswith(b"%PDF")

    def test_long_roster_spans_pages(self, generator):
        short = generator.generate_to_buffer(_export(2)).getvalue()
        long = generator.generate_to_buffer(_export(120)).getvalue()
        assert long.count(b"/Type /Page") > short.count(b"/Type /Page")

    def test_long_names_fit(self, generator):
        export = _export(1)
        export.rows[0] = ExportRow(LABEL, "1", "X" * 200, "08:00", "09:00", "No")
        assert generator.generate_to_buffer(export).getvalue().startswith(b"%PDF")
