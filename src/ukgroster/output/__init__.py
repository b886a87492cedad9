"""Output generation and delivery for roster exports (CSV, PDF)."""

from ukgroster.output.csv_generator import CSVGenerator, escape_field
from ukgroster.output.delivery import Delivery, DirectoryDelivery
from ukgroster.output.pdf_generator import PDFGenerator

__all__ = [
    "CSVGenerator",
    "Delivery",
    "DirectoryDelivery",
    "PDFGenerator",
    "escape_field",
]
