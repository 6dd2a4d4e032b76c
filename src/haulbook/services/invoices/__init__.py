"""Invoice service helpers."""

from .aggregator import close_invoice, preview_invoice, summarize
from .export import XLSX_MEDIA_TYPE, build_invoice_workbook, invoice_filename

__all__ = [
    "XLSX_MEDIA_TYPE",
    "build_invoice_workbook",
    "close_invoice",
    "invoice_filename",
    "preview_invoice",
    "summarize",
]
