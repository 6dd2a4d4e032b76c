"""Spreadsheet rendering of an invoice preview."""

from __future__ import annotations

from datetime import date
from io import BytesIO
from typing import Optional, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font

from ...models.domain import InvoiceSummary, Shipment

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

COLUMNS = (
    ("Date", "date"),
    ("Origin", "origin"),
    ("Destination", "destination"),
    ("Item", "item_name"),
    ("Vehicle", "vehicle_no"),
    ("Driver", "driver_name"),
    ("Freight", "freight_amount"),
    ("Toll", "toll_amount"),
    ("Tax exempt", "tax_exempt_amount"),
    ("Note", "note"),
    ("Status", "status"),
)

_AMOUNT_FORMAT = "#,##0"


def invoice_filename(customer_id: int, date_from: date, date_to: date) -> str:
    return f"invoice_{customer_id}_{date_from:%Y%m%d}_{date_to:%Y%m%d}.xlsx"


def build_invoice_workbook(
    rows: Sequence[Shipment],
    summary: InvoiceSummary,
    *,
    customer_name: Optional[str],
    date_from: date,
    date_to: date,
) -> bytes:
    """Render invoice rows and totals into an ``.xlsx`` payload."""
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = "Invoice"

    worksheet.append(["Customer", customer_name or ""])
    worksheet.append(["Period", f"{date_from.isoformat()} - {date_to.isoformat()}"])
    worksheet.append([])

    worksheet.append([header for header, _ in COLUMNS])
    header_row = worksheet.max_row
    for cell in worksheet[header_row]:
        cell.font = Font(bold=True)

    for shipment in rows:
        worksheet.append([getattr(shipment, attr) for _, attr in COLUMNS])
        for cell in worksheet[worksheet.max_row][6:9]:
            cell.number_format = _AMOUNT_FORMAT

    worksheet.append([])
    for label, value in (
        ("Count", summary.count),
        ("Freight", summary.freight),
        ("Toll", summary.toll),
        ("Tax exempt", summary.exempt),
        ("Total", summary.total),
    ):
        worksheet.append([label, value])
        worksheet.cell(row=worksheet.max_row, column=1).font = Font(bold=True)
        worksheet.cell(row=worksheet.max_row, column=2).number_format = _AMOUNT_FORMAT

    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()
