"""Invoice preview, settlement and export endpoints."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status

from ...persistence.base import LedgerStore
from ...schemas.invoices import (
    InvoiceCloseRequest,
    InvoiceCloseResponse,
    InvoicePreviewResponse,
    InvoiceSumModel,
)
from ...schemas.shipments import ShipmentModel
from ...services.invoices import (
    XLSX_MEDIA_TYPE,
    build_invoice_workbook,
    close_invoice,
    invoice_filename,
    preview_invoice,
)
from ..deps import get_store

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", response_model=InvoicePreviewResponse, status_code=status.HTTP_200_OK)
def get_invoice_preview(
    date_from: date | None = Query(default=None, alias="from"),
    date_to: date | None = Query(default=None, alias="to"),
    customer_id: int | None = Query(default=None),
    only_unclosed: bool = Query(default=False, alias="onlyUnclosed", description="1 restricts to unclosed rows"),
    store: LedgerStore = Depends(get_store),
) -> InvoicePreviewResponse:
    rows, summary = preview_invoice(store, date_from, date_to, customer_id, only_unclosed)
    return InvoicePreviewResponse(
        rows=[ShipmentModel.model_validate(row) for row in rows],
        sum=InvoiceSumModel(**summary.as_dict()),
    )


@router.post("", response_model=InvoiceCloseResponse, status_code=status.HTTP_200_OK)
def post_invoice_close(
    payload: InvoiceCloseRequest,
    store: LedgerStore = Depends(get_store),
) -> InvoiceCloseResponse:
    closed = close_invoice(store, payload.date_from, payload.date_to, payload.customer_id)
    return InvoiceCloseResponse(closedCount=closed)


@router.get("/export", response_class=Response, status_code=status.HTTP_200_OK)
def export_invoice(
    date_from: date | None = Query(default=None, alias="from"),
    date_to: date | None = Query(default=None, alias="to"),
    customer_id: int | None = Query(default=None),
    only_unclosed: bool = Query(default=False, alias="onlyUnclosed"),
    store: LedgerStore = Depends(get_store),
) -> Response:
    rows, summary = preview_invoice(store, date_from, date_to, customer_id, only_unclosed)
    # preview_invoice has already rejected a missing window
    customer_name = next((row.customer_name for row in rows if row.customer_name), None)
    if customer_name is None:
        customer = store.get_customer(customer_id)
        customer_name = customer.name if customer else None
    payload = build_invoice_workbook(
        rows,
        summary,
        customer_name=customer_name,
        date_from=date_from,
        date_to=date_to,
    )
    filename = invoice_filename(customer_id, date_from, date_to)
    return Response(
        content=payload,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
