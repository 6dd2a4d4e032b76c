"""Derived report endpoints."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query

from ...persistence.base import LedgerStore
from ...schemas.invoices import InvoiceSumModel
from ...schemas.reports import (
    CustomerSummaryModel,
    CustomerSummaryResponse,
    DispatchBoardResponse,
    DispatchGroupModel,
)
from ...schemas.shipments import ShipmentModel
from ...services.reports import customer_summary, dispatch_board
from ..deps import get_store

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/customer-summary", response_model=CustomerSummaryResponse)
def get_customer_summary(
  date_from: date = Query(..., alias="from", description="Inclusive lower date bound"),
  date_to: date = Query(..., alias="to", description="Inclusive upper date bound"),
  only_unclosed: bool = Query(default=True, alias="onlyUnclosed"),
  store: LedgerStore = Depends(get_store),
) -> CustomerSummaryResponse:
  rows, grand = customer_summary(store, date_from, date_to, only_unclosed)
  return CustomerSummaryResponse(
    date_from=date_from,
    date_to=date_to,
    only_unclosed=only_unclosed,
    rows=[
      CustomerSummaryModel(customer_id=row.customer_id, customer_name=row.customer_name, **row.totals.as_dict())
      for row in rows
    ],
    grand=InvoiceSumModel(**grand.as_dict()),
  )


@router.get("/dispatch", response_model=DispatchBoardResponse)
def get_dispatch_board(
  day: date = Query(..., alias="date", description="Dispatch day"),
  customer_id: int | None = Query(default=None, description="Optional customer filter"),
  only_unclosed: bool = Query(default=True, alias="onlyUnclosed"),
  store: LedgerStore = Depends(get_store),
) -> DispatchBoardResponse:
  groups, unassigned, totals = dispatch_board(store, day, customer_id, only_unclosed)
  return DispatchBoardResponse(
    date=day,
    groups=[
      DispatchGroupModel(
        vehicle_no=group.vehicle_no,
        shipments=[ShipmentModel.model_validate(s) for s in group.shipments],
      )
      for group in groups
    ],
    unassigned=[ShipmentModel.model_validate(s) for s in unassigned],
    totals=InvoiceSumModel(**totals.as_dict()),
  )
