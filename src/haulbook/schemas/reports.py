"""Report API schemas."""

from __future__ import annotations

import datetime as dt
from typing import List

from pydantic import BaseModel

from .invoices import InvoiceSumModel
from .shipments import ShipmentModel


class CustomerSummaryModel(BaseModel):
    customer_id: int
    customer_name: str
    count: int
    freight: int
    toll: int
    exempt: int
    total: int


class CustomerSummaryResponse(BaseModel):
    date_from: dt.date
    date_to: dt.date
    only_unclosed: bool
    rows: List[CustomerSummaryModel]
    grand: InvoiceSumModel


class DispatchGroupModel(BaseModel):
    vehicle_no: str
    shipments: List[ShipmentModel]


class DispatchBoardResponse(BaseModel):
    date: dt.date
    groups: List[DispatchGroupModel]
    unassigned: List[ShipmentModel]
    totals: InvoiceSumModel
