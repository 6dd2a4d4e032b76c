"""Invoice preview and settlement schemas."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .shipments import ShipmentModel


class InvoiceSumModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    count: int
    freight: int
    toll: int
    exempt: int
    total: int


class InvoicePreviewResponse(BaseModel):
    rows: List[ShipmentModel]
    sum: InvoiceSumModel


class InvoiceCloseRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date_from: Optional[date] = Field(default=None, alias="from")
    date_to: Optional[date] = Field(default=None, alias="to")
    customer_id: Optional[int] = None


class InvoiceCloseResponse(BaseModel):
    closedCount: int
