"""Pydantic request/response models for shipment endpoints."""

from __future__ import annotations

import datetime as dt
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ShipmentStatus = Literal["unclosed", "closed"]


class ShipmentFields(BaseModel):
    date: dt.date
    customer_id: int
    origin: Optional[str] = None
    destination: Optional[str] = None
    item_name: Optional[str] = None
    vehicle_no: Optional[str] = None
    driver_name: Optional[str] = None
    partner_name: Optional[str] = None
    freight_amount: Optional[int] = Field(default=None, ge=0, description="Defaults to 0 when omitted.")
    toll_amount: Optional[int] = Field(default=None, ge=0, description="Defaults to 0 when omitted.")
    tax_exempt_amount: Optional[int] = Field(default=None, ge=0, description="Defaults to 0 when omitted.")
    note: Optional[str] = None
    status: Optional[ShipmentStatus] = None


class ShipmentCreate(ShipmentFields):
    """New shipment; status defaults to ``unclosed``."""


class ShipmentUpdate(ShipmentFields):
    """Full replacement of a shipment; an omitted status keeps the stored one."""

    id: Optional[int] = None


class ShipmentModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: dt.date
    customer_id: int
    customer_name: Optional[str] = None
    origin: Optional[str] = None
    destination: Optional[str] = None
    item_name: Optional[str] = None
    vehicle_no: Optional[str] = None
    driver_name: Optional[str] = None
    partner_name: Optional[str] = None
    freight_amount: int = 0
    toll_amount: int = 0
    tax_exempt_amount: int = 0
    note: Optional[str] = None
    status: str


class ShipmentCreated(BaseModel):
    id: int


class OkResponse(BaseModel):
    ok: bool = True
