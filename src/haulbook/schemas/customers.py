"""Customer API schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CustomerCreate(BaseModel):
    name: str = Field(..., description="Customer name; must not be blank.")
    code: Optional[str] = Field(
        default=None,
        description="Explicit customer code. Numbered automatically when omitted or blank.",
    )
    kana: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    postal: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    note: Optional[str] = None
    is_active: Optional[bool] = None


class CustomerModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    code: Optional[str] = None
    name: str
    kana: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    postal: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    note: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
