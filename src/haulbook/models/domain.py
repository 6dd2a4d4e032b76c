"""Domain models for customer and shipment records."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

STATUS_UNCLOSED = "unclosed"
STATUS_CLOSED = "closed"


@dataclass(slots=True)
class Customer:
    """A billed customer with its human-readable code."""

    id: int
    code: Optional[str]
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


@dataclass(slots=True)
class Shipment:
    """A daily shipment line-item with its three billable amounts."""

    id: int
    date: date
    customer_id: int
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
    status: str = STATUS_UNCLOSED
    customer_name: Optional[str] = None

    @property
    def total_amount(self) -> int:
        return self.freight_amount + self.toll_amount + self.tax_exempt_amount


@dataclass(slots=True)
class ShipmentFilters:
    """Conjunctive shipment filters; ``None`` fields are not applied."""

    date_from: Optional[date] = None
    date_to: Optional[date] = None
    customer_id: Optional[int] = None
    status: Optional[str] = None


@dataclass(slots=True)
class InvoiceSummary:
    count: int = 0
    freight: int = 0
    toll: int = 0
    exempt: int = 0

    @property
    def total(self) -> int:
        return self.freight + self.toll + self.exempt

    def add(self, shipment: Shipment) -> None:
        self.count += 1
        self.freight += shipment.freight_amount
        self.toll += shipment.toll_amount
        self.exempt += shipment.tax_exempt_amount

    def as_dict(self) -> dict:
        return {
            "count": self.count,
            "freight": self.freight,
            "toll": self.toll,
            "exempt": self.exempt,
            "total": self.total,
        }


@dataclass(slots=True)
class CustomerSummaryRow:
    customer_id: int
    customer_name: str
    totals: InvoiceSummary = field(default_factory=InvoiceSummary)


@dataclass(slots=True)
class DispatchGroup:
    vehicle_no: str
    shipments: list[Shipment] = field(default_factory=list)
