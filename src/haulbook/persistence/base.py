"""Store contract shared by the Supabase and in-memory backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, Literal, Mapping

from ..models.domain import Customer, Shipment, ShipmentFilters, STATUS_UNCLOSED

CustomerOrder = Literal["created", "name"]

CUSTOMER_FIELDS = (
    "code",
    "name",
    "kana",
    "phone",
    "email",
    "postal",
    "address1",
    "address2",
    "note",
    "is_active",
)

SHIPMENT_FIELDS = (
    "date",
    "customer_id",
    "origin",
    "destination",
    "item_name",
    "vehicle_no",
    "driver_name",
    "partner_name",
    "freight_amount",
    "toll_amount",
    "tax_exempt_amount",
    "note",
    "status",
)


class LedgerStore(ABC):
    """Persistence operations needed by the customer, shipment and invoice services.

    Every method is a single independent call; no multi-statement transactions.
    """

    @abstractmethod
    def ping(self) -> None:
        """Raise ``StoreError`` when the backend is unreachable."""

    @abstractmethod
    def list_customers(self, order: CustomerOrder = "created") -> list[Customer]:
        ...

    @abstractmethod
    def get_customer(self, customer_id: int) -> Customer | None:
        ...

    @abstractmethod
    def recent_customer_codes(self, limit: int) -> list[str]:
        """Codes of the ``limit`` most recently created customers that have one."""

    @abstractmethod
    def insert_customer(self, values: Mapping[str, Any]) -> Customer:
        ...

    @abstractmethod
    def delete_customer(self, customer_id: int) -> int:
        """Return the number of removed rows."""

    @abstractmethod
    def count_customer_shipments(self, customer_id: int) -> int:
        ...

    @abstractmethod
    def list_shipments(self, filters: ShipmentFilters, *, ascending: bool = False) -> list[Shipment]:
        """Filtered shipments ordered by (date, id), newest first unless ``ascending``."""

    @abstractmethod
    def get_shipment_status(self, shipment_id: int) -> str | None:
        ...

    @abstractmethod
    def insert_shipment(self, values: Mapping[str, Any]) -> int:
        ...

    @abstractmethod
    def update_shipment(self, shipment_id: int, values: Mapping[str, Any]) -> int:
        """Return the number of updated rows (0 when the id does not exist)."""

    @abstractmethod
    def delete_shipment(self, shipment_id: int) -> int:
        ...

    @abstractmethod
    def close_shipments(self, date_from: date, date_to: date, customer_id: int) -> list[int]:
        """Flip matching unclosed shipments to closed; return their ids."""


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _parse_datetime(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def _amount(value: Any) -> int:
    if value in (None, ""):
        return 0
    return int(value)


def customer_from_row(row: Mapping[str, Any]) -> Customer:
    return Customer(
        id=int(row["id"]),
        code=row.get("code"),
        name=row.get("name") or "",
        kana=row.get("kana"),
        phone=row.get("phone"),
        email=row.get("email"),
        postal=row.get("postal"),
        address1=row.get("address1"),
        address2=row.get("address2"),
        note=row.get("note"),
        is_active=row.get("is_active", True) is not False,
        created_at=_parse_datetime(row.get("created_at")),
    )


def shipment_from_row(row: Mapping[str, Any]) -> Shipment:
    # Supabase returns the joined customer as a nested object.
    joined = row.get("customers") or {}
    return Shipment(
        id=int(row["id"]),
        date=_parse_date(row["date"]),
        customer_id=int(row["customer_id"]),
        origin=row.get("origin"),
        destination=row.get("destination"),
        item_name=row.get("item_name"),
        vehicle_no=row.get("vehicle_no"),
        driver_name=row.get("driver_name"),
        partner_name=row.get("partner_name"),
        freight_amount=_amount(row.get("freight_amount")),
        toll_amount=_amount(row.get("toll_amount")),
        tax_exempt_amount=_amount(row.get("tax_exempt_amount")),
        note=row.get("note"),
        status=row.get("status") or STATUS_UNCLOSED,
        customer_name=row.get("customer_name") or joined.get("name"),
    )


def serialize_values(values: Mapping[str, Any]) -> dict[str, Any]:
    """Convert dates to ISO strings for JSON transport."""
    return {
        key: value.isoformat() if isinstance(value, (date, datetime)) else value
        for key, value in values.items()
    }
