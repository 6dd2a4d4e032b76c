"""In-process store used by tests and local runs without Supabase."""

from __future__ import annotations

import itertools
import threading
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Any, Mapping

from ..middleware.exceptions import DuplicateRecordError
from ..models.domain import Customer, Shipment, ShipmentFilters, STATUS_CLOSED, STATUS_UNCLOSED
from .base import CUSTOMER_FIELDS, SHIPMENT_FIELDS, CustomerOrder, LedgerStore, shipment_from_row


class InMemoryStore(LedgerStore):
    """Dictionary-backed tables with the same observable semantics as the Supabase schema.

    The ``customers.code`` uniqueness constraint is enforced; shipment-to-customer
    references are not.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._customers: dict[int, Customer] = {}
        self._shipments: dict[int, Shipment] = {}
        self._customer_ids = itertools.count(1)
        self._shipment_ids = itertools.count(1)

    def ping(self) -> None:
        return None

    def list_customers(self, order: CustomerOrder = "created") -> list[Customer]:
        with self._lock:
            customers = list(self._customers.values())
        if order == "name":
            return sorted(customers, key=lambda c: c.name)
        # ids grow with insertion, so they break created_at ties
        return sorted(customers, key=lambda c: (c.created_at, c.id), reverse=True)

    def get_customer(self, customer_id: int) -> Customer | None:
        with self._lock:
            customer = self._customers.get(customer_id)
            return replace(customer) if customer else None

    def recent_customer_codes(self, limit: int) -> list[str]:
        return [c.code for c in self.list_customers("created") if c.code is not None][:limit]

    def insert_customer(self, values: Mapping[str, Any]) -> Customer:
        with self._lock:
            code = values.get("code")
            if code is not None and any(c.code == code for c in self._customers.values()):
                raise DuplicateRecordError(
                    f'duplicate key value violates unique constraint "customers_code_key": code={code}'
                )
            fields = {key: values.get(key) for key in CUSTOMER_FIELDS}
            if fields.get("is_active") is None:
                fields["is_active"] = True
            customer = Customer(
                id=next(self._customer_ids),
                created_at=datetime.now(timezone.utc),
                **fields,
            )
            self._customers[customer.id] = customer
            return replace(customer)

    def delete_customer(self, customer_id: int) -> int:
        with self._lock:
            return 1 if self._customers.pop(customer_id, None) else 0

    def count_customer_shipments(self, customer_id: int) -> int:
        with self._lock:
            return sum(1 for s in self._shipments.values() if s.customer_id == customer_id)

    def list_shipments(self, filters: ShipmentFilters, *, ascending: bool = False) -> list[Shipment]:
        with self._lock:
            rows = [s for s in self._shipments.values() if _matches(s, filters)]
            names = {c.id: c.name for c in self._customers.values()}
        rows.sort(key=lambda s: (s.date, s.id), reverse=not ascending)
        return [replace(s, customer_name=names.get(s.customer_id)) for s in rows]

    def get_shipment_status(self, shipment_id: int) -> str | None:
        with self._lock:
            shipment = self._shipments.get(shipment_id)
            return shipment.status if shipment else None

    def insert_shipment(self, values: Mapping[str, Any]) -> int:
        with self._lock:
            row = {key: values.get(key) for key in SHIPMENT_FIELDS}
            row["id"] = next(self._shipment_ids)
            shipment = shipment_from_row(row)
            self._shipments[shipment.id] = shipment
            return shipment.id

    def update_shipment(self, shipment_id: int, values: Mapping[str, Any]) -> int:
        with self._lock:
            current = self._shipments.get(shipment_id)
            if current is None:
                return 0
            updates = {key: values[key] for key in SHIPMENT_FIELDS if key in values}
            self._shipments[shipment_id] = replace(current, **updates)
            return 1

    def delete_shipment(self, shipment_id: int) -> int:
        with self._lock:
            return 1 if self._shipments.pop(shipment_id, None) else 0

    def close_shipments(self, date_from: date, date_to: date, customer_id: int) -> list[int]:
        filters = ShipmentFilters(
            date_from=date_from,
            date_to=date_to,
            customer_id=customer_id,
            status=STATUS_UNCLOSED,
        )
        with self._lock:
            closed = [s.id for s in self._shipments.values() if _matches(s, filters)]
            for shipment_id in closed:
                self._shipments[shipment_id] = replace(self._shipments[shipment_id], status=STATUS_CLOSED)
        return sorted(closed)


def _matches(shipment: Shipment, filters: ShipmentFilters) -> bool:
    if filters.date_from is not None and shipment.date < filters.date_from:
        return False
    if filters.date_to is not None and shipment.date > filters.date_to:
        return False
    if filters.customer_id is not None and shipment.customer_id != filters.customer_id:
        return False
    if filters.status is not None and shipment.status != filters.status:
        return False
    return True
