"""Supabase (PostgREST) implementation of the ledger store."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from ..middleware.exceptions import DuplicateRecordError, StoreError
from ..models.domain import Customer, Shipment, ShipmentFilters, STATUS_CLOSED, STATUS_UNCLOSED
from .base import CustomerOrder, LedgerStore, customer_from_row, serialize_values, shipment_from_row

logger = logging.getLogger(__name__)

CUSTOMERS_TABLE = "customers"
SHIPMENTS_TABLE = "shipments"

CUSTOMER_COLUMNS = "id,code,name,kana,phone,email,postal,address1,address2,note,is_active,created_at"
SHIPMENT_COLUMNS = (
    "id,date,customer_id,origin,destination,item_name,vehicle_no,driver_name,partner_name,"
    "freight_amount,toll_amount,tax_exempt_amount,note,status,customers(name)"
)

# PostgreSQL unique_violation
UNIQUE_VIOLATION = "23505"


class SupabaseStore(LedgerStore):
    def __init__(self, client: Client) -> None:
        self._client = client

    def _execute(self, query: Any, action: str) -> Any:
        """Run a query builder, translating backend failures into store errors."""
        try:
            return query.execute()
        except APIError as exc:
            message = exc.message or str(exc)
            logger.warning(f"Supabase rejected '{action}': {exc.code} {message}")
            if exc.code == UNIQUE_VIOLATION:
                raise DuplicateRecordError(message) from exc
            raise StoreError(message) from exc
        except httpx.HTTPError as exc:
            logger.error(f"Supabase request for '{action}' failed: {exc}")
            raise StoreError(f"Backend unavailable: {exc}") from exc

    def ping(self) -> None:
        self._execute(self._client.table(CUSTOMERS_TABLE).select("id").limit(1), "ping")

    def list_customers(self, order: CustomerOrder = "created") -> list[Customer]:
        query = self._client.table(CUSTOMERS_TABLE).select(CUSTOMER_COLUMNS)
        if order == "name":
            query = query.order("name")
        else:
            query = query.order("created_at", desc=True).order("id", desc=True)
        response = self._execute(query, "list customers")
        return [customer_from_row(row) for row in response.data or []]

    def get_customer(self, customer_id: int) -> Customer | None:
        query = self._client.table(CUSTOMERS_TABLE).select(CUSTOMER_COLUMNS).eq("id", customer_id).limit(1)
        response = self._execute(query, "read customer")
        rows = response.data or []
        return customer_from_row(rows[0]) if rows else None

    def recent_customer_codes(self, limit: int) -> list[str]:
        query = (
            self._client.table(CUSTOMERS_TABLE)
            .select("code")
            .not_.is_("code", "null")
            .order("created_at", desc=True)
            .limit(limit)
        )
        response = self._execute(query, "read recent customer codes")
        return [row["code"] for row in response.data or [] if row.get("code")]

    def insert_customer(self, values: Mapping[str, Any]) -> Customer:
        response = self._execute(
            self._client.table(CUSTOMERS_TABLE).insert(serialize_values(values)),
            "insert customer",
        )
        if not response.data:
            raise StoreError("Customer insert returned no row")
        return customer_from_row(response.data[0])

    def delete_customer(self, customer_id: int) -> int:
        response = self._execute(
            self._client.table(CUSTOMERS_TABLE).delete().eq("id", customer_id),
            "delete customer",
        )
        return len(response.data or [])

    def count_customer_shipments(self, customer_id: int) -> int:
        query = (
            self._client.table(SHIPMENTS_TABLE)
            .select("id", count="exact")
            .eq("customer_id", customer_id)
            .limit(1)
        )
        response = self._execute(query, "count customer shipments")
        if response.count is not None:
            return response.count
        return len(response.data or [])

    def list_shipments(self, filters: ShipmentFilters, *, ascending: bool = False) -> list[Shipment]:
        query = self._client.table(SHIPMENTS_TABLE).select(SHIPMENT_COLUMNS)
        if filters.date_from is not None:
            query = query.gte("date", filters.date_from.isoformat())
        if filters.date_to is not None:
            query = query.lte("date", filters.date_to.isoformat())
        if filters.customer_id is not None:
            query = query.eq("customer_id", filters.customer_id)
        if filters.status is not None:
            query = query.eq("status", filters.status)
        query = query.order("date", desc=not ascending).order("id", desc=not ascending)
        response = self._execute(query, "list shipments")
        return [shipment_from_row(row) for row in response.data or []]

    def get_shipment_status(self, shipment_id: int) -> str | None:
        query = self._client.table(SHIPMENTS_TABLE).select("status").eq("id", shipment_id).limit(1)
        response = self._execute(query, "read shipment status")
        rows = response.data or []
        return rows[0].get("status") if rows else None

    def insert_shipment(self, values: Mapping[str, Any]) -> int:
        response = self._execute(
            self._client.table(SHIPMENTS_TABLE).insert(serialize_values(values)),
            "insert shipment",
        )
        if not response.data:
            raise StoreError("Shipment insert returned no row")
        return int(response.data[0]["id"])

    def update_shipment(self, shipment_id: int, values: Mapping[str, Any]) -> int:
        response = self._execute(
            self._client.table(SHIPMENTS_TABLE).update(serialize_values(values)).eq("id", shipment_id),
            "update shipment",
        )
        return len(response.data or [])

    def delete_shipment(self, shipment_id: int) -> int:
        response = self._execute(
            self._client.table(SHIPMENTS_TABLE).delete().eq("id", shipment_id),
            "delete shipment",
        )
        return len(response.data or [])

    def close_shipments(self, date_from: date, date_to: date, customer_id: int) -> list[int]:
        query = (
            self._client.table(SHIPMENTS_TABLE)
            .update({"status": STATUS_CLOSED})
            .gte("date", date_from.isoformat())
            .lte("date", date_to.isoformat())
            .eq("customer_id", customer_id)
            .eq("status", STATUS_UNCLOSED)
        )
        response = self._execute(query, "close shipments")
        return [int(row["id"]) for row in response.data or []]
