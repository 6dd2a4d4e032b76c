"""Shipment line-item listing and maintenance."""

from __future__ import annotations

import logging
from typing import Any

from ...middleware.exceptions import ValidationFailure
from ...models.domain import STATUS_CLOSED, STATUS_UNCLOSED, Shipment, ShipmentFilters
from ...persistence.base import LedgerStore
from ...schemas.shipments import ShipmentCreate, ShipmentFields, ShipmentUpdate

logger = logging.getLogger(__name__)

_AMOUNT_FIELDS = ("freight_amount", "toll_amount", "tax_exempt_amount")
_TEXT_FIELDS = (
    "origin",
    "destination",
    "item_name",
    "vehicle_no",
    "driver_name",
    "partner_name",
    "note",
)


def _record_values(payload: ShipmentFields) -> dict[str, Any]:
    """Every persisted column of ``payload``; absent amounts become 0."""
    values: dict[str, Any] = {
        "date": payload.date,
        "customer_id": payload.customer_id,
    }
    for field in _TEXT_FIELDS:
        values[field] = getattr(payload, field)
    for field in _AMOUNT_FIELDS:
        amount = getattr(payload, field)
        values[field] = 0 if amount is None else amount
    return values


def list_shipments(store: LedgerStore, filters: ShipmentFilters) -> list[Shipment]:
    """Shipments matching every supplied filter, newest first."""
    return store.list_shipments(filters)


def create_shipment(store: LedgerStore, payload: ShipmentCreate) -> int:
    values = _record_values(payload)
    values["status"] = payload.status or STATUS_UNCLOSED
    shipment_id = store.insert_shipment(values)
    logger.info(f"Created shipment {shipment_id} for customer {payload.customer_id} on {payload.date}")
    return shipment_id


def update_shipment(store: LedgerStore, payload: ShipmentUpdate) -> None:
    """Replace every field of the shipment ``payload.id``.

    An omitted status keeps the stored status. Closed shipments are never
    reopened. Updating an id that does not exist affects nothing.
    """
    if payload.id is None:
        raise ValidationFailure("id is required")

    values = _record_values(payload)
    if payload.status is not None:
        if payload.status == STATUS_UNCLOSED and store.get_shipment_status(payload.id) == STATUS_CLOSED:
            raise ValidationFailure(f"shipment {payload.id} is closed and cannot be reopened")
        values["status"] = payload.status

    updated = store.update_shipment(payload.id, values)
    if not updated:
        logger.info(f"Update of shipment {payload.id} matched no rows")


def delete_shipment(store: LedgerStore, shipment_id: int) -> None:
    removed = store.delete_shipment(shipment_id)
    logger.info(f"Deleted shipment {shipment_id} ({removed} row(s))")
