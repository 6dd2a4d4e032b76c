"""Dispatch board: one day's shipments grouped by vehicle."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ...models.domain import DispatchGroup, InvoiceSummary, Shipment, ShipmentFilters, STATUS_UNCLOSED
from ...persistence.base import LedgerStore
from ..invoices.aggregator import summarize

UNASSIGNED_VEHICLE = "未定"


def _blank(value: Optional[str]) -> bool:
    return not (value or "").strip()


def group_by_vehicle(shipments: Iterable[Shipment]) -> list[DispatchGroup]:
    """Groups in first-seen order; shipments inside a group sorted by id."""
    groups: dict[str, DispatchGroup] = {}
    for shipment in shipments:
        key = (shipment.vehicle_no or "").strip() or UNASSIGNED_VEHICLE
        groups.setdefault(key, DispatchGroup(vehicle_no=key)).shipments.append(shipment)
    for group in groups.values():
        group.shipments.sort(key=lambda s: s.id)
    return list(groups.values())


def unassigned_shipments(shipments: Iterable[Shipment]) -> list[Shipment]:
    """Shipments with neither a vehicle nor a driver."""
    return [s for s in shipments if _blank(s.vehicle_no) and _blank(s.driver_name)]


def dispatch_board(
    store: LedgerStore,
    day: date,
    customer_id: Optional[int] = None,
    only_unclosed: bool = True,
) -> tuple[list[DispatchGroup], list[Shipment], InvoiceSummary]:
    filters = ShipmentFilters(
        date_from=day,
        date_to=day,
        customer_id=customer_id,
        status=STATUS_UNCLOSED if only_unclosed else None,
    )
    rows = store.list_shipments(filters, ascending=True)
    return group_by_vehicle(rows), unassigned_shipments(rows), summarize(rows)
