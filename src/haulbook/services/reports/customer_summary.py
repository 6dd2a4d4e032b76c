"""Per-customer totals over a shipment window."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Optional

from ...models.domain import CustomerSummaryRow, InvoiceSummary, Shipment, ShipmentFilters, STATUS_UNCLOSED
from ...persistence.base import LedgerStore


def _display_name(shipment: Shipment, names: Mapping[int, str]) -> str:
    return shipment.customer_name or names.get(shipment.customer_id) or f"得意先#{shipment.customer_id}"


def summarize_by_customer(
    shipments: Iterable[Shipment],
    customer_names: Optional[Mapping[int, str]] = None,
) -> list[CustomerSummaryRow]:
    """Group shipments by customer and sort the groups by total, largest first."""
    names = customer_names or {}
    groups: dict[int, CustomerSummaryRow] = {}
    for shipment in shipments:
        row = groups.get(shipment.customer_id)
        if row is None:
            row = CustomerSummaryRow(
                customer_id=shipment.customer_id,
                customer_name=_display_name(shipment, names),
            )
            groups[shipment.customer_id] = row
        row.totals.add(shipment)
    return sorted(groups.values(), key=lambda r: r.totals.total, reverse=True)


def grand_total(rows: Iterable[CustomerSummaryRow]) -> InvoiceSummary:
    grand = InvoiceSummary()
    for row in rows:
        grand.count += row.totals.count
        grand.freight += row.totals.freight
        grand.toll += row.totals.toll
        grand.exempt += row.totals.exempt
    return grand


def customer_summary(
    store: LedgerStore,
    date_from: date,
    date_to: date,
    only_unclosed: bool = True,
) -> tuple[list[CustomerSummaryRow], InvoiceSummary]:
    filters = ShipmentFilters(
        date_from=date_from,
        date_to=date_to,
        status=STATUS_UNCLOSED if only_unclosed else None,
    )
    names = {customer.id: customer.name for customer in store.list_customers()}
    rows = summarize_by_customer(store.list_shipments(filters), names)
    return rows, grand_total(rows)
