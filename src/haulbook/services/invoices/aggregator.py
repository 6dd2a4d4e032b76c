"""Invoice preview, summary and settlement (closing)."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ...middleware.exceptions import ValidationFailure
from ...models.domain import InvoiceSummary, Shipment, ShipmentFilters, STATUS_UNCLOSED
from ...persistence.base import LedgerStore

logger = logging.getLogger(__name__)

MISSING_WINDOW_MESSAGE = "from/to/customer_id are required"


def summarize(shipments: Iterable[Shipment]) -> InvoiceSummary:
    """Count the shipments and sum their freight, toll and tax-exempt amounts."""
    summary = InvoiceSummary()
    for shipment in shipments:
        summary.add(shipment)
    return summary


def _require_window(
    date_from: Optional[date],
    date_to: Optional[date],
    customer_id: Optional[int],
) -> tuple[date, date, int]:
    if date_from is None or date_to is None or customer_id is None:
        raise ValidationFailure(MISSING_WINDOW_MESSAGE)
    return date_from, date_to, customer_id


def preview_invoice(
    store: LedgerStore,
    date_from: Optional[date],
    date_to: Optional[date],
    customer_id: Optional[int],
    only_unclosed: bool = False,
) -> tuple[list[Shipment], InvoiceSummary]:
    """Rows of one customer's invoice window (oldest first) and their summary."""
    date_from, date_to, customer_id = _require_window(date_from, date_to, customer_id)
    filters = ShipmentFilters(
        date_from=date_from,
        date_to=date_to,
        customer_id=customer_id,
        status=STATUS_UNCLOSED if only_unclosed else None,
    )
    rows = store.list_shipments(filters, ascending=True)
    return rows, summarize(rows)


def close_invoice(
    store: LedgerStore,
    date_from: Optional[date],
    date_to: Optional[date],
    customer_id: Optional[int],
) -> int:
    """Mark every unclosed shipment in the window as closed and return how many changed.

    Repeating the call for the same window closes nothing and returns 0.
    """
    date_from, date_to, customer_id = _require_window(date_from, date_to, customer_id)
    closed_ids = store.close_shipments(date_from, date_to, customer_id)
    logger.info(
        f"Closed {len(closed_ids)} shipment(s) for customer {customer_id} between {date_from} and {date_to}"
    )
    return len(closed_ids)
