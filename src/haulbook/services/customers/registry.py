"""Customer registration, listing and removal."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ...middleware.exceptions import ConflictError, ValidationFailure
from ...models.domain import Customer
from ...persistence.base import CustomerOrder, LedgerStore
from ...schemas.customers import CustomerCreate
from .codes import DEFAULT_DIGITS, DEFAULT_PREFIX, next_customer_code

logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK = 50

_OPTIONAL_TEXT_FIELDS = ("kana", "phone", "email", "postal", "address1", "address2", "note")
_SEARCH_FIELDS = ("code", "name", "kana", "phone", "address1", "address2")


def clean_text(value: Optional[str]) -> Optional[str]:
    """Trim ``value``; blank strings become ``None``."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def create_customer(
    store: LedgerStore,
    payload: CustomerCreate,
    *,
    prefix: str = DEFAULT_PREFIX,
    digits: int = DEFAULT_DIGITS,
    lookback: int = DEFAULT_LOOKBACK,
) -> Customer:
    """Register a customer, numbering its code when the caller did not supply one.

    The read of recent codes and the insert are separate calls. Two concurrent
    registrations can compute the same code; the store's uniqueness constraint
    then rejects the second one with ``DuplicateRecordError``.
    """
    name = clean_text(payload.name)
    if not name:
        raise ValidationFailure("name is required")

    code = clean_text(payload.code)
    if code is None:
        code = next_customer_code(store.recent_customer_codes(lookback), prefix=prefix, digits=digits)

    values = {field: clean_text(getattr(payload, field)) for field in _OPTIONAL_TEXT_FIELDS}
    values.update(
        code=code,
        name=name,
        is_active=True if payload.is_active is None else payload.is_active,
    )
    customer = store.insert_customer(values)
    logger.info(f"Registered customer {customer.id} with code {customer.code}")
    return customer


def filter_customers(customers: Iterable[Customer], term: Optional[str]) -> list[Customer]:
    """Case-insensitive substring search across code, name, kana, phone and address."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(customers)
    matched = []
    for customer in customers:
        haystack = " ".join(getattr(customer, field) or "" for field in _SEARCH_FIELDS).lower()
        if needle in haystack:
            matched.append(customer)
    return matched


def list_customers(
    store: LedgerStore,
    order: CustomerOrder = "created",
    search: Optional[str] = None,
) -> list[Customer]:
    return filter_customers(store.list_customers(order), search)


def delete_customer(store: LedgerStore, customer_id: int) -> None:
    """Remove a customer that no shipment references."""
    referenced = store.count_customer_shipments(customer_id)
    if referenced:
        raise ConflictError(f"customer {customer_id} is referenced by {referenced} shipment(s)")
    removed = store.delete_customer(customer_id)
    logger.info(f"Deleted customer {customer_id} ({removed} row(s))")
