"""Customer service helpers."""

from .codes import code_number, next_customer_code
from .registry import (
    clean_text,
    create_customer,
    delete_customer,
    filter_customers,
    list_customers,
)

__all__ = [
    "clean_text",
    "code_number",
    "create_customer",
    "delete_customer",
    "filter_customers",
    "list_customers",
    "next_customer_code",
]
