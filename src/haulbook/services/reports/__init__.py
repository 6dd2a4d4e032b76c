from .customer_summary import customer_summary, grand_total, summarize_by_customer
from .dispatch import UNASSIGNED_VEHICLE, dispatch_board, group_by_vehicle, unassigned_shipments

__all__ = [
    "UNASSIGNED_VEHICLE",
    "customer_summary",
    "dispatch_board",
    "grand_total",
    "group_by_vehicle",
    "summarize_by_customer",
    "unassigned_shipments",
]
