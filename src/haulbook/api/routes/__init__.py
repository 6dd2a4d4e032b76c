"""Route group exports."""

from . import customers, health, invoices, reports, shipments

__all__ = ["customers", "health", "invoices", "reports", "shipments"]
