"""Shipment service helpers."""

from .service import create_shipment, delete_shipment, list_shipments, update_shipment

__all__ = ["create_shipment", "delete_shipment", "list_shipments", "update_shipment"]
