"""Shipment line-item endpoints."""

from __future__ import annotations

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query, status

from ...models.domain import ShipmentFilters
from ...persistence.base import LedgerStore
from ...schemas.shipments import (
    OkResponse,
    ShipmentCreate,
    ShipmentCreated,
    ShipmentModel,
    ShipmentStatus,
    ShipmentUpdate,
)
from ...services.shipments import create_shipment, delete_shipment, list_shipments, update_shipment
from ..deps import get_store

router = APIRouter(prefix="/shipments", tags=["shipments"])


@router.get("", response_model=List[ShipmentModel], status_code=status.HTTP_200_OK)
def get_shipments(
    date_from: date | None = Query(default=None, alias="from", description="Inclusive lower date bound"),
    date_to: date | None = Query(default=None, alias="to", description="Inclusive upper date bound"),
    customer_id: int | None = Query(default=None, description="Optional customer filter"),
    status_filter: ShipmentStatus | None = Query(default=None, alias="status", description="Optional status filter"),
    store: LedgerStore = Depends(get_store),
) -> List[ShipmentModel]:
    filters = ShipmentFilters(
        date_from=date_from,
        date_to=date_to,
        customer_id=customer_id,
        status=status_filter,
    )
    return [ShipmentModel.model_validate(row) for row in list_shipments(store, filters)]


@router.post("", response_model=ShipmentCreated, status_code=status.HTTP_200_OK)
def post_shipment(payload: ShipmentCreate, store: LedgerStore = Depends(get_store)) -> ShipmentCreated:
    return ShipmentCreated(id=create_shipment(store, payload))


@router.put("", response_model=OkResponse, status_code=status.HTTP_200_OK)
def put_shipment(payload: ShipmentUpdate, store: LedgerStore = Depends(get_store)) -> OkResponse:
    update_shipment(store, payload)
    return OkResponse()


@router.delete("/{shipment_id}", response_model=OkResponse, status_code=status.HTTP_200_OK)
def remove_shipment(shipment_id: int, store: LedgerStore = Depends(get_store)) -> OkResponse:
    delete_shipment(store, shipment_id)
    return OkResponse()
