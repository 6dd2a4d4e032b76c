"""Customer master endpoints."""

from __future__ import annotations

from typing import List, Literal

from fastapi import APIRouter, Depends, Query, status

from ...config import Settings
from ...persistence.base import LedgerStore
from ...schemas.customers import CustomerCreate, CustomerModel
from ...schemas.shipments import OkResponse
from ...services.customers import create_customer, delete_customer, list_customers
from ..deps import get_app_settings, get_store

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=List[CustomerModel], status_code=status.HTTP_200_OK)
def get_customers(
    order: Literal["created", "name"] = Query(
        default="created",
        description="'created' lists the newest first, 'name' sorts alphabetically.",
    ),
    q: str | None = Query(default=None, description="Case-insensitive search across code/name/kana/phone/address"),
    store: LedgerStore = Depends(get_store),
) -> List[CustomerModel]:
    return [CustomerModel.model_validate(customer) for customer in list_customers(store, order=order, search=q)]


@router.post("", response_model=CustomerModel, status_code=status.HTTP_201_CREATED)
def register_customer(
    payload: CustomerCreate,
    store: LedgerStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> CustomerModel:
    customer = create_customer(
        store,
        payload,
        prefix=settings.customer_code_prefix,
        digits=settings.customer_code_digits,
        lookback=settings.customer_code_lookback,
    )
    return CustomerModel.model_validate(customer)


@router.delete("/{customer_id}", response_model=OkResponse, status_code=status.HTTP_200_OK)
def remove_customer(customer_id: int, store: LedgerStore = Depends(get_store)) -> OkResponse:
    delete_customer(store, customer_id)
    return OkResponse()
