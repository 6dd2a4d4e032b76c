"""Request-scoped accessors for the process-wide store handle and settings."""

from __future__ import annotations

from fastapi import Request

from ..config import Settings
from ..middleware.exceptions import StoreError
from ..persistence.base import LedgerStore


def get_store(request: Request) -> LedgerStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreError("Store is not initialised")
    return store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
