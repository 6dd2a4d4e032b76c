"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...config import Settings
from ...middleware.exceptions import StoreError
from ...persistence.base import LedgerStore
from ..deps import get_app_settings, get_store

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/database", status_code=status.HTTP_200_OK)
def check_database(
    store: LedgerStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> dict:
    """Check that the configured store answers a trivial query."""
    try:
        store.ping()
    except StoreError as exc:
        return {
            "backend": settings.storage_backend,
            "connected": False,
            "error": exc.message,
        }
    return {"backend": settings.storage_backend, "connected": True}
