"""Store backends and the factory that picks one from settings."""

from __future__ import annotations

import logging

from ..config import Settings
from .base import LedgerStore
from .memory import InMemoryStore
from .supabase_store import SupabaseStore

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> LedgerStore:
    """Construct the process-wide store handle for the configured backend."""
    if settings.storage_backend == "memory":
        logger.warning("Using the in-memory store - data is lost when the process exits")
        return InMemoryStore()

    from ..db.supabase import create_supabase_client

    return SupabaseStore(create_supabase_client(settings))


__all__ = ["LedgerStore", "InMemoryStore", "SupabaseStore", "build_store"]
