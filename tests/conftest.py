from datetime import date
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from haulbook.config import Settings
from haulbook.main import create_app
from haulbook.persistence import InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", frontend_allowed_origins=(), _env_file=None)


@pytest.fixture
def api_client(store: InMemoryStore, settings: Settings) -> TestClient:
    app = create_app(settings=settings, store=store)
    return TestClient(app)


@pytest.fixture
def add_shipment(store: InMemoryStore) -> Callable[..., int]:
    """Insert a shipment straight into the store and return its id."""

    def _add(customer_id: int, day: date, **overrides) -> int:
        values = {
            "date": day,
            "customer_id": customer_id,
            "origin": "Tokyo",
            "destination": "Osaka",
            "item_name": None,
            "vehicle_no": None,
            "driver_name": None,
            "partner_name": None,
            "freight_amount": 0,
            "toll_amount": 0,
            "tax_exempt_amount": 0,
            "note": None,
            "status": "unclosed",
        }
        values.update(overrides)
        return store.insert_shipment(values)

    return _add
