import re
from datetime import date

from fastapi.testclient import TestClient

from haulbook.persistence import InMemoryStore


def test_register_customer_assigns_code(api_client: TestClient) -> None:
    response = api_client.post("/api/customers", json={"name": "Yamada Transport", "phone": "03-0000-0000"})

    assert response.status_code == 201
    payload = response.json()
    assert re.fullmatch(r"C\d{6}", payload["code"])
    assert payload["name"] == "Yamada Transport"
    assert payload["is_active"] is True
    assert payload["id"] >= 1


def test_register_customer_rejects_blank_name(api_client: TestClient) -> None:
    response = api_client.post("/api/customers", json={"name": "   "})

    assert response.status_code == 400
    assert response.json() == {"error": "name is required"}


def test_register_customer_rejects_missing_name(api_client: TestClient) -> None:
    response = api_client.post("/api/customers", json={"phone": "03"})

    assert response.status_code == 400
    assert "name" in response.json()["error"]


def test_duplicate_code_is_reported_as_error(api_client: TestClient) -> None:
    assert api_client.post("/api/customers", json={"name": "A", "code": "C000007"}).status_code == 201

    response = api_client.post("/api/customers", json={"name": "B", "code": "C000007"})

    assert response.status_code == 400
    assert "duplicate" in response.json()["error"]


def test_list_customers_orders_and_searches(api_client: TestClient) -> None:
    for name, kana in (("Sato Unyu", "サトウ"), ("Abe Butsuryu", "アベ"), ("Kato Express", "カトウ")):
        api_client.post("/api/customers", json={"name": name, "kana": kana})

    newest_first = api_client.get("/api/customers").json()
    assert [c["name"] for c in newest_first] == ["Kato Express", "Abe Butsuryu", "Sato Unyu"]

    by_name = api_client.get("/api/customers", params={"order": "name"}).json()
    assert [c["name"] for c in by_name] == ["Abe Butsuryu", "Kato Express", "Sato Unyu"]

    found = api_client.get("/api/customers", params={"q": "EXPRESS"}).json()
    assert [c["name"] for c in found] == ["Kato Express"]

    by_code = api_client.get("/api/customers", params={"q": "c000001"}).json()
    assert [c["name"] for c in by_code] == ["Sato Unyu"]


def test_delete_customer_refused_while_referenced(api_client: TestClient, store: InMemoryStore, add_shipment) -> None:
    customer = api_client.post("/api/customers", json={"name": "Referenced"}).json()
    add_shipment(customer["id"], date(2024, 5, 1))

    response = api_client.delete(f"/api/customers/{customer['id']}")

    assert response.status_code == 409
    assert "referenced" in response.json()["error"]
    assert len(store.list_customers()) == 1


def test_delete_unreferenced_customer(api_client: TestClient, store: InMemoryStore) -> None:
    customer = api_client.post("/api/customers", json={"name": "Unused"}).json()

    response = api_client.delete(f"/api/customers/{customer['id']}")

    assert response.status_code == 200
    assert response.json() == {"ok": True}
    assert store.list_customers() == []
