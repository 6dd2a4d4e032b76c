from datetime import date
from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from openpyxl import load_workbook

from haulbook.middleware.exceptions import ValidationFailure
from haulbook.models.domain import Shipment
from haulbook.persistence import InMemoryStore
from haulbook.services.invoices import close_invoice, preview_invoice, summarize


@pytest.fixture
def customer_x(api_client: TestClient) -> int:
    return api_client.post("/api/customers", json={"name": "Customer X"}).json()["id"]


def _shipment(shipment_id: int, freight: int, toll: int = 0, exempt: int = 0) -> Shipment:
    return Shipment(
        id=shipment_id,
        date=date(2024, 5, 1),
        customer_id=1,
        freight_amount=freight,
        toll_amount=toll,
        tax_exempt_amount=exempt,
    )


def test_summarize_total_is_sum_of_components_and_rows() -> None:
    rows = [_shipment(1, 25000, 1200, 300), _shipment(2, 18000), _shipment(3, 0, 850)]

    summary = summarize(rows)

    assert summary.count == 3
    assert (summary.freight, summary.toll, summary.exempt) == (43000, 2050, 300)
    assert summary.total == summary.freight + summary.toll + summary.exempt
    assert summary.total == sum(row.total_amount for row in rows)


def test_summarize_empty_sequence() -> None:
    assert summarize([]).as_dict() == {"count": 0, "freight": 0, "toll": 0, "exempt": 0, "total": 0}


@pytest.mark.parametrize(
    "window",
    [
        (None, date(2024, 5, 31), 1),
        (date(2024, 5, 1), None, 1),
        (date(2024, 5, 1), date(2024, 5, 31), None),
    ],
)
def test_preview_and_close_require_full_window(window) -> None:
    store = InMemoryStore()
    with pytest.raises(ValidationFailure):
        preview_invoice(store, *window)
    with pytest.raises(ValidationFailure):
        close_invoice(store, *window)


def test_invoice_scenario_close_then_preview_is_empty(api_client: TestClient, customer_x: int) -> None:
    created = api_client.post(
        "/api/shipments",
        json={"date": "2024-05-01", "customer_id": customer_x, "freight_amount": 25000, "toll_amount": 0, "tax_exempt_amount": 0},
    ).json()
    window = {"from": "2024-05-01", "to": "2024-05-01", "customer_id": customer_x}

    preview = api_client.get("/api/invoices", params={**window, "onlyUnclosed": "1"}).json()
    assert [row["id"] for row in preview["rows"]] == [created["id"]]
    assert preview["sum"] == {"count": 1, "freight": 25000, "toll": 0, "exempt": 0, "total": 25000}

    first_close = api_client.post("/api/invoices", json=window)
    assert first_close.status_code == 200
    assert first_close.json() == {"closedCount": 1}

    after = api_client.get("/api/invoices", params={**window, "onlyUnclosed": "1"}).json()
    assert after["rows"] == []
    assert after["sum"]["total"] == 0

    second_close = api_client.post("/api/invoices", json=window)
    assert second_close.json() == {"closedCount": 0}

    with_closed = api_client.get("/api/invoices", params={**window, "onlyUnclosed": "0"}).json()
    assert [row["status"] for row in with_closed["rows"]] == ["closed"]


def test_preview_rows_are_oldest_first_and_scoped_to_customer(
    api_client: TestClient, customer_x: int, add_shipment
) -> None:
    other = api_client.post("/api/customers", json={"name": "Other"}).json()["id"]
    late = add_shipment(customer_x, date(2024, 5, 20), freight_amount=1000)
    early = add_shipment(customer_x, date(2024, 5, 2), toll_amount=500)
    add_shipment(customer_x, date(2024, 6, 1), freight_amount=9999)
    add_shipment(other, date(2024, 5, 10), freight_amount=7777)

    payload = api_client.get(
        "/api/invoices", params={"from": "2024-05-01", "to": "2024-05-31", "customer_id": customer_x}
    ).json()

    assert [row["id"] for row in payload["rows"]] == [early, late]
    assert payload["sum"] == {"count": 2, "freight": 1000, "toll": 500, "exempt": 0, "total": 1500}


def test_close_only_touches_unclosed_rows_in_window(
    api_client: TestClient, customer_x: int, add_shipment, store: InMemoryStore
) -> None:
    inside = add_shipment(customer_x, date(2024, 5, 15))
    add_shipment(customer_x, date(2024, 5, 16), status="closed")
    outside = add_shipment(customer_x, date(2024, 6, 1))

    response = api_client.post("/api/invoices", json={"from": "2024-05-01", "to": "2024-05-31", "customer_id": customer_x})

    assert response.json() == {"closedCount": 1}
    assert store.get_shipment_status(inside) == "closed"
    assert store.get_shipment_status(outside) == "unclosed"


def test_invoice_endpoints_report_missing_parameters(api_client: TestClient) -> None:
    preview = api_client.get("/api/invoices", params={"from": "2024-05-01", "to": "2024-05-31"})
    close = api_client.post("/api/invoices", json={"from": "2024-05-01", "customer_id": 1})

    assert preview.status_code == 400
    assert preview.json() == {"error": "from/to/customer_id are required"}
    assert close.status_code == 400
    assert close.json() == {"error": "from/to/customer_id are required"}


def test_blank_only_unclosed_flag_is_rejected(api_client: TestClient, customer_x: int) -> None:
    response = api_client.get(
        "/api/invoices",
        params={"from": "2024-05-01", "to": "2024-05-31", "customer_id": customer_x, "onlyUnclosed": ""},
    )

    assert response.status_code == 400
    assert "onlyUnclosed" in response.json()["error"]


def test_export_returns_workbook_with_rows_and_totals(
    api_client: TestClient, customer_x: int, add_shipment
) -> None:
    add_shipment(customer_x, date(2024, 5, 1), freight_amount=25000, toll_amount=1500)
    add_shipment(customer_x, date(2024, 5, 2), tax_exempt_amount=400)

    response = api_client.get(
        "/api/invoices/export", params={"from": "2024-05-01", "to": "2024-05-31", "customer_id": customer_x}
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert f"invoice_{customer_x}_20240501_20240531.xlsx" in response.headers["content-disposition"]

    worksheet = load_workbook(BytesIO(response.content)).active
    values = [row for row in worksheet.iter_rows(values_only=True)]
    assert values[0][:2] == ("Customer", "Customer X")
    totals = {row[0]: row[1] for row in values if row and row[0] in {"Count", "Total"}}
    assert totals == {"Count": 2, "Total": 26900}


def test_export_of_empty_window_still_names_customer(api_client: TestClient, customer_x: int) -> None:
    response = api_client.get(
        "/api/invoices/export", params={"from": "2024-05-01", "to": "2024-05-31", "customer_id": customer_x}
    )

    assert response.status_code == 200
    worksheet = load_workbook(BytesIO(response.content)).active
    assert worksheet["B1"].value == "Customer X"
    totals = {row[0]: row[1] for row in worksheet.iter_rows(values_only=True) if row and row[0] in {"Count", "Total"}}
    assert totals == {"Count": 0, "Total": 0}
