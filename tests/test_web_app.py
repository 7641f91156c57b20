"""Mini README: Tests for the REST interface.

Exercises record CRUD routes, request validation, the salary grid endpoints
and the dashboard summary through FastAPI's ``TestClient`` with an
in-memory backend.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from vipfinance.interface import create_application
from vipfinance.persistence import MemoryAdapter
from vipfinance.persistence.demo_data import demo_documents
from vipfinance.records import RecordStore
from vipfinance.reports import FinanceSummary
from vipfinance.salaries import DOCUMENT_KEY, SalaryGrid
from vipfinance.services import DashboardServices


@pytest.fixture()
def adapter() -> MemoryAdapter:
    return MemoryAdapter(demo_documents())


@pytest.fixture()
def client(adapter: MemoryAdapter) -> TestClient:
    store = RecordStore(adapter)
    grid = SalaryGrid(adapter, ["Shlomo", "Avi"])
    services = DashboardServices(store=store, grid=grid, summary=FinanceSummary(store, grid))
    return TestClient(create_application(services))


def test_list_returns_records_in_display_order(client: TestClient) -> None:
    response = client.get("/api/income")

    assert response.status_code == 200
    dates = [record["date"] for record in response.json()]
    assert dates == sorted(dates, reverse=True)


def test_create_update_delete_cycle(client: TestClient) -> None:
    created = client.post(
        "/api/expenses",
        json={"amount": 450, "description": "Mops", "category": "Materials and equipment", "date": "2025-06-21"},
    )
    assert created.status_code == 201
    record_id = created.json()["id"]
    assert record_id == 6

    updated = client.put(
        f"/api/expenses/{record_id}",
        json={"amount": 500, "description": "Mops and buckets", "category": "Materials and equipment", "date": "2025-06-21"},
    )
    assert updated.status_code == 200
    assert updated.json() == {
        "id": 6,
        "amount": 500.0,
        "description": "Mops and buckets",
        "category": "Materials and equipment",
        "date": "2025-06-21",
    }

    deleted = client.delete(f"/api/expenses/{record_id}")
    assert deleted.status_code == 204
    assert all(record["id"] != 6 for record in client.get("/api/expenses").json())


def test_blank_required_text_is_rejected_before_the_store(client: TestClient, adapter: MemoryAdapter) -> None:
    before = adapter.get("outstandingCustomers")

    response = client.post(
        "/api/outstandingCustomers",
        json={"name": "   ", "amount": 100, "description": "Debt", "due_date": "2025-07-01"},
    )

    assert response.status_code == 422
    assert adapter.get("outstandingCustomers") == before


def test_unknown_ids_return_404(client: TestClient) -> None:
    payload = {"employee": "Ben", "amount": 100, "description": "Advance", "method": "Cash", "date": "2025-06-01"}

    assert client.put("/api/advances/99", json=payload).status_code == 404
    assert client.delete("/api/advances/99").status_code == 404


def test_storage_failures_return_503(client: TestClient, adapter: MemoryAdapter) -> None:
    adapter.fail_writes = True

    response = client.delete("/api/income/1")

    assert response.status_code == 503
    adapter.fail_writes = False
    assert any(record["id"] == 1 for record in client.get("/api/income").json())


def test_salary_table_endpoints(client: TestClient) -> None:
    """View a default month, add a worker, edit a cell and read it back."""

    default = client.get("/api/fieldWorkerSalaries/2024/2").json()
    assert default["workers"] == ["Shlomo", "Avi"]
    assert len(default["data"]) == 29

    added = client.post("/api/fieldWorkerSalaries/2024/2/workers", json={"name": "Meir"})
    assert added.status_code == 201
    assert added.json()["worker_totals"]["Meir"] == 0

    duplicate = client.post("/api/fieldWorkerSalaries/2024/2/workers", json={"name": "Meir"})
    assert duplicate.status_code == 400

    edited = client.patch(
        "/api/fieldWorkerSalaries/2024/2/cells",
        json={"date": "2024-02-29", "worker": "Meir", "amount": "abc"},
    )
    assert edited.status_code == 200
    edited = client.patch(
        "/api/fieldWorkerSalaries/2024/2/cells",
        json={"date": "2024-02-29", "worker": "Meir", "amount": 275},
    )
    body = edited.json()
    assert body["worker_totals"]["Meir"] == 275
    assert body["grand_total"] == sum(body["worker_totals"].values()) == sum(body["date_totals"].values())

    document = client.get("/api/fieldWorkerSalaries").json()
    assert document["2024"]["2"]["workers"] == ["Shlomo", "Avi", "Meir"]


def test_salary_table_put_and_invalid_period(client: TestClient) -> None:
    saved = client.put(
        "/api/fieldWorkerSalaries/2025/6",
        json={"workers": ["A", "B"], "data": {"2025-06-01": {"A": 100, "B": 50}, "2025-06-02": {"A": 0, "B": 0}}},
    )

    assert saved.status_code == 200
    assert saved.json()["grand_total"] == 150
    assert client.get("/api/fieldWorkerSalaries/2025/6").json()["worker_totals"] == {"A": 100, "B": 50}
    assert client.get("/api/fieldWorkerSalaries/2025/13").status_code == 400
    outside = client.put(
        "/api/fieldWorkerSalaries/2025/6",
        json={"workers": ["A"], "data": {"2025-07-01": {"A": 1}}},
    )
    assert outside.status_code == 400


def test_replace_whole_salary_document(client: TestClient) -> None:
    document = {"2025": {"5": {"workers": ["A"], "data": {"2025-05-01": {"A": 10}}}}}

    response = client.put("/api/fieldWorkerSalaries", json=document)

    assert response.status_code == 200
    assert client.get("/api/fieldWorkerSalaries").json() == document


def test_summary_and_status(client: TestClient) -> None:
    summary = client.get("/api/summary", params={"year": 2025, "month": 6}).json()
    status = client.get("/api/status").json()

    assert summary["income"] == pytest.approx(85000.0)
    assert len(summary["monthly_totals"]) == 12
    assert [entry["name"] for entry in summary["worker_totals"]] == ["Shlomo", "Avi"]
    assert status["storage"]["backend"] == "memory"
    assert status["records"]["advances"] == 4
    assert client.get("/api/summary", params={"month": 13}).status_code == 400


def test_out_of_range_amount_is_stored_as_zero(client: TestClient) -> None:
    """An absurd amount never leaves the month unreadable."""

    edited = client.patch(
        "/api/fieldWorkerSalaries/2025/6/cells",
        json={"date": "2025-06-01", "worker": "Avi", "amount": "1e5000"},
    )

    assert edited.status_code == 200
    assert edited.json()["data"]["2025-06-01"]["Avi"] == 0
    assert client.get("/api/fieldWorkerSalaries/2025/6").status_code == 200
    assert client.get("/api/summary", params={"year": 2025, "month": 6}).status_code == 200


def test_malformed_salary_documents(client: TestClient, adapter: MemoryAdapter) -> None:
    rejected = client.put(
        "/api/fieldWorkerSalaries",
        json={"2025": {"6": {"workers": ["A"], "data": [["2025-06-01", 5]]}}},
    )
    assert rejected.status_code == 400

    adapter.set(DOCUMENT_KEY, {"2025": {"6": {"workers": ["A"], "data": {"2025-06-01": [5]}}}})
    assert client.get("/api/fieldWorkerSalaries/2025/6").status_code == 503
