"""
Tests for project, line item, payment and invoice endpoints.
"""
from decimal import Decimal
import pytest
from creatorflow.core.errors import InvalidPaymentError
from creatorflow.services import expense_service


@pytest.fixture
def project(client, auth_headers):
    response = client.post(
        "/api/projects",
        json={"title": "Q4 TikTok Launch", "budget": "1000"},
        headers=auth_headers
    )
    assert response.status_code == 201
    return response.json()


def add_item(client, headers, project_id, **fields):
    response = client.post(f"/api/projects/{project_id}/expenses", json=fields, headers=headers)
    assert response.status_code == 201
    return response.json()


def test_new_project_is_empty_and_unpaid(project):
    assert project["expenses"] == []
    assert project["status"] == "Unpaid"
    assert Decimal(project["paid_amount"]) == Decimal("0")


def test_blank_title_rejected(client, auth_headers):
    response = client.post("/api/projects", json={"title": "  "}, headers=auth_headers)
    assert response.status_code == 422


def test_budget_scenario(client, auth_headers, project):
    add_item(client, auth_headers, project["id"], description="Camera rental", quantity=2, unit_price="50")
    add_item(client, auth_headers, project["id"], description="Editing", quantity=1, unit_price="100")

    summary = client.get(f"/api/projects/{project['id']}/summary", headers=auth_headers).json()
    assert Decimal(summary["total_cost"]) == Decimal("200")
    assert Decimal(summary["percent_used"]) == Decimal("20")
    assert Decimal(summary["balance"]) == Decimal("200")
    assert summary["item_count"] == 2
    assert summary["has_budget"] is True


def test_blank_line_item_defaults(client, auth_headers, project):
    response = client.post(f"/api/projects/{project['id']}/expenses", headers=auth_headers)
    assert response.status_code == 201
    item = response.json()
    assert item["category"] == "Other"
    assert item["quantity"] == 1
    assert Decimal(item["amount"]) == Decimal("0")


def test_line_items_keep_order_and_update(client, auth_headers, project):
    first = add_item(client, auth_headers, project["id"], description="First", quantity=1, unit_price="10")
    add_item(client, auth_headers, project["id"], description="Second", quantity=1, unit_price="20")

    response = client.patch(
        f"/api/projects/{project['id']}/expenses/{first['id']}",
        json={"quantity": 3, "category": "Equipment"},
        headers=auth_headers
    )
    assert response.status_code == 200
    assert Decimal(response.json()["amount"]) == Decimal("30")

    detail = client.get(f"/api/projects/{project['id']}", headers=auth_headers).json()
    assert [i["description"] for i in detail["expenses"]] == ["First", "Second"]

    assert client.delete(
        f"/api/projects/{project['id']}/expenses/{first['id']}", headers=auth_headers
    ).status_code == 204
    detail = client.get(f"/api/projects/{project['id']}", headers=auth_headers).json()
    assert [i["description"] for i in detail["expenses"]] == ["Second"]


def test_payments_drive_status(client, auth_headers, project):
    add_item(client, auth_headers, project["id"], quantity=1, unit_price="100")

    summary = client.post(
        f"/api/projects/{project['id']}/payments", json={"amount": "40"}, headers=auth_headers
    ).json()
    assert summary["status"] == "Unpaid"
    assert Decimal(summary["balance"]) == Decimal("60")

    summary = client.post(
        f"/api/projects/{project['id']}/payments", json={"amount": "70"}, headers=auth_headers
    ).json()
    assert summary["status"] == "Paid"
    assert Decimal(summary["paid_amount"]) == Decimal("110")
    assert Decimal(summary["balance"]) == Decimal("-10")
    assert Decimal(summary["display_balance"]) == Decimal("0")


def test_non_positive_payment_rejected(client, auth_headers, project):
    for amount in ["0", "-5"]:
        response = client.post(
            f"/api/projects/{project['id']}/payments", json={"amount": amount}, headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["error"] == "invalid_payment"

    detail = client.get(f"/api/projects/{project['id']}", headers=auth_headers).json()
    assert Decimal(detail["paid_amount"]) == Decimal("0")


def test_sub_cent_payment_rejected(client, auth_headers, project):
    response = client.post(
        f"/api/projects/{project['id']}/payments", json={"amount": "0.004"}, headers=auth_headers
    )
    assert response.status_code == 422

    detail = client.get(f"/api/projects/{project['id']}", headers=auth_headers).json()
    assert Decimal(detail["paid_amount"]) == Decimal("0")


def test_sub_cent_payment_rejected_by_service(store):
    project = expense_service.create_project(store, "Q4 TikTok Launch", 1000)
    with pytest.raises(InvalidPaymentError):
        expense_service.record_project_payment(store, project.id, "0.005")

    project = expense_service.record_project_payment(store, project.id, "0.05")
    assert project.paid_amount == Decimal("0.05")


def test_blank_title_update_rejected(client, auth_headers, project):
    response = client.patch(f"/api/projects/{project['id']}", json={"title": "   "}, headers=auth_headers)
    assert response.status_code == 422

    detail = client.get(f"/api/projects/{project['id']}", headers=auth_headers).json()
    assert detail["title"] == "Q4 TikTok Launch"

def test_update_and_delete_project(client, auth_headers, project):
    response = client.patch(
        f"/api/projects/{project['id']}", json={"title": "Q1 Launch", "budget": "0"}, headers=auth_headers
    )
    assert response.json()["title"] == "Q1 Launch"
    summary = client.get(f"/api/projects/{project['id']}/summary", headers=auth_headers).json()
    assert summary["has_budget"] is False
    assert Decimal(summary["percent_used"]) == Decimal("0")

    assert client.delete(f"/api/projects/{project['id']}", headers=auth_headers).status_code == 204
    response = client.get(f"/api/projects/{project['id']}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "not_found", "detail": "Project not found"}


def test_missing_line_item(client, auth_headers, project):
    response = client.delete(f"/api/projects/{project['id']}/expenses/999", headers=auth_headers)
    assert response.status_code == 404


def test_invoice(client, auth_headers, project):
    add_item(client, auth_headers, project["id"], description="Editing", quantity=2, unit_price="75")

    response = client.post(
        f"/api/projects/{project['id']}/invoice",
        json={"client_name": "Glow Labs", "discount_amount": "20", "invoice_number": "INV-12345"},
        headers=auth_headers
    )
    assert response.status_code == 200
    invoice = response.json()
    assert invoice["invoice_number"] == "INV-12345"
    assert Decimal(invoice["subtotal"]) == Decimal("150")
    assert Decimal(invoice["grand_total"]) == Decimal("130")
    assert len(invoice["lines"]) == 1

    generated = client.post(f"/api/projects/{project['id']}/invoice", headers=auth_headers).json()
    assert generated["invoice_number"].startswith("INV-")


def test_invoice_discount_cannot_go_below_zero(client, auth_headers, project):
    add_item(client, auth_headers, project["id"], quantity=1, unit_price="10")
    invoice = client.post(
        f"/api/projects/{project['id']}/invoice", json={"discount_amount": "50"}, headers=auth_headers
    ).json()
    assert Decimal(invoice["grand_total"]) == Decimal("0")


def test_print_and_share_invoice(client, auth_headers, project):
    add_item(client, auth_headers, project["id"], description="Editing", quantity=1, unit_price="100")
    config = {"invoice_number": "INV-55555"}

    printed = client.post(f"/api/projects/{project['id']}/invoice/print", json=config, headers=auth_headers)
    assert printed.status_code == 200
    assert printed.headers["content-type"].startswith("text/plain")
    assert "INVOICE INV-55555" in printed.text
    assert "Editing" in printed.text

    shared = client.post(f"/api/projects/{project['id']}/invoice/share", json=config, headers=auth_headers).json()
    assert shared["channel"] == "clipboard"
    assert shared["text"] == "Invoice INV-55555 for Q4 TikTok Launch\nTotal: $100.00"
    assert shared["message"] == "Invoice details copied to clipboard."
