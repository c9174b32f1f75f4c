"""
Tests for the category, delivery, task, influencer, dashboard and feed endpoints.
"""
from decimal import Decimal
import pytest
from creatorflow.core.config import settings
from creatorflow.db.seed import seed_demo_data


@pytest.fixture
def influencer(client, auth_headers):
    response = client.post(
        "/api/influencers",
        json={"name": "Alex Rivera", "handle": "@alex_tech_tips", "target_videos": 5},
        headers=auth_headers
    )
    assert response.status_code == 201
    return response.json()


def test_categories(client, auth_headers):
    assert client.get("/api/categories", headers=auth_headers).json() == settings.DEFAULT_CATEGORIES

    response = client.post("/api/categories", json={"name": " Travel "}, headers=auth_headers)
    assert response.status_code == 201
    assert response.json()[-1] == "Travel"

    duplicate = client.post("/api/categories", json={"name": "Other"}, headers=auth_headers)
    assert duplicate.status_code == 409
    assert duplicate.json() == {"error": "category_exists", "detail": "Category already exists"}

    blank = client.post("/api/categories", json={"name": "  "}, headers=auth_headers)
    assert blank.status_code == 400

    removed = client.delete("/api/categories/Travel", headers=auth_headers).json()
    assert removed["message"] == "Category deleted"
    assert "Travel" not in removed["data"]

    kept = client.delete("/api/categories/Other", headers=auth_headers).json()
    assert kept["message"] == "Category unchanged"
    assert "Other" in kept["data"]


def test_delivery_bulk_actions(client, auth_headers, influencer):
    ids = []
    for name, price in [("Tech Hub Pro", "45"), ("Glow Cream", "15.50"), ("Desk Lamp", "30")]:
        response = client.post(
            "/api/deliveries",
            json={"influencer_id": influencer["id"], "product_name": name, "price": price},
            headers=auth_headers
        )
        assert response.status_code == 201
        assert response.json()["influencer_name"] == "Alex Rivera"
        ids.append(response.json()["id"])

    response = client.post(
        "/api/deliveries/bulk-update",
        json={"ids": ids[:2], "payment_status": "Paid", "status": "Delivered"},
        headers=auth_headers
    )
    assert response.json() == {"affected": 2}

    stats = client.get("/api/deliveries/stats", headers=auth_headers).json()
    assert Decimal(stats["paid"]) == Decimal("60.50")
    assert Decimal(stats["unpaid"]) == Decimal("30")

    unpaid = client.get("/api/deliveries?payment=Unpaid", headers=auth_headers).json()
    assert [d["product_name"] for d in unpaid] == ["Desk Lamp"]
    found = client.get("/api/deliveries?search=glow", headers=auth_headers).json()
    assert [d["status"] for d in found] == ["Delivered"]

    response = client.post("/api/deliveries/bulk-delete", json={"ids": ids[1:]}, headers=auth_headers)
    assert response.json() == {"affected": 2}
    remaining = client.get("/api/deliveries", headers=auth_headers).json()
    assert [d["id"] for d in remaining] == ids[:1]


def test_bulk_update_requires_a_change(client, auth_headers):
    response = client.post("/api/deliveries/bulk-update", json={"ids": [1]}, headers=auth_headers)
    assert response.status_code == 422


def test_delivery_for_unknown_influencer(client, auth_headers):
    response = client.post(
        "/api/deliveries",
        json={"influencer_id": 999, "product_name": "Mystery Box"},
        headers=auth_headers
    )
    assert response.json()["influencer_name"] == "Unknown"


def test_tasks(client, auth_headers):
    for title in ["Book studio", "Send contracts", "Book flights"]:
        response = client.post("/api/tasks", json={"title": title, "priority": "High"}, headers=auth_headers)
        assert response.status_code == 201
        assert response.json()["status"] == "Not Done"

    tasks = client.get("/api/tasks", headers=auth_headers).json()
    assert [t["title"] for t in tasks] == ["Book flights", "Send contracts", "Book studio"]
    assert [t["title"] for t in client.get("/api/tasks?search=BOOK", headers=auth_headers).json()] == [
        "Book flights", "Book studio"
    ]

    toggled = client.post(f"/api/tasks/{tasks[0]['id']}/toggle", headers=auth_headers).json()
    assert toggled["status"] == "Done"
    assert client.get("/api/tasks/stats", headers=auth_headers).json() == {"done": 1, "pending": 2}

    toggled = client.post(f"/api/tasks/{tasks[0]['id']}/toggle", headers=auth_headers).json()
    assert toggled["status"] == "Not Done"


def test_influencer_progress(client, auth_headers, influencer):
    url = f"/api/influencers/{influencer['id']}"
    assert client.post(f"{url}/progress/2", headers=auth_headers).json()["completed_videos"] == 3
    assert client.post(f"{url}/progress/2", headers=auth_headers).json()["completed_videos"] == 2
    assert client.post(f"{url}/progress/0", headers=auth_headers).json()["completed_videos"] == 1
    assert client.post(f"{url}/reset", headers=auth_headers).json()["completed_videos"] == 0

    response = client.patch(url, json={"status": "archived"}, headers=auth_headers)
    assert response.json()["status"] == "archived"
    assert client.delete(url, headers=auth_headers).status_code == 204
    assert client.get(url, headers=auth_headers).status_code == 404


def test_influencer_progress_index_out_of_range(client, auth_headers, influencer):
    url = f"/api/influencers/{influencer['id']}"
    assert client.post(f"{url}/progress/-4", headers=auth_headers).status_code == 422

    response = client.post(f"{url}/progress/5", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "invalid_progress"

    assert client.post(f"{url}/progress/4", headers=auth_headers).json()["completed_videos"] == 5
    assert client.get(url, headers=auth_headers).json()["completed_videos"] == 5


def test_blank_required_strings_rejected_on_update(client, auth_headers, influencer):
    task = client.post("/api/tasks", json={"title": "Book studio"}, headers=auth_headers).json()
    delivery = client.post(
        "/api/deliveries",
        json={"influencer_id": influencer["id"], "product_name": "Glow Cream"},
        headers=auth_headers
    ).json()

    for url, payload in [
        (f"/api/tasks/{task['id']}", {"title": "  "}),
        (f"/api/influencers/{influencer['id']}", {"name": ""}),
        (f"/api/deliveries/{delivery['id']}", {"product_name": " "}),
    ]:
        assert client.patch(url, json=payload, headers=auth_headers).status_code == 422

    assert client.get("/api/tasks", headers=auth_headers).json()[0]["title"] == "Book studio"
    renamed = client.patch(f"/api/tasks/{task['id']}", json={"title": "Book flights"}, headers=auth_headers)
    assert renamed.json()["title"] == "Book flights"

def test_dashboard_empty(client, auth_headers):
    summary = client.get("/api/dashboard", headers=auth_headers).json()
    assert summary["influencer_count"] == 0
    assert summary["avg_engagement"] == 0.0
    assert summary["projects"]["project_count"] == 0


def test_dashboard_with_demo_data(client, auth_headers, db):
    seed_demo_data(db)
    summary = client.get("/api/dashboard", headers=auth_headers).json()
    assert summary["influencer_count"] == 2
    assert summary["total_followers"] == 2140000
    assert summary["avg_engagement"] == 10.3
    assert Decimal(summary["total_spent"]) == Decimal("2500")
    assert Decimal(summary["total_pending"]) == Decimal("1800")
    assert Decimal(summary["deliveries"]["total"]) == Decimal("60.50")


def test_feed_snapshot(client, auth_headers, influencer):
    snapshot = client.get("/api/feed/influencers", headers=auth_headers).json()
    assert [doc["name"] for doc in snapshot] == ["Alex Rivera"]

    response = client.get("/api/feed/advertisers", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_transactions(client, auth_headers, influencer):
    response = client.post(
        "/api/transactions",
        json={
            "influencer_id": influencer["id"],
            "amount": "2500",
            "date": "2023-10-12",
            "category": "commission",
            "description": "Q4 Gadget Review Series"
        },
        headers=auth_headers
    )
    assert response.status_code == 201
    transaction = response.json()
    assert transaction["status"] == "pending"
    assert transaction["date"] == "2023-10-12"

    url = f"/api/transactions/{transaction['id']}"
    updated = client.patch(url, json={"status": "paid"}, headers=auth_headers).json()
    assert updated["status"] == "paid"
    assert Decimal(updated["amount"]) == Decimal("2500")

    summary = client.get("/api/dashboard", headers=auth_headers).json()
    assert Decimal(summary["total_spent"]) == Decimal("2500")

    assert client.delete(url, headers=auth_headers).status_code == 204
    assert client.get("/api/transactions", headers=auth_headers).json() == []
