"""
Tests for customers, segments, orders, journeys and the aggregate endpoints.

Run with: pytest tests/test_resources_api.py -v
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from xeno_api.models import Customer, Order, OrderItem


def tenant_uuid(tenant):
    return uuid.UUID(tenant["user"]["tenantId"])


def add_customer(client, headers, email, **fields):
    body = {"email": email}
    body.update(fields)
    response = client.post("/api/customers", json=body, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def acme_orders(db, acme):
    """Two orders for Acme, one recent and one from last year"""
    tenant_id = tenant_uuid(acme)
    customer = Customer(tenant_id=tenant_id, email="buyer@acme.com", first_name="Bea", total_spent=250.0)
    db.add(customer)
    db.flush()

    now = datetime.now(timezone.utc)
    recent = Order(
        tenant_id=tenant_id,
        customer_id=customer.id,
        order_number="#1002",
        total_price=200.0,
        created_at=now - timedelta(days=2),
    )
    recent.items.append(OrderItem(title="Shoes", quantity=1, price=200.0))
    old = Order(
        tenant_id=tenant_id,
        customer_id=customer.id,
        order_number="#1001",
        total_price=50.0,
        created_at=now - timedelta(days=400),
    )
    db.add_all([recent, old])
    db.commit()
    return {"customer": customer, "recent": recent, "old": old}


# ============================================================================
# CUSTOMERS
# ============================================================================

def test_customers_ordered_by_lifetime_value(client, acme):
    add_customer(client, acme["headers"], "low@x.com", lifetimeValue=10)
    add_customer(client, acme["headers"], "high@x.com", lifetimeValue=900)

    listed = client.get("/api/customers", headers=acme["headers"]).json()

    assert [c["email"] for c in listed] == ["high@x.com", "low@x.com"]


def test_customers_filter_by_lifecycle_and_limit(client, acme):
    add_customer(client, acme["headers"], "n1@x.com", lifecycle="new")
    add_customer(client, acme["headers"], "r1@x.com", lifecycle="at_risk")
    add_customer(client, acme["headers"], "r2@x.com", lifecycle="at_risk")

    at_risk = client.get("/api/customers?lifecycle=at_risk", headers=acme["headers"]).json()
    limited = client.get("/api/customers?limit=1", headers=acme["headers"]).json()

    assert {c["email"] for c in at_risk} == {"r1@x.com", "r2@x.com"}
    assert len(limited) == 1


def test_customers_invalid_lifecycle_rejected(client, acme):
    response = client.get("/api/customers?lifecycle=vip", headers=acme["headers"])
    assert response.status_code == 400


def test_top_customers_by_total_spent(client, acme):
    add_customer(client, acme["headers"], "small@x.com", totalSpent=5)
    add_customer(client, acme["headers"], "big@x.com", totalSpent=500)

    top = client.get("/api/customers/top?limit=1", headers=acme["headers"]).json()

    assert [c["email"] for c in top] == ["big@x.com"]


def test_customer_isolation(client, acme, globex):
    customer = add_customer(client, acme["headers"], "mine@x.com")

    assert client.get(f"/api/customers/{customer['id']}", headers=acme["headers"]).status_code == 200
    assert client.get(f"/api/customers/{customer['id']}", headers=globex["headers"]).status_code == 404
    assert client.get("/api/customers", headers=globex["headers"]).json() == []
    assert client.get("/api/customers/top", headers=globex["headers"]).json() == []


def test_malformed_id_is_rejected(client, acme):
    response = client.get("/api/customers/not-a-uuid", headers=acme["headers"])
    assert response.status_code == 400


# ============================================================================
# SEGMENTS
# ============================================================================

def test_segment_members_refresh_counts(client, acme):
    segment = client.post("/api/segments", json={"name": "VIP"}, headers=acme["headers"]).json()
    first = add_customer(client, acme["headers"], "one@x.com")
    second = add_customer(client, acme["headers"], "two@x.com")

    response = client.post(
        f"/api/segments/{segment['id']}/members",
        json={"customerIds": [first["id"], second["id"]]},
        headers=acme["headers"],
    )
    again = client.post(
        f"/api/segments/{segment['id']}/members",
        json={"customerIds": [first["id"]]},
        headers=acme["headers"],
    )

    assert response.status_code == 200
    assert response.json()["customerCount"] == 2
    assert again.json()["memberCount"] == 2

    listed = client.get("/api/segments", headers=acme["headers"]).json()
    assert listed[0]["memberCount"] == 2


def test_segment_members_reject_foreign_customer(client, acme, globex):
    segment = client.post("/api/segments", json={"name": "VIP"}, headers=acme["headers"]).json()
    own = add_customer(client, acme["headers"], "one@x.com")
    foreign = add_customer(client, globex["headers"], "theirs@y.com")

    response = client.post(
        f"/api/segments/{segment['id']}/members",
        json={"customerIds": [own["id"], foreign["id"]]},
        headers=acme["headers"],
    )

    assert response.status_code == 404
    detail = client.get(f"/api/segments/{segment['id']}", headers=acme["headers"]).json()
    assert detail["memberCount"] == 0


def test_segment_delete_is_scoped(client, acme, globex):
    segment = client.post("/api/segments", json={"name": "VIP"}, headers=acme["headers"]).json()

    assert client.delete(f"/api/segments/{segment['id']}", headers=globex["headers"]).status_code == 404
    assert client.delete(f"/api/segments/{segment['id']}", headers=acme["headers"]).status_code == 200
    assert client.get(f"/api/segments/{segment['id']}", headers=acme["headers"]).status_code == 404


# ============================================================================
# ORDERS
# ============================================================================

def test_orders_newest_first_with_details(client, acme, acme_orders):
    orders = client.get("/api/orders", headers=acme["headers"]).json()

    assert [o["orderNumber"] for o in orders] == ["#1002", "#1001"]
    assert orders[0]["customer"]["email"] == "buyer@acme.com"
    assert orders[0]["items"][0]["title"] == "Shoes"


def test_orders_date_range_needs_both_ends(client, acme, acme_orders):
    start = (datetime.now(timezone.utc) - timedelta(days=30)).strftime("%Y-%m-%dT%H:%M:%S")
    end = (datetime.now(timezone.utc) + timedelta(days=1)).strftime("%Y-%m-%dT%H:%M:%S")

    ranged = client.get(f"/api/orders?from={start}&to={end}", headers=acme["headers"]).json()
    half_open = client.get(f"/api/orders?from={start}", headers=acme["headers"]).json()

    assert [o["orderNumber"] for o in ranged] == ["#1002"]
    assert len(half_open) == 2


def test_order_isolation(client, acme, globex, acme_orders):
    order_id = acme_orders["recent"].id

    assert client.get(f"/api/orders/{order_id}", headers=acme["headers"]).status_code == 200
    assert client.get(f"/api/orders/{order_id}", headers=globex["headers"]).status_code == 404
    assert client.get("/api/orders", headers=globex["headers"]).json() == []


# ============================================================================
# JOURNEYS
# ============================================================================

def test_journey_create_update_and_isolation(client, acme, globex):
    journey = client.post(
        "/api/journeys",
        json={"name": "Welcome series"},
        headers=acme["headers"],
    ).json()
    assert journey["status"] == "draft"

    updated = client.put(
        f"/api/journeys/{journey['id']}",
        json={"status": "active"},
        headers=acme["headers"],
    )
    assert updated.status_code == 200
    assert updated.json()["status"] == "active"

    foreign = client.put(
        f"/api/journeys/{journey['id']}",
        json={"status": "paused"},
        headers=globex["headers"],
    )
    assert foreign.status_code == 404
    assert client.get(f"/api/journeys/{journey['id']}", headers=acme["headers"]).json()["status"] == "active"
    assert client.get("/api/journeys", headers=globex["headers"]).json() == []


def test_journey_update_rejects_null_name(client, acme):
    journey = client.post("/api/journeys", json={"name": "Welcome series"}, headers=acme["headers"]).json()

    response = client.put(
        f"/api/journeys/{journey['id']}",
        json={"name": None},
        headers=acme["headers"],
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Validation failed"
    assert client.get(f"/api/journeys/{journey['id']}", headers=acme["headers"]).json()["name"] == "Welcome series"


# ============================================================================
# DASHBOARD AND ANALYTICS
# ============================================================================

def test_dashboard_empty_tenant_uses_zero_sentinels(client, acme):
    response = client.get("/api/dashboard/stats", headers=acme["headers"])

    assert response.status_code == 200
    body = response.json()
    assert body["kpis"]["revenueInfluenced"] == 0
    assert body["kpis"]["repeatRate"] == 0
    assert body["kpis"]["topChannel"] is None
    assert body["lifecycle"] == {"new": 0, "active": 0, "at_risk": 0, "churned": 0}
    assert body["campaigns"] == []


def test_dashboard_counts_only_own_rows(client, acme, globex, acme_orders):
    client.post("/api/campaigns", json={"name": "Sale", "channel": "Email", "budget": 100},
                headers=acme["headers"])
    client.post("/api/campaigns", json={"name": "Theirs", "channel": "SMS", "budget": 10},
                headers=globex["headers"])

    body = client.get("/api/dashboard/stats?days=30", headers=acme["headers"]).json()

    assert body["kpis"]["activeCampaigns"] == 1
    assert body["kpis"]["totalCustomers"] == 1
    assert body["kpis"]["totalOrders"] == 1
    assert body["kpis"]["orderRevenue"] == 200.0
    assert [c["name"] for c in body["campaigns"]] == ["Sale"]
    assert body["campaigns"][0]["roi"] == 0
    assert body["campaigns"][0]["ctr"] == 0


def test_dashboard_days_bounds(client, acme):
    assert client.get("/api/dashboard/stats?days=0", headers=acme["headers"]).status_code == 400


def test_analytics_shape(client, acme):
    client.post("/api/campaigns", json={"name": "Sale", "channel": "Email", "budget": 100},
                headers=acme["headers"])

    body = client.get("/api/analytics?days=30", headers=acme["headers"]).json()

    assert body["totalCost"] == 100
    assert body["totalRevenue"] == 0
    assert body["avgROI"] == 0
    assert body["channelPerformance"]["Email"]["count"] == 1
    assert body["topCampaigns"][0]["name"] == "Sale"
