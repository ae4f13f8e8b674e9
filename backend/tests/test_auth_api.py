"""
Tests for registration, login and the profile endpoint.

Run with: pytest tests/test_auth_api.py -v
"""

import pytest

from conftest import auth_headers, register
from xeno_api.models import Tenant, User
from xeno_api.models.tenant import default_shop_domain, normalize_shop_domain
from xeno_api.services.auth_service import AuthService


# ============================================================================
# REGISTER
# ============================================================================

def test_register_returns_token_and_admin_profile(client):
    data = register(client, "a@x.com", "Acme")

    assert data["token"]
    user = data["user"]
    assert user["email"] == "a@x.com"
    assert user["role"] == "admin"
    assert user["company"] == "Acme"
    assert "tenantId" in user
    assert "passwordHash" not in user


def test_register_stores_hash_not_plaintext(client, db):
    register(client, "a@x.com", "Acme", password="pw12345")

    user = db.query(User).filter(User.email == "a@x.com").one()
    assert user.password_hash != "pw12345"
    assert user.password_hash.startswith("$2b$")
    assert user.tenant.shop_domain == "acme.myshopify.com"


def test_register_lowercases_email(client):
    data = register(client, "Mixed@X.com", "Acme")
    assert data["user"]["email"] == "mixed@x.com"


def test_duplicate_email_conflicts_without_new_rows(client, db):
    register(client, "a@x.com", "Acme")

    response = client.post("/api/auth/register", json={
        "email": "a@x.com",
        "name": "Other",
        "password": "pw12345",
        "companyName": "Other Co",
    })

    assert response.status_code == 400
    assert response.json()["error"] == "Email already registered"
    assert db.query(Tenant).count() == 1
    assert db.query(User).count() == 1


def test_race_on_user_insert_leaves_no_orphan_tenant(client, db, monkeypatch):
    """A unique violation after the tenant insert rolls back the tenant too"""
    register(client, "a@x.com", "Acme")

    # Skip the pre-check so the user insert itself hits the unique index
    monkeypatch.setattr(AuthService, "_find_user_by_email", staticmethod(lambda db, email: None))

    response = client.post("/api/auth/register", json={
        "email": "a@x.com",
        "name": "Racer",
        "password": "pw12345",
        "companyName": "Racer Co",
    })

    assert response.status_code == 400
    db.expire_all()
    assert db.query(Tenant).filter(Tenant.company_name == "Racer Co").count() == 0
    assert db.query(Tenant).count() == 1


def test_failure_after_tenant_insert_rolls_back(client, app, db, monkeypatch):
    hasher = app.state.auth_service.hasher

    def broken_hash(password):
        raise RuntimeError("hashing backend unavailable")

    monkeypatch.setattr(hasher, "hash", broken_hash)

    with pytest.raises(RuntimeError):
        client.post("/api/auth/register", json={
            "email": "c@z.com",
            "name": "Broken",
            "password": "pw12345",
            "companyName": "Broken Co",
        })

    db.expire_all()
    assert db.query(Tenant).count() == 0
    assert db.query(User).count() == 0


def test_register_rejects_short_password(client):
    response = client.post("/api/auth/register", json={
        "email": "a@x.com",
        "name": "Short",
        "password": "123",
        "companyName": "Acme",
    })

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation failed"
    assert any(detail["field"] == "password" for detail in body["details"])


def test_register_rejects_non_shopify_domain(client):
    response = client.post("/api/auth/register", json={
        "email": "a@x.com",
        "name": "Acme",
        "password": "pw12345",
        "companyName": "Acme",
        "shopDomain": "example.com",
    })
    assert response.status_code == 400


def test_register_defaults_company_name(client):
    response = client.post("/api/auth/register", json={
        "email": "solo@x.com",
        "name": "Solo",
        "password": "pw12345",
    })
    assert response.status_code == 200
    assert response.json()["user"]["company"] == "My Company"


def test_shop_domain_taken_conflicts(client):
    register(client, "a@x.com", "Acme")

    response = client.post("/api/auth/register", json={
        "email": "b@y.com",
        "name": "Copycat",
        "password": "pw12345",
        "companyName": "Acme",
    })
    assert response.status_code == 400
    assert response.json()["error"] == "Shop domain already registered"


# ============================================================================
# LOGIN
# ============================================================================

def test_login_success_issues_token(client, db):
    register(client, "a@x.com", "Acme")

    response = client.post("/api/auth/login", json={"email": "a@x.com", "password": "pw12345"})

    assert response.status_code == 200
    assert response.json()["user"]["email"] == "a@x.com"
    user = db.query(User).filter(User.email == "a@x.com").one()
    assert user.last_login_at is not None


def test_login_failures_are_indistinguishable(client):
    register(client, "a@x.com", "Acme")

    unknown = client.post("/api/auth/login", json={"email": "nobody@x.com", "password": "pw12345"})
    wrong = client.post("/api/auth/login", json={"email": "a@x.com", "password": "wrong-pw"})

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json()["error"] == wrong.json()["error"] == "Invalid credentials"
    assert set(unknown.json()) == set(wrong.json())


def test_inactive_tenant_cannot_login(client, db):
    register(client, "a@x.com", "Acme")
    tenant = db.query(Tenant).one()
    tenant.is_active = False
    db.commit()

    response = client.post("/api/auth/login", json={"email": "a@x.com", "password": "pw12345"})

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid credentials"


# ============================================================================
# ME
# ============================================================================

def test_me_returns_profile(client, acme):
    response = client.get("/api/auth/me", headers=acme["headers"])

    assert response.status_code == 200
    assert response.json() == acme["user"]


def test_me_without_token_is_401(client):
    response = client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["error"] == "Access token required"


def test_me_with_non_bearer_scheme_is_401(client, acme):
    response = client.get("/api/auth/me", headers={"Authorization": f"Basic {acme['token']}"})
    assert response.status_code == 401


def test_me_with_tampered_token_is_403(client, acme):
    token = acme["token"][:-2] + ("AA" if not acme["token"].endswith("AA") else "BB")

    response = client.get("/api/auth/me", headers=auth_headers(token))

    assert response.status_code == 403
    assert response.json()["error"] == "Invalid or expired token"


def test_me_for_deleted_user_is_404(client, db, acme):
    db.query(User).filter(User.email == "a@x.com").delete()
    db.commit()

    response = client.get("/api/auth/me", headers=acme["headers"])
    assert response.status_code == 404


# ============================================================================
# DERIVED SHOP DOMAIN
# ============================================================================

@pytest.mark.parametrize("company, expected", [
    ("Acme", "acme.myshopify.com"),
    ("Q", "q-shop.myshopify.com"),
    ("!!!", "my-company.myshopify.com"),
    ("Acme & Sons, Ltd.", "acme-sons-ltd.myshopify.com"),
])
def test_default_shop_domain(company, expected):
    assert default_shop_domain(company) == expected


def test_default_shop_domain_is_capped_and_valid():
    domain = default_shop_domain("a" * 59 + " " + "b" * 200)

    assert domain == "a" * 59 + ".myshopify.com"
    assert normalize_shop_domain(domain) == domain


def test_register_single_character_company(client):
    response = client.post("/api/auth/register", json={
        "email": "q@x.com",
        "name": "Q",
        "password": "pw12345",
        "companyName": "Q",
    })

    assert response.status_code == 200
    assert response.json()["user"]["company"] == "Q"


def test_register_longest_company_name(client, db):
    company = "Long Name " * 25 + "Corp!"

    response = client.post("/api/auth/register", json={
        "email": "long@x.com",
        "name": "Long",
        "password": "pw12345",
        "companyName": company[:255],
    })

    assert response.status_code == 200
    tenant = db.query(Tenant).one()
    assert len(tenant.shop_domain) <= 255
