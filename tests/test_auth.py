from __future__ import annotations

import uuid

from conftest import PASSWORD, bearer


def test_health_is_public(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "service": "wms-api"}


def test_missing_token_is_401_in_envelope(client):
    resp = client.get("/api/warehouses")
    assert resp.status_code == 401
    body = resp.json()
    assert body["success"] is False
    assert body["data"] is None
    assert body["message"] == "Not authenticated"
    assert body["error"]["code"] == "UNAUTHORIZED"


def test_garbage_token_is_401(client, users):
    resp = client.get("/api/warehouses", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_token_for_unknown_user_is_401(client, users):
    resp = client.get("/api/warehouses", headers=bearer(uuid.uuid4()))
    assert resp.status_code == 401
    assert resp.json()["message"] == "User not found or inactive"


def test_login_returns_token_and_refresh_cookie(client, users):
    resp = client.post(
        "/api/auth/login",
        json={"email": "admin@acme-logistics.com", "password": PASSWORD},
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["success"] is True
    assert body["data"]["token_type"] == "bearer"
    assert "refresh_token" in resp.cookies

    token = body["data"]["access_token"]
    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["data"]["email"] == "admin@acme-logistics.com"
    assert me.json()["data"]["roles"] == ["admin"]


def test_login_rejects_wrong_password(client, users):
    resp = client.post(
        "/api/auth/login",
        json={"email": "admin@acme-logistics.com", "password": "not-the-password"},
    )
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid credentials"


def test_login_records_audit_entry(client, users, admin_headers):
    client.post("/api/auth/login", json={"email": "operator@acme-logistics.com", "password": PASSWORD})
    resp = client.get("/api/audit-logs", params={"action": "user.login"}, headers=admin_headers)
    assert resp.status_code == 200
    entries = resp.json()["data"]
    assert [e["actor_id"] for e in entries] == [str(users["operator"])]


def test_refresh_uses_cookie(client, users):
    login = client.post(
        "/api/auth/login",
        json={"email": "operator@acme-logistics.com", "password": PASSWORD},
    )
    assert login.status_code == 200
    resp = client.post("/api/auth/refresh")
    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["access_token"]


def test_refresh_without_cookie_is_401(client, users):
    client.cookies.clear()
    resp = client.post("/api/auth/refresh")
    assert resp.status_code == 401
    assert resp.json()["message"] == "Missing refresh token"


def test_logout_clears_cookie(client, operator_headers):
    resp = client.post("/api/auth/logout", headers=operator_headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Logged out"


def test_deactivated_user_loses_access(client, users, admin_headers, operator_headers):
    resp = client.put(
        f"/api/users/{users['operator']}",
        json={"is_active": False},
        headers=admin_headers,
    )
    assert resp.status_code == 200, resp.text
    assert client.get("/api/warehouses", headers=operator_headers).status_code == 401


def test_role_changes_apply_without_new_token(client, users, super_headers, operator_headers):
    assert client.get("/api/users", headers=operator_headers).status_code == 403

    roles = client.get("/api/roles", headers=operator_headers).json()["data"]
    admin_role = next(r for r in roles if r["slug"] == "admin")
    assign = client.post(
        "/api/user-roles",
        json={"user_id": str(users["operator"]), "role_id": admin_role["id"]},
        headers=super_headers,
    )
    assert assign.status_code == 201, assign.text

    assert client.get("/api/users", headers=operator_headers).status_code == 200
