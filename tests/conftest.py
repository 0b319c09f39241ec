from __future__ import annotations

import asyncio
import os
import tempfile
import uuid

import pytest

# Configure a throwaway SQLite database before importing the application,
# which reads settings and builds its engine at import time.
_DB_DIR = tempfile.mkdtemp(prefix="wms-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'wms.db')}"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["AUTO_CREATE_TABLES"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"

from fastapi.testclient import TestClient  # noqa: E402

from wms.core.security import create_access_token, get_password_hash  # noqa: E402
from wms.db.session import async_session_maker, drop_models, init_models  # noqa: E402
from wms.main import app  # noqa: E402
from wms.models.rbac import Role, User, UserRole  # noqa: E402

PASSWORD = "Warehouse#2024"

# username -> role slug (None = no role)
SEED_USERS = {
    "super-admin": "super-admin",
    "admin": "admin",
    "operator": None,
}


async def _seed_users() -> dict[str, uuid.UUID]:
    hashed = get_password_hash(PASSWORD)
    ids: dict[str, uuid.UUID] = {}
    async with async_session_maker() as db:
        roles = {
            "super-admin": Role(name="Super Admin", slug="super-admin"),
            "admin": Role(name="Admin", slug="admin"),
        }
        db.add_all(roles.values())
        await db.flush()
        for username, role_slug in SEED_USERS.items():
            user = User(
                username=username,
                email=f"{username}@acme-logistics.com",
                hashed_password=hashed,
                first_name=username.title(),
            )
            db.add(user)
            await db.flush()
            if role_slug:
                db.add(UserRole(user_id=user.id, role_id=roles[role_slug].id))
            ids[username] = user.id
        await db.commit()
    return ids


def bearer(user_id: uuid.UUID) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(subject=str(user_id))}"}


@pytest.fixture()
def client():
    asyncio.run(drop_models())
    asyncio.run(init_models())
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def users(client) -> dict[str, uuid.UUID]:
    return asyncio.run(_seed_users())


@pytest.fixture()
def super_headers(users):
    return bearer(users["super-admin"])


@pytest.fixture()
def admin_headers(users):
    return bearer(users["admin"])


@pytest.fixture()
def operator_headers(users):
    return bearer(users["operator"])


@pytest.fixture()
def warehouse(client, operator_headers):
    resp = client.post(
        "/api/warehouses",
        json={"warehouse_name": "Central DC", "warehouse_code": "cdc"},
        headers=operator_headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


@pytest.fixture()
def location(client, operator_headers, warehouse):
    resp = client.post(
        "/api/locations",
        json={
            "warehouse_id": warehouse["id"],
            "location_name": "Aisle 1 Pick Face",
            "location_code": "CDC-A1-01",
        },
        headers=operator_headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


@pytest.fixture()
def product(client, admin_headers):
    resp = client.post(
        "/api/products",
        json={"name": "Pallet Wrap 500mm", "sku": "PW-500", "barcode": "5012345678900"},
        headers=admin_headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]
