from __future__ import annotations

import uuid

import pytest


@pytest.fixture()
def category(client, admin_headers):
    resp = client.post(
        "/api/categories",
        json={"name": "Packaging Supplies", "description": "Film, tape and boxes"},
        headers=admin_headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def test_catalogue_writes_need_admin(client, operator_headers, admin_headers):
    body = {"name": "Kilogram", "symbol": "kg"}
    resp = client.post("/api/units", json=body, headers=operator_headers)
    assert resp.status_code == 403
    assert client.post("/api/units", json=body, headers=admin_headers).status_code == 201
    assert client.get("/api/units", headers=operator_headers).json()["meta"]["total"] == 1


def test_unit_symbol_is_unique(client, admin_headers):
    client.post("/api/units", json={"name": "Each", "symbol": "ea"}, headers=admin_headers)
    resp = client.post("/api/units", json={"name": "Each (dup)", "symbol": "ea"}, headers=admin_headers)
    assert resp.status_code == 409


def test_category_slug_derived_from_name(category):
    assert category["slug"] == "packaging_supplies"
    assert category["sort_order"] == 0
    assert category["parent_id"] is None


def test_child_categories_and_ordering(client, admin_headers, operator_headers, category):
    for name, order in (("Stretch Film", 2), ("Carton Boxes", 1)):
        resp = client.post(
            "/api/categories",
            json={"name": name, "parent_id": category["id"], "sort_order": order},
            headers=admin_headers,
        )
        assert resp.status_code == 201, resp.text

    children = client.get("/api/categories", params={"parent_id": category["id"]}, headers=operator_headers).json()
    assert [c["name"] for c in children["data"]] == ["Carton Boxes", "Stretch Film"]


def test_category_cannot_be_its_own_parent(client, admin_headers, category):
    resp = client.put(f"/api/categories/{category['id']}", json={"parent_id": category["id"]}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "A category cannot be its own parent"


def test_category_with_unknown_parent_is_conflict(client, admin_headers):
    resp = client.post(
        "/api/categories",
        json={"name": "Lost", "parent_id": str(uuid.uuid4())},
        headers=admin_headers,
    )
    assert resp.status_code == 409


def test_brand_slug_is_unique(client, admin_headers):
    first = client.post("/api/brands", json={"name": "Acme Tools & Co."}, headers=admin_headers)
    assert first.status_code == 201
    assert first.json()["data"]["slug"] == "acme_tools_co"

    dup = client.post("/api/brands", json={"name": "ACME tools co"}, headers=admin_headers)
    assert dup.status_code == 409

    explicit = client.post("/api/brands", json={"name": "ACME tools co", "slug": "acme-eu"}, headers=admin_headers)
    assert explicit.status_code == 201


def test_brand_name_without_letters_needs_slug(client, admin_headers):
    resp = client.post("/api/brands", json={"name": "***"}, headers=admin_headers)
    assert resp.status_code == 400


def test_families_filter_by_category(client, admin_headers, operator_headers, category):
    client.post("/api/families", json={"name": "Hand Film", "category_id": category["id"]}, headers=admin_headers)
    client.post("/api/families", json={"name": "Loose"}, headers=admin_headers)

    resp = client.get("/api/families", params={"category_id": category["id"]}, headers=operator_headers)
    assert [f["name"] for f in resp.json()["data"]] == ["Hand Film"]


def test_product_links_to_catalogue(client, admin_headers, category):
    brand = client.post("/api/brands", json={"name": "Wrapco"}, headers=admin_headers).json()["data"]
    unit = client.post("/api/units", json={"name": "Roll", "symbol": "roll"}, headers=admin_headers).json()["data"]

    resp = client.post(
        "/api/products",
        json={
            "name": "Hand Stretch Film 23mu",
            "sku": "HSF-23",
            "category_id": category["id"],
            "brand_id": brand["id"],
            "unit_id": unit["id"],
        },
        headers=admin_headers,
    )
    assert resp.status_code == 201, resp.text

    by_brand = client.get("/api/products", params={"brand_id": brand["id"]}, headers=admin_headers).json()
    assert [p["sku"] for p in by_brand["data"]] == ["HSF-23"]

    orphan = client.post(
        "/api/products",
        json={"name": "Mystery", "sku": "MY-1", "brand_id": str(uuid.uuid4())},
        headers=admin_headers,
    )
    assert orphan.status_code == 409


def test_catalogue_soft_delete_and_restore(client, admin_headers, category):
    assert client.delete(f"/api/categories/{category['id']}", headers=admin_headers).status_code == 200
    assert client.get("/api/categories", headers=admin_headers).json()["data"] == []

    restored = client.post(f"/api/categories/{category['id']}/restore", headers=admin_headers)
    assert restored.status_code == 200
    assert restored.json()["message"] == "Category restored successfully"
