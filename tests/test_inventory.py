from __future__ import annotations

import pytest


@pytest.fixture()
def stock(client, operator_headers, location, product):
    resp = client.post(
        "/api/inventory",
        json={
            "product_id": product["id"],
            "location_id": location["id"],
            "quantity": 100,
            "reorder_point": 20,
            "lot_number": "LOT-2024-118",
            "serial_number": "SN-77",
            "barcode": "INV-0001",
        },
        headers=operator_headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def _reserve(client, headers, stock, quantity, status="active"):
    resp = client.post(
        "/api/inventory-reservations",
        json={
            "product_id": stock["product_id"],
            "location_id": stock["location_id"],
            "inventory_id": stock["id"],
            "quantity": quantity,
            "status": status,
        },
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def test_new_inventory_has_computed_quantities(stock):
    assert stock["quantity_on_hand"] == 100.0
    assert stock["quantity_reserved"] == 0.0
    assert stock["quantity_available"] == 100.0
    assert stock["needs_reorder"] is False


def test_active_reservations_reduce_available(client, operator_headers, stock):
    _reserve(client, operator_headers, stock, 30)
    _reserve(client, operator_headers, stock, 25, status="pending")
    _reserve(client, operator_headers, stock, 40, status="cancelled")

    data = client.get(f"/api/inventory/{stock['id']}", headers=operator_headers).json()["data"]
    assert data["quantity_reserved"] == 55.0
    assert data["quantity_available"] == 45.0


def test_available_never_goes_negative(client, operator_headers, stock):
    _reserve(client, operator_headers, stock, 150)
    listed = client.get("/api/inventory", headers=operator_headers).json()["data"]
    assert listed[0]["quantity_reserved"] == 150.0
    assert listed[0]["quantity_available"] == 0.0


def test_needs_reorder_at_reorder_point(client, operator_headers, stock):
    resp = client.put(f"/api/inventory/{stock['id']}", json={"quantity": 20}, headers=operator_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["needs_reorder"] is True


def test_reservation_stamps_reserved_at(client, operator_headers, stock):
    reservation = _reserve(client, operator_headers, stock, 5)
    assert reservation["reserved_at"] is not None
    assert reservation["status"] == "active"

    by_status = client.get("/api/inventory-reservations", params={"status": "active"}, headers=operator_headers)
    assert by_status.json()["meta"]["total"] == 1


def test_inventory_search_is_case_insensitive_substring(client, operator_headers, stock):
    for term in ("lot-2024", "sn-7", "inv-00"):
        resp = client.get("/api/inventory", params={"search": term}, headers=operator_headers)
        assert [i["id"] for i in resp.json()["data"]] == [stock["id"]], term
    resp = client.get("/api/inventory", params={"search": "nothing-like-this"}, headers=operator_headers)
    assert resp.json()["data"] == []


def test_inventory_search_treats_wildcards_literally(client, operator_headers, stock):
    for term in ("%", "_", "LOT_2024"):
        resp = client.get("/api/inventory", params={"search": term}, headers=operator_headers)
        assert resp.json()["data"] == [], term


def test_inventory_soft_delete_and_restore(client, operator_headers, stock, users):
    resp = client.delete(f"/api/inventory/{stock['id']}", headers=operator_headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Inventory deleted successfully"

    assert client.get(f"/api/inventory/{stock['id']}", headers=operator_headers).status_code == 404
    assert client.get("/api/inventory", headers=operator_headers).json()["meta"]["total"] == 0

    restored = client.post(f"/api/inventory/{stock['id']}/restore", headers=operator_headers)
    assert restored.status_code == 200, restored.text
    data = restored.json()["data"]
    assert data["deleted_at"] is None
    assert data["deleted_by"] is None
    assert data["updated_by"] == str(users["operator"])
    assert client.get(f"/api/inventory/{stock['id']}", headers=operator_headers).status_code == 200


def test_inventory_movement_status_filter_maps_to_approval(client, operator_headers, stock):
    for movement_type, approval in (("receipt", "approved"), ("issue", "pending")):
        resp = client.post(
            "/api/inventory-movements",
            json={
                "inventory_id": stock["id"],
                "movement_type": movement_type,
                "quantity": 10,
                "reference_type": "purchase_order",
                "approval_status": approval,
            },
            headers=operator_headers,
        )
        assert resp.status_code == 201, resp.text

    resp = client.get("/api/inventory-movements", params={"status": "approved"}, headers=operator_headers)
    assert [m["movement_type"] for m in resp.json()["data"]] == ["receipt"]

    resp = client.get("/api/inventory-movements", params={"inventory_id": stock["id"]}, headers=operator_headers)
    assert resp.json()["meta"]["total"] == 2


def test_count_details_report_variance(client, operator_headers, warehouse, stock):
    count = client.post(
        "/api/inventory-counts",
        json={"warehouse_id": warehouse["id"], "count_name": "Q2 cycle count"},
        headers=operator_headers,
    )
    assert count.status_code == 201, count.text
    count = count.json()["data"]
    assert count["status"] == "planned"
    assert count["count_type"] == "cycle"

    detail = client.post(
        "/api/inventory-count-details",
        json={"count_id": count["id"], "inventory_id": stock["id"], "expected_quantity": 100},
        headers=operator_headers,
    ).json()["data"]
    assert detail["variance"] is None
    assert detail["is_discrepancy"] is False

    counted = client.put(
        f"/api/inventory-count-details/{detail['id']}",
        json={"counted_quantity": 97},
        headers=operator_headers,
    ).json()["data"]
    assert counted["variance"] == -3.0
    assert counted["is_discrepancy"] is True

    matched = client.put(
        f"/api/inventory-count-details/{detail['id']}",
        json={"counted_quantity": 100},
        headers=operator_headers,
    ).json()["data"]
    assert matched["variance"] == 0.0
    assert matched["is_discrepancy"] is False

    by_count = client.get("/api/inventory-count-details", params={"count_id": count["id"]}, headers=operator_headers)
    assert by_count.json()["meta"]["total"] == 1
