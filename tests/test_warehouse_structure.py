from __future__ import annotations

import uuid


def test_create_warehouse_derives_location_codes(client, warehouse):
    assert warehouse["warehouse_code"] == "cdc"
    assert warehouse["lc_warehouse_code"] == "CDC"
    assert warehouse["lc_full_code"] == "WH-CDC"
    assert warehouse["status"] == "operational"
    assert warehouse["is_active"] is True


def test_update_warehouse_code_recomputes_codes(client, operator_headers, warehouse):
    resp = client.put(
        f"/api/warehouses/{warehouse['id']}",
        json={"warehouse_code": "north-1"},
        headers=operator_headers,
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["lc_warehouse_code"] == "NORTH-1"
    assert data["lc_full_code"] == "WH-NORTH-1"
    assert resp.json()["message"] == "Warehouse updated successfully"


def test_update_without_code_keeps_codes(client, operator_headers, warehouse):
    resp = client.put(
        f"/api/warehouses/{warehouse['id']}",
        json={"city": "Rotterdam"},
        headers=operator_headers,
    )
    data = resp.json()["data"]
    assert data["city"] == "Rotterdam"
    assert data["lc_full_code"] == "WH-CDC"
    assert data["warehouse_name"] == "Central DC"


def test_duplicate_warehouse_code_is_conflict(client, operator_headers, warehouse):
    resp = client.post(
        "/api/warehouses",
        json={"warehouse_name": "Second", "warehouse_code": "cdc"},
        headers=operator_headers,
    )
    assert resp.status_code == 409
    assert resp.json()["success"] is False


def test_list_warehouses_orders_by_name_and_reports_meta(client, operator_headers):
    for name, code in (("Zeta Hub", "z1"), ("Alpha Hub", "a1"), ("Mid Hub", "m1")):
        client.post(
            "/api/warehouses",
            json={"warehouse_name": name, "warehouse_code": code},
            headers=operator_headers,
        )
    resp = client.get("/api/warehouses", params={"limit": 2}, headers=operator_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert [w["warehouse_name"] for w in body["data"]] == ["Alpha Hub", "Mid Hub"]
    assert body["meta"] == {"total": 3, "limit": 2, "offset": 0}

    page2 = client.get("/api/warehouses", params={"limit": 2, "offset": 2}, headers=operator_headers)
    assert [w["warehouse_name"] for w in page2.json()["data"]] == ["Zeta Hub"]


def test_list_warehouses_filters(client, operator_headers):
    client.post(
        "/api/warehouses",
        json={"warehouse_name": "Cold Store", "warehouse_code": "cs1", "warehouse_type": "cold_storage"},
        headers=operator_headers,
    )
    client.post(
        "/api/warehouses",
        json={"warehouse_name": "Old Site", "warehouse_code": "os1", "is_active": False},
        headers=operator_headers,
    )
    resp = client.get("/api/warehouses", params={"warehouse_type": "cold_storage"}, headers=operator_headers)
    assert [w["warehouse_code"] for w in resp.json()["data"]] == ["cs1"]

    resp = client.get("/api/warehouses", params={"is_active": "false"}, headers=operator_headers)
    assert [w["warehouse_code"] for w in resp.json()["data"]] == ["os1"]


def test_pagination_limits_are_validated(client, operator_headers):
    assert client.get("/api/warehouses", params={"limit": 0}, headers=operator_headers).status_code == 400
    assert client.get("/api/warehouses", params={"limit": 501}, headers=operator_headers).status_code == 400
    assert client.get("/api/warehouses", params={"offset": -1}, headers=operator_headers).status_code == 400
    assert client.get("/api/warehouses", params={"limit": 500}, headers=operator_headers).status_code == 200


def test_validation_error_lists_fields(client, operator_headers):
    resp = client.post("/api/warehouses", json={"warehouse_code": "x"}, headers=operator_headers)
    assert resp.status_code == 400
    body = resp.json()
    assert body["message"] == "Validation failed"
    assert body["error"]["code"] == "VALIDATION_ERROR"
    fields = [e["field"] for e in body["error"]["errors"]]
    assert "warehouse_name" in fields


def test_get_missing_warehouse_is_404(client, operator_headers):
    resp = client.get(f"/api/warehouses/{uuid.uuid4()}", headers=operator_headers)
    assert resp.status_code == 404
    assert resp.json()["message"] == "Warehouse not found"


def test_malformed_id_is_400(client, operator_headers):
    resp = client.get("/api/warehouses/not-a-uuid", headers=operator_headers)
    assert resp.status_code == 400
    assert resp.json()["error"]["errors"][0]["field"] == "id"


def test_update_and_delete_missing_row_is_404(client, operator_headers):
    missing = uuid.uuid4()
    assert client.put(f"/api/zones/{missing}", json={"zone_name": "X"}, headers=operator_headers).status_code == 404
    assert client.delete(f"/api/zones/{missing}", headers=operator_headers).status_code == 404


def test_null_for_required_column_is_validation_error(client, operator_headers, warehouse):
    resp = client.put(
        f"/api/warehouses/{warehouse['id']}",
        json={"warehouse_code": None},
        headers=operator_headers,
    )
    assert resp.status_code == 400
    body = resp.json()
    assert body["message"] == "Validation failed"
    assert [e["field"] for e in body["error"]["errors"]] == ["warehouse_code"]

    unchanged = client.get(f"/api/warehouses/{warehouse['id']}", headers=operator_headers).json()["data"]
    assert unchanged["warehouse_code"] == "cdc"


def test_null_for_optional_column_clears_it(client, operator_headers, warehouse):
    client.put(f"/api/warehouses/{warehouse['id']}", json={"city": "Antwerp"}, headers=operator_headers)
    resp = client.put(f"/api/warehouses/{warehouse['id']}", json={"city": None}, headers=operator_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["city"] is None


def test_unknown_parent_is_conflict(client, operator_headers):
    resp = client.post(
        "/api/zones",
        json={"warehouse_id": str(uuid.uuid4()), "zone_name": "Orphan", "zone_code": "ORP"},
        headers=operator_headers,
    )
    assert resp.status_code == 409
    assert resp.json()["message"] == "Zone conflicts with an existing record"
    assert client.get("/api/zones", headers=operator_headers).json()["meta"]["total"] == 0


def test_structure_hierarchy_crud(client, operator_headers, warehouse, users):
    zone = client.post(
        "/api/zones",
        json={"warehouse_id": warehouse["id"], "zone_name": "Bulk Storage", "zone_code": "BULK", "zone_type": "storage"},
        headers=operator_headers,
    )
    assert zone.status_code == 201, zone.text
    zone = zone.json()["data"]
    assert zone["created_by"] == str(users["operator"])
    assert zone["updated_by"] == str(users["operator"])

    aisle = client.post(
        "/api/aisles",
        json={"zone_id": zone["id"], "aisle_name": "Aisle 01", "aisle_code": "A01", "length": 42.5},
        headers=operator_headers,
    ).json()["data"]
    assert aisle["length"] == 42.5

    rack = client.post(
        "/api/racks",
        json={"aisle_id": aisle["id"], "rack_name": "Rack 01", "rack_code": "R01", "levels_count": 4},
        headers=operator_headers,
    ).json()["data"]
    assert rack["rack_type"] == "standard"

    levels = [
        client.post(
            "/api/levels",
            json={"rack_id": rack["id"], "level_number": n, "level_code": f"L{n}"},
            headers=operator_headers,
        ).json()["data"]
        for n in (3, 1, 2)
    ]
    listed = client.get("/api/levels", params={"rack_id": rack["id"]}, headers=operator_headers).json()
    assert [lvl["level_number"] for lvl in listed["data"]] == [1, 2, 3]

    location = client.post(
        "/api/locations",
        json={
            "warehouse_id": warehouse["id"],
            "level_id": levels[1]["id"],
            "location_name": "A01-R01-L1",
            "location_code": "CDC-A01-R01-L1",
            "location_type": "picking",
        },
        headers=operator_headers,
    ).json()["data"]
    by_type = client.get("/api/locations", params={"location_type": "picking"}, headers=operator_headers).json()
    assert [loc["id"] for loc in by_type["data"]] == [location["id"]]

    by_zone = client.get("/api/aisles", params={"zone_id": zone["id"]}, headers=operator_headers).json()
    assert by_zone["meta"]["total"] == 1


def test_hard_delete_removes_row(client, operator_headers, warehouse):
    zone = client.post(
        "/api/zones",
        json={"warehouse_id": warehouse["id"], "zone_name": "Returns", "zone_code": "RET"},
        headers=operator_headers,
    ).json()["data"]
    resp = client.delete(f"/api/zones/{zone['id']}", headers=operator_headers)
    assert resp.status_code == 200
    assert resp.json()["data"] == {"id": zone["id"]}
    assert resp.json()["message"] == "Zone deleted successfully"
    assert client.get(f"/api/zones/{zone['id']}", headers=operator_headers).status_code == 404
    # hard-deleted tables have no restore route
    assert client.post(f"/api/zones/{zone['id']}/restore", headers=operator_headers).status_code in (404, 405)


def test_warehouse_stock_summary(client, operator_headers, warehouse, location, product):
    for qty in (10, 15):
        resp = client.post(
            "/api/inventory",
            json={"product_id": product["id"], "location_id": location["id"], "quantity": qty},
            headers=operator_headers,
        )
        assert resp.status_code == 201, resp.text

    resp = client.get(f"/api/warehouses/{warehouse['id']}/stock", headers=operator_headers)
    assert resp.status_code == 200
    assert resp.json()["data"] == [{"product_id": product["id"], "quantity": 25.0}]


def test_warehouse_stock_for_missing_warehouse_is_404(client, operator_headers):
    resp = client.get(f"/api/warehouses/{uuid.uuid4()}/stock", headers=operator_headers)
    assert resp.status_code == 404
