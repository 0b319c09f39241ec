from __future__ import annotations

import pytest


@pytest.fixture()
def bin_type(client, operator_headers):
    resp = client.post(
        "/api/bin-types",
        json={"type_name": "Euro Tote", "type_code": "TOTE-EU", "default_capacity": 40},
        headers=operator_headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


@pytest.fixture()
def two_bins(client, operator_headers, location, bin_type):
    bins = []
    for code in ("B-002", "B-001"):
        resp = client.post(
            "/api/bins",
            json={"bin_code": code, "location_id": location["id"], "bin_type_id": bin_type["id"]},
            headers=operator_headers,
        )
        assert resp.status_code == 201, resp.text
        bins.append(resp.json()["data"])
    return bins


def test_bin_type_code_is_unique(client, operator_headers, bin_type):
    resp = client.post(
        "/api/bin-types",
        json={"type_name": "Another Tote", "type_code": "TOTE-EU"},
        headers=operator_headers,
    )
    assert resp.status_code == 409


def test_bins_list_ordered_by_code_and_filtered(client, operator_headers, two_bins, location):
    resp = client.get("/api/bins", params={"location_id": location["id"]}, headers=operator_headers)
    assert resp.status_code == 200
    assert [b["bin_code"] for b in resp.json()["data"]] == ["B-001", "B-002"]
    assert resp.json()["data"][0]["status"] == "available"

    client.put(f"/api/bins/{two_bins[0]['id']}", json={"is_active": False}, headers=operator_headers)
    active = client.get("/api/bins", params={"is_active": True}, headers=operator_headers).json()
    assert [b["bin_code"] for b in active["data"]] == ["B-001"]


def test_bin_contents_newest_putaway_first(client, operator_headers, two_bins, product):
    for batch, putaway in (("LOT-A", "2024-03-01T08:00:00Z"), ("LOT-B", "2024-05-01T08:00:00Z")):
        resp = client.post(
            "/api/bin-contents",
            json={
                "bin_id": two_bins[0]["id"],
                "product_id": product["id"],
                "batch_number": batch,
                "quantity": 12,
                "putaway_date": putaway,
            },
            headers=operator_headers,
        )
        assert resp.status_code == 201, resp.text

    resp = client.get("/api/bin-contents", params={"bin_id": two_bins[0]["id"]}, headers=operator_headers)
    assert [c["batch_number"] for c in resp.json()["data"]] == ["LOT-B", "LOT-A"]

    by_batch = client.get("/api/bin-contents", params={"batch_number": "LOT-A"}, headers=operator_headers)
    assert by_batch.json()["meta"]["total"] == 1
    assert by_batch.json()["data"][0]["quality_status"] == "approved"
    assert by_batch.json()["data"][0]["is_locked"] is False


def test_bin_content_defaults_putaway_date(client, operator_headers, two_bins, product):
    resp = client.post(
        "/api/bin-contents",
        json={"bin_id": two_bins[1]["id"], "product_id": product["id"], "quantity": 3},
        headers=operator_headers,
    )
    assert resp.status_code == 201
    assert resp.json()["data"]["putaway_date"] is not None


def test_bin_content_negative_quantity_is_rejected(client, operator_headers, two_bins, product):
    resp = client.post(
        "/api/bin-contents",
        json={"bin_id": two_bins[1]["id"], "product_id": product["id"], "quantity": -1},
        headers=operator_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["errors"][0]["field"] == "quantity"


def test_bin_movement_defaults(client, operator_headers, two_bins, product):
    resp = client.post(
        "/api/bin-movements",
        json={
            "source_bin_id": two_bins[0]["id"],
            "destination_bin_id": two_bins[1]["id"],
            "product_id": product["id"],
            "quantity": 5,
        },
        headers=operator_headers,
    )
    assert resp.status_code == 201, resp.text
    data = resp.json()["data"]
    assert data["status"] == "completed"
    assert data["movement_type"] == "transfer"
    assert data["movement_date"] is not None
    assert data["quantity"] == 5.0


def test_bin_movement_filters(client, operator_headers, two_bins, product):
    for movement_type in ("transfer", "replenishment"):
        client.post(
            "/api/bin-movements",
            json={
                "source_bin_id": two_bins[0]["id"],
                "destination_bin_id": two_bins[1]["id"],
                "product_id": product["id"],
                "movement_type": movement_type,
            },
            headers=operator_headers,
        )
    resp = client.get(
        "/api/bin-movements",
        params={"movement_type": "replenishment", "source_bin_id": two_bins[0]["id"]},
        headers=operator_headers,
    )
    assert [m["movement_type"] for m in resp.json()["data"]] == ["replenishment"]

    resp = client.get("/api/bin-movements", params={"destination_bin_id": two_bins[0]["id"]}, headers=operator_headers)
    assert resp.json()["data"] == []
