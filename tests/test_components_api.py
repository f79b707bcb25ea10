# tests/test_components_api.py
import pytest


def _create(client, payload):
    resp = client.post("/components", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_full_lifecycle(client, ryzen_payload):
    created = _create(client, ryzen_payload)
    cid = created["id"]
    assert cid
    assert created["name"] == "Ryzen 5 5600"
    assert created["type"] == "CPU"
    assert created["brand"] == "AMD"
    assert created["price"] == pytest.approx(129.99)
    assert created["stock"] == 12
    assert created["created_at"]

    resp = client.get(f"/components/{cid}")
    assert resp.status_code == 200, resp.text
    assert resp.json() == created

    resp = client.put(f"/components/{cid}", json={"stock": 10})
    assert resp.status_code == 200, resp.text
    updated = resp.json()
    assert updated["stock"] == 10
    assert {k: v for k, v in updated.items() if k != "stock"} == {
        k: v for k, v in created.items() if k != "stock"
    }

    resp = client.delete(f"/components/{cid}")
    assert resp.status_code == 204
    assert resp.content == b""

    resp = client.get(f"/components/{cid}")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Component not found"}


def test_list_empty(client):
    resp = client.get("/components")
    assert resp.status_code == 200
    assert resp.json() == []


def test_list_returns_rows_in_id_order(client):
    for name in ("RTX 4060", "Core i5-12400F"):
        _create(client, {"name": name, "type": "X"})
    rows = client.get("/components").json()
    assert [r["name"] for r in rows] == ["RTX 4060", "Core i5-12400F"]
    assert rows[0]["id"] < rows[1]["id"]


def test_create_defaults(client):
    created = _create(client, {"name": "Samsung 970 EVO Plus 1TB", "type": "SSD"})
    assert created["brand"] is None
    assert created["price"] == 0
    assert created["stock"] == 0


@pytest.mark.parametrize("payload", [
    {"type": "CPU"},
    {"name": "Ryzen 5 5600"},
    {"name": "", "type": "CPU"},
    {"name": "   ", "type": "CPU"},
    {"name": "Ryzen 5 5600", "type": "CPU", "price": -1},
    {"name": "Ryzen 5 5600", "type": "CPU", "stock": "many"},
])
def test_create_rejects_invalid_body(client, payload):
    resp = client.post("/components", json=payload)
    assert resp.status_code == 400, resp.text
    body = resp.json()
    assert body["error"]
    assert body["fields"]
    assert client.get("/components").json() == []


def test_get_unknown_id(client):
    resp = client.get("/components/999")
    assert resp.status_code == 404


def test_non_integer_id_is_bad_request(client):
    resp = client.get("/components/abc")
    assert resp.status_code == 400


def test_put_is_partial(client, ryzen_payload):
    created = _create(client, ryzen_payload)
    resp = client.put(f"/components/{created['id']}", json={"price": 50})
    assert resp.status_code == 200
    body = resp.json()
    assert body["price"] == 50
    assert body["name"] == created["name"]
    assert body["type"] == created["type"]
    assert body["brand"] == created["brand"]
    assert body["stock"] == created["stock"]


def test_put_empty_body_returns_row_unchanged(client, ryzen_payload):
    created = _create(client, ryzen_payload)
    resp = client.put(f"/components/{created['id']}", json={})
    assert resp.status_code == 200
    assert resp.json() == created


def test_put_can_clear_brand(client, ryzen_payload):
    created = _create(client, ryzen_payload)
    resp = client.put(f"/components/{created['id']}", json={"brand": None})
    assert resp.status_code == 200
    assert resp.json()["brand"] is None


@pytest.mark.parametrize("payload", [
    {"name": None},
    {"name": ""},
    {"type": None},
    {"price": None},
    {"stock": -3},
])
def test_put_rejects_invalid_values(client, ryzen_payload, payload):
    created = _create(client, ryzen_payload)
    resp = client.put(f"/components/{created['id']}", json=payload)
    assert resp.status_code == 400, resp.text
    assert client.get(f"/components/{created['id']}").json() == created


def test_put_unknown_id(client):
    resp = client.put("/components/999", json={"stock": 1})
    assert resp.status_code == 404
    resp = client.put("/components/999", json={})
    assert resp.status_code == 404


def test_delete_unknown_id(client):
    resp = client.delete("/components/999")
    assert resp.status_code == 404


def test_data_access_failure_is_500(client, database):
    database.query("DROP TABLE components")
    resp = client.get("/components")
    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Database error"
    assert body["detail"]


def test_id_beyond_64_bit_range_is_bad_request(client):
    huge = "/components/99999999999999999999"
    for resp in (client.get(huge), client.put(huge, json={"stock": 1}), client.delete(huge)):
        assert resp.status_code == 400, resp.text
        assert resp.json()["error"]


def test_data_access_failure_hides_driver_message(client, database):
    database.query("DROP TABLE components")
    resp = client.post("/components", json={"name": "RTX 4060", "type": "GPU"})
    assert resp.status_code == 500
    assert "no such table" not in resp.text
    assert resp.json() == {"error": "Database error", "detail": "The data store could not complete the request"}
