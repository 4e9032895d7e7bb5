# tests/test_products.py
import pytest


def test_list_and_get_products(client, make_product):
    ball = make_product("Ball", cost=20, category="Sports")
    make_product("Table Lamp", cost=45, category="Home")

    resp = client.get("/api/products")
    assert resp.status_code == 200, resp.text
    assert {p["name"] for p in resp.json()} == {"Ball", "Table Lamp"}

    resp = client.get("/api/products", params={"q": "sport"})
    assert [p["_id"] for p in resp.json()] == [ball.id]

    resp = client.get(f"/api/products/{ball.id}")
    assert resp.status_code == 200
    fetched = resp.json()
    assert fetched["_id"] == ball.id
    assert fetched["cost"] == pytest.approx(20)
    assert fetched["rating"] == 5


def test_get_missing_product(client):
    resp = client.get("/api/products/missing")
    assert resp.status_code == 404


def test_empty_catalog(client):
    resp = client.get("/api/products")
    assert resp.status_code == 200
    assert resp.json() == []


def test_repository_lists_catalog_in_insertion_order(products, make_product):
    assert products.list_all() == []
    ball = make_product("Ball", cost=20)
    lamp = make_product("Lamp", cost=45)
    assert [p.id for p in products.list_all()] == [ball.id, lamp.id]
    assert products.get(lamp.id).cost == pytest.approx(45)
