import json

import pytest

from app.models.cart import Cart, CartItem
from app.models.product import Product
from app.models.user import User


def _ball(**kw):
    return Product(id="p-ball", name="Ball", category="Sports", cost=20.0, rating=5, **kw)


def test_cart_from_store_row_parses_items():
    row = {
        "id": "c1",
        "email": "jane@example.com",
        "cart_items": json.dumps([
            {"product": {"id": "p-ball", "name": "Ball", "cost": "20.0", "rating": "5"}, "quantity": "2"},
        ]),
        "payment_option": "",
    }
    cart = Cart.from_dict(row)
    assert cart.id == "c1"
    assert cart.payment_option == "PAYMENT_OPTION_DEFAULT"
    assert len(cart.cart_items) == 1
    assert cart.cart_items[0].product.cost == 20.0
    assert cart.cart_items[0].quantity == 2


def test_cart_with_blank_items_cell_is_empty():
    cart = Cart.from_dict({"id": "c1", "email": "jane@example.com", "cart_items": ""})
    assert cart.cart_items == []


def test_find_item_returns_index_or_none():
    lamp = Product(id="p-lamp", name="Lamp", cost=45.0)
    cart = Cart(email="jane@example.com", cart_items=[CartItem(_ball(), 1), CartItem(lamp, 3)])
    assert cart.find_item("p-ball") == 0
    assert cart.find_item("p-lamp") == 1
    assert cart.find_item("p-chair") is None


def test_total_cost():
    lamp = Product(id="p-lamp", name="Lamp", cost=45.0)
    cart = Cart(email="jane@example.com", cart_items=[CartItem(_ball(), 2), CartItem(lamp, 1)])
    assert cart.total_cost() == pytest.approx(85.0)
    assert Cart(email="jane@example.com").total_cost() == 0


def test_cart_api_shape():
    cart = Cart(email="jane@example.com", cart_items=[CartItem(_ball(), 2)], id="c1")
    out = cart.to_api()
    assert out["_id"] == "c1"
    assert out["cartItems"][0]["product"]["_id"] == "p-ball"
    assert out["cartItems"][0]["quantity"] == 2
    assert out["paymentOption"] == "PAYMENT_OPTION_DEFAULT"


def test_user_defaults_and_address_check():
    user = User.from_dict({"id": "u1", "name": "Jane", "email": "jane@example.com", "wallet_money": ""})
    assert user.wallet_money == 500.0
    assert user.address == "ADDRESS_NOT_SET"
    assert not user.has_set_non_default_address()

    user.address = "221B Baker Street, London"
    assert user.has_set_non_default_address()


def test_user_mask_secret():
    user = User(name="Jane", email="jane@example.com", password_hash="hash", id="u1")
    out = user.mask_secret()
    assert "password_hash" not in out
    assert out["_id"] == "u1"
    assert out["walletMoney"] == 500.0


def test_user_with_corrupt_wallet_is_rejected():
    with pytest.raises(ValueError, match="wallet_money"):
        User.from_dict({"id": "u1", "name": "Jane", "email": "jane@example.com", "wallet_money": "abc"})


def test_product_with_blank_numbers_defaults_to_zero():
    p = Product.from_dict({"id": "p1", "name": "Odd", "cost": "", "rating": "n/a"})
    assert p.cost == 0.0
    assert p.rating == 0


def test_product_with_corrupt_cost_is_rejected():
    with pytest.raises(ValueError, match="cost"):
        Product.from_dict({"id": "p1", "name": "Odd", "cost": "n/a", "rating": "3"})
