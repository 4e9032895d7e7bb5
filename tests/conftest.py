# tests/conftest.py
import os
import sys
import uuid

import pytest
from fastapi.testclient import TestClient

# ensure project root is importable
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app.main import app  # noqa: E402
from app.database import db as file_db  # noqa: E402
from app.core.security import create_access_token, hash_password  # noqa: E402
from app.db.repositories import CartRepository, ProductRepository, UserRepository  # noqa: E402
from app.models.product import Product  # noqa: E402
from app.models.user import User  # noqa: E402
from app.services.cart import CartService  # noqa: E402

DEFAULT_PASSWORD = "password123"
SHIPPING_ADDRESS = "221B Baker Street, London NW1 6XE"


@pytest.fixture(autouse=True)
def temp_data_dir(tmp_path, monkeypatch):
    """
    Point the file-backed db singleton at a fresh directory for every test.
    """
    monkeypatch.setattr(file_db, "data_dir", tmp_path)
    yield tmp_path


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def users():
    return UserRepository(file_db)


@pytest.fixture
def products():
    return ProductRepository(file_db)


@pytest.fixture
def carts():
    return CartRepository(file_db)


@pytest.fixture
def cart_service(carts, products, users):
    return CartService(carts, products, users)


@pytest.fixture
def make_user(users):
    """
    Create a user directly in the store.
    Usage: user = make_user(wallet_money=100, address=None)
    address=None leaves the default (unset) address in place.
    """
    def _fn(name="Jane Shopper", email=None, password=DEFAULT_PASSWORD, wallet_money=500.0, address=SHIPPING_ADDRESS):
        if email is None:
            email = f"user_{uuid.uuid4().hex[:8]}@example.com"
        user = User(name=name, email=email, password_hash=hash_password(password), wallet_money=wallet_money)
        if address is not None:
            user.address = address
        return users.create(user)
    return _fn


@pytest.fixture
def make_product(products):
    """
    Create a catalog product. Usage: ball = make_product("Ball", cost=20)
    """
    def _fn(name="Ball", cost=20.0, category="Sports", rating=5):
        return products.create(Product(name=name, category=category, cost=cost, rating=rating))
    return _fn


@pytest.fixture
def auth_header():
    """
    Build an Authorization header for a user. Usage: hdr = auth_header(user)
    """
    def _h(user):
        return {"Authorization": f"Bearer {create_access_token(str(user.id))}"}
    return _h
