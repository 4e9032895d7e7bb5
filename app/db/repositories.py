# app/db/repositories.py
"""
Typed access to the tables the cart service works with. Each repository wraps
the file-backed store and converts rows to/from the dataclass models.
"""
from typing import List, Optional

from app.database import FileBackedDB
from app.models.cart import Cart
from app.models.product import Product
from app.models.user import User


class CartRepository:
    table = "carts"

    def __init__(self, db: FileBackedDB):
        self.db = db

    def find_by_email(self, email: str) -> Optional[Cart]:
        row = self.db.get_record(self.table, "email", email)
        return Cart.from_dict(row) if row else None

    def create(self, cart: Cart) -> Optional[Cart]:
        row = cart.to_dict()
        saved = self.db.create_record(self.table, row, id_field="id", unique_key="email")
        return Cart.from_dict(saved) if saved else None

    def save(self, cart: Cart) -> Optional[Cart]:
        row = cart.to_dict()
        updated = self.db.update_record(self.table, "email", cart.email, {
            "cart_items": row["cart_items"],
            "payment_option": row["payment_option"],
        })
        return Cart.from_dict(updated) if updated else None


class ProductRepository:
    table = "products"

    def __init__(self, db: FileBackedDB):
        self.db = db

    def get(self, product_id: str) -> Optional[Product]:
        if not product_id:
            return None
        row = self.db.get_record(self.table, "id", product_id)
        return Product.from_dict(row) if row else None

    def list_all(self) -> List[Product]:
        return [Product.from_dict(r) for r in self.db.list_records(self.table)]

    def create(self, product: Product) -> Product:
        saved = self.db.create_record(self.table, product.to_dict(), id_field="id")
        return Product.from_dict(saved)


class UserRepository:
    table = "users"

    def __init__(self, db: FileBackedDB):
        self.db = db

    def get(self, user_id: str) -> Optional[User]:
        row = self.db.get_record(self.table, "id", user_id)
        return User.from_dict(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        row = self.db.get_record(self.table, "email", email)
        return User.from_dict(row) if row else None

    def create(self, user: User) -> Optional[User]:
        saved = self.db.create_record(self.table, user.to_dict(), id_field="id", unique_key="email")
        return User.from_dict(saved) if saved else None

    def save_wallet(self, user: User) -> Optional[User]:
        updated = self.db.update_record(self.table, "id", user.id, {"wallet_money": float(user.wallet_money)})
        return User.from_dict(updated) if updated else None

    def save_address(self, user: User) -> Optional[User]:
        updated = self.db.update_record(self.table, "id", user.id, {"address": user.address})
        return User.from_dict(updated) if updated else None
