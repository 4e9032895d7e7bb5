# app/models/cart.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json

from app.config import settings
from app.models.product import Product


@dataclass
class CartItem:
    product: Product
    quantity: int = 1

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "CartItem":
        if d is None:
            raise ValueError("Cannot construct CartItem from None")
        raw_product = d.get("product") or {}
        product = raw_product if isinstance(raw_product, Product) else Product.from_dict(raw_product)
        try:
            quantity = int(float(d.get("quantity") or 0))
        except (TypeError, ValueError):
            quantity = 0
        return cls(product=product, quantity=quantity)

    def to_dict(self) -> Dict[str, Any]:
        return {"product": self.product.to_dict(), "quantity": int(self.quantity)}

    def line_total(self) -> float:
        return float(self.product.cost) * int(self.quantity)


@dataclass
class Cart:
    """
    A user's cart, one per email. Saved to the CSV store as a single row with
    `cart_items` serialized as JSON (list of CartItem dicts).
    """
    email: str
    cart_items: List[CartItem] = field(default_factory=list)
    payment_option: str = settings.DEFAULT_PAYMENT_OPTION
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Cart":
        if d is None:
            raise ValueError("Cannot construct Cart from None")
        raw_items = d.get("cart_items") or []
        if isinstance(raw_items, str):
            parsed = json.loads(raw_items) if raw_items.strip() else []
            raw_items = parsed if isinstance(parsed, list) else []
        items = [it if isinstance(it, CartItem) else CartItem.from_dict(it) for it in raw_items]
        return cls(
            email=str(d.get("email") or ""),
            cart_items=items,
            payment_option=d.get("payment_option") or settings.DEFAULT_PAYMENT_OPTION,
            id=d.get("id") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id or "",
            "email": self.email,
            "cart_items": json.dumps([it.to_dict() for it in self.cart_items], ensure_ascii=False),
            "payment_option": self.payment_option,
        }

    def to_api(self) -> Dict[str, Any]:
        return {
            "_id": self.id,
            "email": self.email,
            "cartItems": [
                {"product": it.product.to_api(), "quantity": int(it.quantity)} for it in self.cart_items
            ],
            "paymentOption": self.payment_option,
        }

    # item helpers
    def find_item(self, product_id: str) -> Optional[int]:
        """Index of the item holding `product_id`, or None."""
        for idx, it in enumerate(self.cart_items):
            if it.product.id == str(product_id):
                return idx
        return None

    def total_cost(self) -> float:
        return float(sum(it.line_total() for it in self.cart_items))
