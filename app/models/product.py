# app/models/product.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any


@dataclass
class Product:
    """
    Catalog product. The CSV store keeps everything as strings, so
    `from_dict` casts the numeric fields back.
    """
    id: Optional[str] = None
    name: str = ""
    category: str = ""
    cost: float = 0.0
    rating: int = 0
    image: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Product":
        if d is None:
            raise ValueError("Cannot construct Product from None")
        id_val = d.get("id") or d.get("_id") or d.get("product_id") or None

        cost_raw = d.get("cost", 0)
        rating_raw = d.get("rating", 0)
        # the cart total is built from cost, so an unreadable price is an error
        try:
            cost = float(cost_raw) if cost_raw not in (None, "") else 0.0
        except (TypeError, ValueError):
            raise ValueError(f"Invalid cost for product {id_val!r}: {cost_raw!r}") from None
        try:
            rating = int(float(rating_raw)) if rating_raw not in (None, "") else 0
        except (TypeError, ValueError):
            rating = 0

        return cls(
            id=str(id_val) if id_val else None,
            name=str(d.get("name") or ""),
            category=str(d.get("category") or ""),
            cost=cost,
            rating=rating,
            image=d.get("image") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["cost"] = float(self.cost)
        out["rating"] = int(self.rating)
        out["image"] = self.image or ""
        return out

    def to_api(self) -> Dict[str, Any]:
        out = self.to_dict()
        out["_id"] = out.pop("id")
        return out
