from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from app.api.schemas.product import ProductOut


class CartProductRequest(BaseModel):
    """Body of POST/PUT /api/cart. Field names follow the public JSON (camelCase)."""
    product_id: str = Field(..., alias="productId", min_length=1)
    quantity: int

    model_config = ConfigDict(populate_by_name=True)


class CartItemOut(BaseModel):
    product: ProductOut
    quantity: int


class CartOut(BaseModel):
    id: Optional[str] = Field(None, alias="_id")
    email: str
    cart_items: List[CartItemOut] = Field(default_factory=list, alias="cartItems")
    payment_option: str = Field(..., alias="paymentOption")

    model_config = ConfigDict(populate_by_name=True)
