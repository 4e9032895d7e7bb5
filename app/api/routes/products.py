# app/api/routes/products.py
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import get_product_repository
from app.api.schemas.product import ProductOut
from app.db.repositories import ProductRepository

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=List[ProductOut])
def list_products(
    q: Optional[str] = Query(None, description="search query (name or category)"),
    products: ProductRepository = Depends(get_product_repository),
):
    """
    List the catalog. Supports an optional case-insensitive substring search via `q`.
    """
    results = []
    for p in products.list_all():
        if q and q.lower() not in p.name.lower() and q.lower() not in p.category.lower():
            continue
        results.append(p.to_api())
    return results


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, products: ProductRepository = Depends(get_product_repository)):
    product = products.get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product.to_api()
