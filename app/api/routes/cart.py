import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from app.api.deps import get_cart_service, get_current_user
from app.api.schemas.cart import CartOut, CartProductRequest
from app.core.errors import CartServiceError
from app.models.user import User
from app.services.cart import INVALID_QUANTITY, CartService

router = APIRouter(prefix="/api/cart", tags=["cart"])

logger = logging.getLogger(__name__)


def _to_http(exc: CartServiceError, user: User) -> HTTPException:
    logger.debug("Cart request by %s rejected (%d): %s", user.email, exc.status_code, exc.message)
    return HTTPException(status_code=exc.status_code, detail=exc.message)


@router.get("", response_model=CartOut)
def get_cart(user: User = Depends(get_current_user), service: CartService = Depends(get_cart_service)) -> Dict[str, Any]:
    """
    Fetch the current user's cart. 404 if the user has never added a product.
    """
    try:
        cart = service.get_cart_by_user(user)
    except CartServiceError as e:
        raise _to_http(e, user)
    return cart.to_api()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CartOut)
def add_product_to_cart(
    payload: CartProductRequest = Body(...),
    user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
) -> Dict[str, Any]:
    """
    Add a product to the cart, creating the cart on first use.
    Body: { "productId": "<id>", "quantity": <int > 0> }
    """
    try:
        cart = service.add_product_to_cart(user, payload.product_id, payload.quantity)
    except CartServiceError as e:
        raise _to_http(e, user)
    return cart.to_api()


@router.put("", response_model=CartOut, responses={204: {"description": "Product removed from cart"}})
def update_product_in_cart(
    payload: CartProductRequest = Body(...),
    user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
):
    """
    Change the quantity of a product already in the cart.
      - quantity > 0  -> 200 with the updated cart
      - quantity == 0 -> product removed, 204 no content
      - quantity < 0  -> 400
    """
    if payload.quantity < 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_QUANTITY)

    try:
        if payload.quantity == 0:
            service.delete_product_from_cart(user, payload.product_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        cart = service.update_product_in_cart(user, payload.product_id, payload.quantity)
    except CartServiceError as e:
        raise _to_http(e, user)
    return cart.to_api()


@router.put("/checkout", status_code=status.HTTP_204_NO_CONTENT)
def checkout(user: User = Depends(get_current_user), service: CartService = Depends(get_cart_service)) -> Response:
    """
    Pay for the cart from the wallet and empty it. 204 on success.
    """
    try:
        service.checkout(user)
    except CartServiceError as e:
        raise _to_http(e, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
