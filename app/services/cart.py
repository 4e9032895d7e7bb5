# app/services/cart.py
"""
Cart business rules: reading a user's cart, adding/updating/removing line
items and checking out against the user's wallet.

The service keeps no state of its own. Every call reads the cart document,
checks all preconditions, and only then mutates and saves it, so a rejected
call leaves the store untouched.
"""
import logging
from dataclasses import replace
from typing import Tuple

from app.core.errors import InternalError, InvalidRequestError, NotFoundError
from app.db.repositories import CartRepository, ProductRepository, UserRepository
from app.models.cart import Cart, CartItem
from app.models.product import Product
from app.models.user import User

logger = logging.getLogger(__name__)

NO_CART = "User does not have a cart"
NO_CART_FOR_WRITE = "User does not have a cart. Use POST to create cart and add a product"
PRODUCT_NOT_IN_DB = "Product doesn't exist in database"
PRODUCT_NOT_IN_CART = "Product not in cart"
PRODUCT_ALREADY_IN_CART = "Product already in cart. Use the cart sidebar to update or remove product from cart"
INVALID_QUANTITY = "please enter a valid quantity"


class CartService:
    def __init__(self, carts: CartRepository, products: ProductRepository, users: UserRepository):
        self.carts = carts
        self.products = products
        self.users = users

    # --- lookup-or-fail helpers ---

    def _require_product(self, product_id: str) -> Product:
        product = self.products.get(product_id)
        if product is None:
            raise InvalidRequestError(PRODUCT_NOT_IN_DB)
        return product

    def _require_cart_for_write(self, user: User) -> Cart:
        cart = self.carts.find_by_email(user.email)
        if cart is None:
            raise InvalidRequestError(NO_CART_FOR_WRITE)
        return cart

    @staticmethod
    def _require_item(cart: Cart, product_id: str) -> int:
        idx = cart.find_item(product_id)
        if idx is None:
            raise InvalidRequestError(PRODUCT_NOT_IN_CART)
        return idx

    @staticmethod
    def _require_positive(quantity: int) -> None:
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            raise InvalidRequestError(INVALID_QUANTITY)

    def _save(self, cart: Cart) -> Cart:
        saved = self.carts.save(cart)
        if saved is None:
            raise InternalError("Failed to save cart")
        return saved

    # --- operations ---

    def get_cart_by_user(self, user: User) -> Cart:
        cart = self.carts.find_by_email(user.email)
        if cart is None:
            raise NotFoundError(NO_CART)
        return cart

    def add_product_to_cart(self, user: User, product_id: str, quantity: int) -> Cart:
        """
        Add a new line item. A cart is created on the first add; adding a
        product that is already in the cart is rejected rather than merged.
        """
        self._require_positive(quantity)
        product = self._require_product(product_id)
        cart = self.carts.find_by_email(user.email)

        if cart is None:
            created = self.carts.create(Cart(email=user.email, cart_items=[CartItem(product=product, quantity=quantity)]))
            if created is None:
                raise InternalError()
            logger.info("Created cart for %s with product %s x%d", user.email, product.id, quantity)
            return created

        if cart.find_item(product.id) is not None:
            raise InvalidRequestError(PRODUCT_ALREADY_IN_CART)

        cart.cart_items.append(CartItem(product=product, quantity=quantity))
        saved = self._save(cart)
        logger.info("Added product %s x%d to cart of %s", product.id, quantity, user.email)
        return saved

    def update_product_in_cart(self, user: User, product_id: str, quantity: int) -> Cart:
        """
        Overwrite the quantity of a product already in the cart.
        A quantity of 0 is a removal and goes through `delete_product_from_cart`.
        """
        cart = self._require_cart_for_write(user)
        self._require_product(product_id)
        idx = self._require_item(cart, product_id)
        self._require_positive(quantity)

        cart.cart_items[idx].quantity = quantity
        saved = self._save(cart)
        logger.info("Set product %s to x%d in cart of %s", product_id, quantity, user.email)
        return saved

    def delete_product_from_cart(self, user: User, product_id: str) -> Cart:
        cart = self._require_cart_for_write(user)
        idx = self._require_item(cart, product_id)

        del cart.cart_items[idx]
        saved = self._save(cart)
        logger.info("Removed product %s from cart of %s", product_id, user.email)
        return saved

    def checkout(self, user: User) -> Cart:
        """
        Pay for the cart from the user's wallet and empty it.

        Raises NotFoundError when the user has no cart and InvalidRequestError
        when the cart is empty, no delivery address is set, or the wallet
        cannot cover the total.
        """
        cart, total = self._checkout_preconditions(user)

        old_balance = float(user.wallet_money)
        debited = replace(user, wallet_money=old_balance - total)
        if self.users.save_wallet(debited) is None:
            raise InternalError("Failed to update wallet balance")

        cart.cart_items = []
        saved = self.carts.save(cart)
        if saved is None:
            # put the stored balance back so the failed checkout charges nothing
            self.users.save_wallet(replace(user, wallet_money=old_balance))
            raise InternalError("Failed to save cart")

        user.wallet_money = debited.wallet_money
        logger.info("Checked out cart of %s for %.2f, wallet now %.2f", user.email, total, user.wallet_money)
        return saved

    def _checkout_preconditions(self, user: User) -> Tuple[Cart, float]:
        cart = self.get_cart_by_user(user)
        if not cart.cart_items:
            raise InvalidRequestError("User cart is empty")
        if not user.has_set_non_default_address():
            raise InvalidRequestError("User address is not set")
        total = cart.total_cost()
        if float(user.wallet_money) < total:
            raise InvalidRequestError("Wallet balance is insufficient")
        return cart, total
