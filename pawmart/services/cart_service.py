"""
Cart Service - per-user shopping carts.
"""

from decimal import Decimal

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from ..db import models
from ..exceptions import BadRequestError, ForbiddenError, NotFoundError
from ..schemas.store import Cart, CartItemUpdateResult
from ..utils.helpers import format_cart_item, to_decimal
from .user_service import get_user_row


def load_cart(session: Session, user_id: str):
    """Load a user's cart with items and products, or None if there is none."""
    stmt = (
        select(models.Cart)
        .where(models.Cart.user_id == user_id)
        .options(
            selectinload(models.Cart.items)
            .selectinload(models.CartItem.product)
            .selectinload(models.Product.ratings)
        )
    )
    return session.scalar(stmt)


class CartService:
    """Adds, updates and removes cart lines; stock is checked but not reserved."""

    def __init__(self, session: Session):
        self.session = session

    def _owned_item(self, user_id: str, item_id: str) -> models.CartItem:
        item = self.session.get(models.CartItem, item_id)
        if item is None:
            raise NotFoundError("Cart item not found")
        if item.cart.user_id != user_id:
            logger.warning(f"User {user_id} tried to modify cart item {item_id} of another user")
            raise ForbiddenError("Cart item does not belong to user")
        return item

    def add_to_cart(self, user_id: str, product_id: str, quantity: int) -> Cart:
        """
        Add a product to the user's cart, merging with an existing line.

        Args:
            user_id: Cart owner
            product_id: Product to add
            quantity: Units to add

        Returns:
            The updated cart

        Raises:
            NotFoundError: If the user or product does not exist
            BadRequestError: If the resulting quantity exceeds available stock
        """
        get_user_row(self.session, user_id)
        product = self.session.get(models.Product, product_id)
        if product is None:
            raise NotFoundError("Product not found")

        cart = load_cart(self.session, user_id)
        if cart is None:
            cart = models.Cart(user_id=user_id)
            self.session.add(cart)

        existing = next((i for i in cart.items if i.product_id == product_id), None)
        new_quantity = quantity + (existing.quantity if existing else 0)
        if product.stock < new_quantity:
            self.session.rollback()
            raise BadRequestError("Not enough stock available")

        if existing:
            existing.quantity = new_quantity
        else:
            cart.items.append(models.CartItem(product_id=product_id, quantity=quantity))

        self.session.commit()
        logger.info(f"Added {quantity} x {product_id} to cart of user {user_id}")
        return self.get_cart(user_id)

    def get_cart(self, user_id: str) -> Cart:
        """
        Get a user's cart with line totals.

        A user who has never added anything gets an empty cart with no id.

        Raises:
            NotFoundError: If the user does not exist
        """
        self.session.expire_all()
        get_user_row(self.session, user_id)
        cart = load_cart(self.session, user_id)
        if cart is None:
            return Cart(id=None, user_id=user_id, items=[], total_price=0.0)

        items = [format_cart_item(item) for item in cart.items]
        total = sum(
            (to_decimal(item.product.price) * item.quantity for item in cart.items),
            Decimal("0"),
        )
        return Cart(id=cart.id, user_id=user_id, items=items, total_price=float(total))

    def update_cart_item(self, user_id: str, item_id: str, quantity: int) -> CartItemUpdateResult:
        """
        Set the quantity of a cart line; zero or less removes it.

        Raises:
            NotFoundError: If the line does not exist
            ForbiddenError: If the line belongs to another user
            BadRequestError: If the quantity exceeds available stock
        """
        item = self._owned_item(user_id, item_id)

        if quantity <= 0:
            self.session.delete(item)
            self.session.commit()
            logger.info(f"Removed cart item {item_id} for user {user_id}")
            return CartItemUpdateResult(removed=True)

        if item.product.stock < quantity:
            raise BadRequestError("Not enough stock available")

        item.quantity = quantity
        self.session.commit()
        return CartItemUpdateResult(removed=False)

    def remove_cart_item(self, user_id: str, item_id: str) -> None:
        item = self._owned_item(user_id, item_id)
        self.session.delete(item)
        self.session.commit()
        logger.info(f"Removed cart item {item_id} for user {user_id}")
