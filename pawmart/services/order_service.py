"""
Order Service - checkout and order history.
"""

from decimal import Decimal
from typing import List

from loguru import logger
from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from ..db import models
from ..exceptions import BadRequestError
from ..schemas.store import Order, OrderItem, OrderStatus, ShippingInfo
from ..utils.helpers import format_product, to_decimal
from ..utils.validators import sanitize_string
from .cart_service import load_cart
from .user_service import get_user_row


def format_order(order: models.Order) -> Order:
    return Order(
        id=order.id,
        user_id=order.user_id,
        total_price=float(order.total_price),
        status=order.status,
        shipping_name=order.shipping_name,
        shipping_address=order.shipping_address,
        shipping_city=order.shipping_city,
        shipping_state=order.shipping_state,
        shipping_zip=order.shipping_zip,
        shipping_country=order.shipping_country,
        created_at=order.created_at,
        items=[
            OrderItem(
                id=item.id,
                product_id=item.product_id,
                quantity=item.quantity,
                price=float(item.price),
                product=format_product(item.product),
            )
            for item in order.items
        ],
    )


class OrderService:
    """Turns carts into orders."""

    def __init__(self, session: Session):
        self.session = session

    def create_order_from_cart(self, user_id: str, shipping: ShippingInfo) -> Order:
        """
        Check out the user's cart.

        Creating the order, decrementing stock for every line and clearing
        the cart happen in one transaction. A line that would take stock
        below zero aborts the whole checkout.

        Args:
            user_id: Buyer
            shipping: Shipping details

        Returns:
            The created order

        Raises:
            NotFoundError: If the user does not exist
            BadRequestError: If the cart is empty or stock is insufficient
        """
        get_user_row(self.session, user_id)
        cart = load_cart(self.session, user_id)
        if cart is None or not cart.items:
            raise BadRequestError("Cart is empty")

        total = sum(
            (to_decimal(item.product.price) * item.quantity for item in cart.items),
            Decimal("0"),
        )

        try:
            order = models.Order(
                user_id=user_id,
                total_price=total,
                status=OrderStatus.PENDING,
                shipping_name=sanitize_string(shipping.name, 255),
                shipping_address=sanitize_string(shipping.address),
                shipping_city=sanitize_string(shipping.city, 100),
                shipping_state=sanitize_string(shipping.state, 100),
                shipping_zip=sanitize_string(shipping.zip, 20),
                shipping_country=sanitize_string(shipping.country, 100),
                items=[
                    models.OrderItem(
                        product_id=item.product_id,
                        quantity=item.quantity,
                        price=item.product.price,
                    )
                    for item in cart.items
                ],
            )
            self.session.add(order)

            for item in cart.items:
                result = self.session.execute(
                    update(models.Product)
                    .where(
                        models.Product.id == item.product_id,
                        models.Product.stock >= item.quantity,
                    )
                    .values(stock=models.Product.stock - item.quantity)
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount != 1:
                    raise BadRequestError(f"Not enough stock available for {item.product.name}")

            cart.items.clear()
            self.session.commit()
        except BadRequestError:
            self.session.rollback()
            logger.warning(f"Checkout for user {user_id} refused: insufficient stock")
            raise
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error creating order from cart: {e}")
            raise

        self.session.expire_all()
        logger.info(f"Created order {order.id} for user {user_id} (total {total})")
        return format_order(order)

    def list_user_orders(self, user_id: str) -> List[Order]:
        """Get a user's orders, newest first."""
        get_user_row(self.session, user_id)
        stmt = (
            select(models.Order)
            .where(models.Order.user_id == user_id)
            .options(
                selectinload(models.Order.items)
                .selectinload(models.OrderItem.product)
                .selectinload(models.Product.ratings)
            )
            .order_by(models.Order.created_at.desc(), models.Order.id)
        )
        return [format_order(order) for order in self.session.scalars(stmt)]
