"""
Helper utilities for PawMart.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Tuple, Union

from ..db import models
from ..schemas.store import CartItem, Product

Number = Union[int, float, Decimal]

CENTS = Decimal("0.01")


def to_decimal(value: Number) -> Decimal:
    """Convert a price to a two-place Decimal without binary float noise."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def summarize_ratings(ratings: Iterable[models.ProductRating]) -> Tuple[float, int]:
    """
    Calculate average rating and rating count.

    Args:
        ratings: Product ratings

    Returns:
        Tuple of (average rounded to one decimal, count); average is 0 when unrated
    """
    values = [r.rating for r in ratings]
    if not values:
        return 0.0, 0
    return round(sum(values) / len(values), 1), len(values)


def format_product(product: models.Product) -> Product:
    """Build the API product view including its rating summary."""
    avg_rating, rating_count = summarize_ratings(product.ratings)
    return Product(
        id=product.id,
        name=product.name,
        description=product.description,
        price=float(product.price),
        category=product.category,
        image=product.image,
        stock=product.stock,
        created_at=product.created_at,
        avg_rating=avg_rating,
        rating_count=rating_count,
    )


def format_cart_item(item: models.CartItem) -> CartItem:
    line_total = to_decimal(item.product.price) * item.quantity
    return CartItem(
        id=item.id,
        product_id=item.product_id,
        quantity=item.quantity,
        product=format_product(item.product),
        total_price=float(line_total),
    )
