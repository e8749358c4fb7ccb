"""Utility modules for PawMart."""

from .validators import sanitize_string, sanitize_optional, require_user_id
from .helpers import to_decimal, summarize_ratings, format_product, format_cart_item

__all__ = [
    "sanitize_string",
    "sanitize_optional",
    "require_user_id",
    "to_decimal",
    "summarize_ratings",
    "format_product",
    "format_cart_item",
]
