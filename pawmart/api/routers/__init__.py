"""HTTP routers for PawMart."""

from . import cart, donations, missing_posts, pets, products, users

__all__ = ["cart", "donations", "missing_posts", "pets", "products", "users"]
