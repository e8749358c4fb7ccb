"""Data-access services for PawMart."""

from .user_service import UserService
from .petshop_service import PetShopService
from .store_service import StoreService
from .cart_service import CartService
from .order_service import OrderService
from .rating_service import RatingService
from .donation_service import DonationPostService
from .missing_post_service import MissingPostService

__all__ = [
    "UserService",
    "PetShopService",
    "StoreService",
    "CartService",
    "OrderService",
    "RatingService",
    "DonationPostService",
    "MissingPostService",
]
