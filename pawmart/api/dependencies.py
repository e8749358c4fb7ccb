"""
FastAPI dependencies: caller identity and service factories.
"""

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from ..db.session import get_session
from ..services import (
    CartService,
    DonationPostService,
    MissingPostService,
    OrderService,
    PetShopService,
    RatingService,
    StoreService,
    UserService,
)
from ..utils.validators import require_user_id


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Identify the caller from the X-User-Id header."""
    return require_user_id(x_user_id)


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(session)


def get_petshop_service(session: Session = Depends(get_session)) -> PetShopService:
    return PetShopService(session)


def get_store_service(session: Session = Depends(get_session)) -> StoreService:
    return StoreService(session)


def get_cart_service(session: Session = Depends(get_session)) -> CartService:
    return CartService(session)


def get_order_service(session: Session = Depends(get_session)) -> OrderService:
    return OrderService(session)


def get_rating_service(session: Session = Depends(get_session)) -> RatingService:
    return RatingService(session)


def get_donation_service(session: Session = Depends(get_session)) -> DonationPostService:
    return DonationPostService(session)


def get_missing_post_service(session: Session = Depends(get_session)) -> MissingPostService:
    return MissingPostService(session)
