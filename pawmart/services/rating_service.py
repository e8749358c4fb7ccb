"""
Rating Service - product ratings from buyers.
"""

from typing import Optional

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db import models
from ..exceptions import ConflictError, ForbiddenError, NotFoundError
from ..schemas.store import ProductRating, RatingInput
from ..utils.validators import sanitize_optional
from .user_service import get_user_row


class RatingService:
    """One rating per user and product, only for purchased products."""

    def __init__(self, session: Session):
        self.session = session

    def _find(self, user_id: str, product_id: str) -> Optional[models.ProductRating]:
        stmt = select(models.ProductRating).where(
            models.ProductRating.user_id == user_id,
            models.ProductRating.product_id == product_id,
        )
        return self.session.scalar(stmt)

    def _has_purchased(self, user_id: str, product_id: str) -> bool:
        stmt = (
            select(models.Order.id)
            .join(models.Order.items)
            .where(models.Order.user_id == user_id, models.OrderItem.product_id == product_id)
            .limit(1)
        )
        return self.session.scalar(stmt) is not None

    def get_user_rating(self, user_id: str, product_id: str) -> Optional[ProductRating]:
        get_user_row(self.session, user_id)
        rating = self._find(user_id, product_id)
        return ProductRating.model_validate(rating) if rating else None

    def create_rating(self, user_id: str, product_id: str, data: RatingInput) -> ProductRating:
        """
        Rate a purchased product.

        Raises:
            NotFoundError: If the user or product does not exist
            ForbiddenError: If the user never ordered the product
            ConflictError: If the user already rated the product
        """
        get_user_row(self.session, user_id)
        product = self.session.get(models.Product, product_id)
        if product is None:
            raise NotFoundError("Product not found")

        if not self._has_purchased(user_id, product_id):
            raise ForbiddenError("You can only rate products you have purchased")

        if self._find(user_id, product_id) is not None:
            raise ConflictError(
                "You have already rated this product. Please update your existing rating."
            )

        rating = models.ProductRating(
            user_id=user_id,
            product=product,
            rating=data.rating,
            comment=sanitize_optional(data.comment, 2000),
        )
        self.session.add(rating)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise ConflictError(
                "You have already rated this product. Please update your existing rating."
            ) from e

        logger.info(f"User {user_id} rated product {product_id}: {data.rating}")
        return ProductRating.model_validate(rating)

    def update_rating(self, user_id: str, rating_id: str, data: RatingInput) -> ProductRating:
        """
        Update an existing rating.

        Raises:
            NotFoundError: If the rating does not exist
            ForbiddenError: If the rating belongs to another user
        """
        rating = self.session.get(models.ProductRating, rating_id)
        if rating is None:
            raise NotFoundError("Rating not found")
        if rating.user_id != user_id:
            raise ForbiddenError("You can only update your own ratings")

        rating.rating = data.rating
        rating.comment = sanitize_optional(data.comment, 2000)
        self.session.commit()

        return ProductRating.model_validate(rating)
