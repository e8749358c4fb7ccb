"""
Store Service - pet product catalog.
"""

from typing import List, Optional

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from ..config import get_settings
from ..db import models
from ..exceptions import NotFoundError
from ..schemas.store import Product, ProductCreate
from ..utils.helpers import format_product, to_decimal
from ..utils.validators import sanitize_string


class StoreService:
    """Product catalog reads with rating summaries."""

    def __init__(self, session: Session):
        self.session = session

    def _products(self, category: Optional[str] = None) -> List[models.Product]:
        stmt = (
            select(models.Product)
            .options(selectinload(models.Product.ratings))
            .order_by(models.Product.created_at.desc(), models.Product.id)
        )
        if category:
            stmt = stmt.where(models.Product.category == category)
        return list(self.session.scalars(stmt).all())

    def list_products(self, category: Optional[str] = None) -> List[Product]:
        """
        Get products, newest first.

        Args:
            category: Optional category filter

        Returns:
            Products with average rating and rating count
        """
        return [format_product(p) for p in self._products(category)]

    def list_featured_products(self, limit: Optional[int] = None) -> List[Product]:
        """Get the top rated products."""
        if limit is None:
            limit = get_settings().featured_products_limit
        products = [format_product(p) for p in self._products()]
        products.sort(key=lambda p: p.avg_rating, reverse=True)
        return products[:limit]

    def get_product(self, product_id: str) -> Product:
        product = self.session.get(models.Product, product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return format_product(product)

    def create_product(self, data: ProductCreate) -> Product:
        """Add a product to the catalog."""
        values = data.model_dump()
        values["name"] = sanitize_string(values["name"], 255)
        values["category"] = sanitize_string(values["category"], 100)
        values["price"] = to_decimal(values["price"])

        product = models.Product(**values)
        self.session.add(product)
        self.session.commit()

        logger.info(f"Created product {product.id} ({product.name})")
        return format_product(product)
