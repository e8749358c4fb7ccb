"""Product catalog and rating routes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ...schemas.store import Product, ProductRating, RatingInput
from ...services import RatingService, StoreService
from ..dependencies import get_current_user_id, get_rating_service, get_store_service

router = APIRouter(tags=["products"])


@router.get("/api/products", response_model=List[Product])
def list_products(
    category: Optional[str] = Query(None, description="Only products in this category"),
    service: StoreService = Depends(get_store_service),
) -> List[Product]:
    return service.list_products(category=category)


@router.get("/api/products/featured", response_model=List[Product])
def featured_products(
    limit: Optional[int] = Query(None, ge=1, le=100),
    service: StoreService = Depends(get_store_service),
) -> List[Product]:
    return service.list_featured_products(limit=limit)


@router.get("/api/products/{product_id}", response_model=Product)
def get_product(product_id: str, service: StoreService = Depends(get_store_service)) -> Product:
    return service.get_product(product_id)


@router.get("/api/users/products/{product_id}/rating", response_model=Optional[ProductRating])
def get_my_rating(
    product_id: str,
    user_id: str = Depends(get_current_user_id),
    service: RatingService = Depends(get_rating_service),
) -> Optional[ProductRating]:
    return service.get_user_rating(user_id, product_id)


@router.post(
    "/api/users/products/{product_id}/rating",
    response_model=ProductRating,
    status_code=status.HTTP_201_CREATED,
)
def rate_product(
    product_id: str,
    data: RatingInput,
    user_id: str = Depends(get_current_user_id),
    service: RatingService = Depends(get_rating_service),
) -> ProductRating:
    return service.create_rating(user_id, product_id, data)


@router.put("/api/users/products/ratings/{rating_id}", response_model=ProductRating)
def update_rating(
    rating_id: str,
    data: RatingInput,
    user_id: str = Depends(get_current_user_id),
    service: RatingService = Depends(get_rating_service),
) -> ProductRating:
    return service.update_rating(user_id, rating_id, data)
