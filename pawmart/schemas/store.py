"""
Storefront data models: products, carts, orders and ratings.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    """Product order lifecycle."""
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class ProductCreate(BaseModel):
    """Catalog entry for a new product."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="")
    price: float = Field(..., ge=0)
    category: str = Field(..., min_length=1, max_length=100)
    image: str = Field(default="")
    stock: int = Field(default=0, ge=0)


class Product(BaseModel):
    """Product with its rating summary."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    price: float
    category: str
    image: str
    stock: int
    created_at: datetime

    avg_rating: float = Field(default=0.0, description="Mean rating rounded to one decimal")
    rating_count: int = Field(default=0)


class CartItemAdd(BaseModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)


class CartItemUpdate(BaseModel):
    quantity: int = Field(..., description="New quantity; zero or less removes the line")


class CartItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    product_id: str
    quantity: int
    product: Product
    total_price: float


class Cart(BaseModel):
    """A user's cart. `id` is None when the user has never added anything."""

    id: Optional[str] = None
    user_id: str
    items: List[CartItem] = Field(default_factory=list)
    total_price: float = 0.0


class CartItemUpdateResult(BaseModel):
    success: bool = True
    removed: bool


class ShippingInfo(BaseModel):
    """Shipping details captured at checkout."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(default="")
    zip: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)


class OrderItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    product_id: str
    quantity: int
    price: float = Field(..., description="Unit price at purchase time")
    product: Optional[Product] = None


class Order(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    total_price: float
    status: OrderStatus

    shipping_name: str
    shipping_address: str
    shipping_city: str
    shipping_state: str
    shipping_zip: str
    shipping_country: str

    created_at: datetime
    items: List[OrderItem] = Field(default_factory=list)


class RatingInput(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = Field(default=None, max_length=2000)


class ProductRating(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    product_id: str
    rating: int
    comment: Optional[str] = None
    created_at: datetime
    updated_at: datetime
