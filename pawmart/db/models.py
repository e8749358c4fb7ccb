"""
ORM models for PawMart.
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..schemas.community import AdoptionFormStatus, MissingPostStatus
from ..schemas.store import OrderStatus
from .session import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class User(Base):
    """
    Marketplace user. Adoption preferences live on the row, so they are
    removed together with the account.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    age: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    image: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    country: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    area: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Adoption preferences
    daily_availability: Mapped[int] = mapped_column(Integer, nullable=False, default=3)
    has_outdoor_space: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    has_children: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    has_allergies: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    experience_level: Mapped[int] = mapped_column(Integer, nullable=False, default=3)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    pet_orders: Mapped[List["PetOrder"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    cart: Mapped[Optional["Cart"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", uselist=False
    )
    orders: Mapped[List["Order"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    ratings: Mapped[List["ProductRating"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    donation_posts: Mapped[List["DonationPost"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    missing_posts: Mapped[List["MissingPost"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    adoption_forms: Mapped[List["AdoptionForm"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    post_comments: Mapped[List["PostComment"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    post_upvotes: Mapped[List["PostUpvote"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )


# ---------------------------------------------------------------------------
# Pets
# ---------------------------------------------------------------------------


class Pet(Base):
    """Adoption listing."""

    __tablename__ = "pets"
    __table_args__ = (
        CheckConstraint("energy_level BETWEEN 1 AND 5", name="ck_pets_energy_level"),
        CheckConstraint("space_required BETWEEN 1 AND 5", name="ck_pets_space_required"),
        CheckConstraint("maintenance BETWEEN 1 AND 5", name="ck_pets_maintenance"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    breed: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    images: Mapped[str] = mapped_column(Text, nullable=False, default="")
    bio: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    energy_level: Mapped[int] = mapped_column(Integer, nullable=False)
    space_required: Mapped[int] = mapped_column(Integer, nullable=False)
    maintenance: Mapped[int] = mapped_column(Integer, nullable=False)
    child_friendly: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    allergy_safe: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    neutered: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    vaccinated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    orders: Mapped[List["PetOrder"]] = relationship(back_populates="pet")


class PetOrder(Base):
    __tablename__ = "pet_orders"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    pet_id: Mapped[str] = mapped_column(ForeignKey("pets.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    user: Mapped[User] = relationship(back_populates="pet_orders")
    pet: Mapped[Pet] = relationship(back_populates="orders")


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (CheckConstraint("stock >= 0", name="ck_products_stock"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    image: Mapped[str] = mapped_column(Text, nullable=False, default="")
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    ratings: Mapped[List["ProductRating"]] = relationship(
        back_populates="product", cascade="all, delete-orphan"
    )


class Cart(Base):
    __tablename__ = "carts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    user: Mapped[User] = relationship(back_populates="cart")
    items: Mapped[List["CartItem"]] = relationship(
        back_populates="cart", cascade="all, delete-orphan"
    )


class CartItem(Base):
    __tablename__ = "cart_items"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    cart_id: Mapped[str] = mapped_column(ForeignKey("carts.id", ondelete="CASCADE"), index=True)
    product_id: Mapped[str] = mapped_column(ForeignKey("products.id"), index=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    cart: Mapped[Cart] = relationship(back_populates="items")
    product: Mapped[Product] = relationship()


class Order(Base):
    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    total_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[OrderStatus] = mapped_column(
        SQLEnum(OrderStatus, name="order_status_enum"),
        nullable=False,
        default=OrderStatus.PENDING,
    )

    shipping_name: Mapped[str] = mapped_column(String(255), nullable=False)
    shipping_address: Mapped[str] = mapped_column(Text, nullable=False)
    shipping_city: Mapped[str] = mapped_column(String(100), nullable=False)
    shipping_state: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    shipping_zip: Mapped[str] = mapped_column(String(20), nullable=False)
    shipping_country: Mapped[str] = mapped_column(String(100), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    user: Mapped[User] = relationship(back_populates="orders")
    items: Mapped[List["OrderItem"]] = relationship(
        back_populates="order", cascade="all, delete-orphan"
    )


class OrderItem(Base):
    __tablename__ = "order_items"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    order_id: Mapped[str] = mapped_column(ForeignKey("orders.id", ondelete="CASCADE"), index=True)
    product_id: Mapped[str] = mapped_column(ForeignKey("products.id"), index=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    order: Mapped[Order] = relationship(back_populates="items")
    product: Mapped[Product] = relationship()


class ProductRating(Base):
    __tablename__ = "product_ratings"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_product_ratings_user_product"),
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_product_ratings_rating"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    product_id: Mapped[str] = mapped_column(ForeignKey("products.id", ondelete="CASCADE"), index=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    user: Mapped[User] = relationship(back_populates="ratings")
    product: Mapped[Product] = relationship(back_populates="ratings")


# ---------------------------------------------------------------------------
# Community boards
# ---------------------------------------------------------------------------


class DonationPost(Base):
    """A user's own pet offered for adoption. City and area are stored lowercase."""

    __tablename__ = "donation_posts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str] = mapped_column(Text, nullable=False, default="")
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    area: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    species: Mapped[str] = mapped_column(String(50), nullable=False)
    breed: Mapped[str] = mapped_column(String(255), nullable=False)
    gender: Mapped[str] = mapped_column(String(20), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    vaccinated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    neutered: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    upvotes_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    user: Mapped[User] = relationship(back_populates="donation_posts")
    comments: Mapped[List["PostComment"]] = relationship(
        back_populates="donation_post", cascade="all, delete-orphan"
    )
    upvotes: Mapped[List["PostUpvote"]] = relationship(
        back_populates="donation_post", cascade="all, delete-orphan"
    )
    applications: Mapped[List["AdoptionForm"]] = relationship(
        back_populates="donation_post", cascade="all, delete-orphan"
    )


class MissingPost(Base):
    """A missing-pet report. City and area are stored lowercase."""

    __tablename__ = "missing_posts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str] = mapped_column(Text, nullable=False, default="")
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    area: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    species: Mapped[str] = mapped_column(String(50), nullable=False)
    breed: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[MissingPostStatus] = mapped_column(
        SQLEnum(MissingPostStatus, name="missing_post_status_enum"),
        nullable=False,
        default=MissingPostStatus.NOT_FOUND,
    )
    upvotes_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    user: Mapped[User] = relationship(back_populates="missing_posts")
    comments: Mapped[List["PostComment"]] = relationship(
        back_populates="missing_post", cascade="all, delete-orphan"
    )
    upvotes: Mapped[List["PostUpvote"]] = relationship(
        back_populates="missing_post", cascade="all, delete-orphan"
    )


class PostComment(Base):
    """Comment on exactly one donation or missing-pet post."""

    __tablename__ = "post_comments"
    __table_args__ = (
        CheckConstraint(
            "(donation_post_id IS NULL) <> (missing_post_id IS NULL)",
            name="ck_post_comments_one_post",
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    donation_post_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("donation_posts.id", ondelete="CASCADE"), nullable=True, index=True
    )
    missing_post_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("missing_posts.id", ondelete="CASCADE"), nullable=True, index=True
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    user: Mapped[User] = relationship(back_populates="post_comments")
    donation_post: Mapped[Optional[DonationPost]] = relationship(back_populates="comments")
    missing_post: Mapped[Optional[MissingPost]] = relationship(back_populates="comments")


class PostUpvote(Base):
    """One upvote per user and post."""

    __tablename__ = "post_upvotes"
    __table_args__ = (
        UniqueConstraint("user_id", "donation_post_id", name="uq_post_upvotes_user_donation"),
        UniqueConstraint("user_id", "missing_post_id", name="uq_post_upvotes_user_missing"),
        CheckConstraint(
            "(donation_post_id IS NULL) <> (missing_post_id IS NULL)",
            name="ck_post_upvotes_one_post",
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    donation_post_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("donation_posts.id", ondelete="CASCADE"), nullable=True, index=True
    )
    missing_post_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("missing_posts.id", ondelete="CASCADE"), nullable=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    user: Mapped[User] = relationship(back_populates="post_upvotes")
    donation_post: Mapped[Optional[DonationPost]] = relationship(back_populates="upvotes")
    missing_post: Mapped[Optional[MissingPost]] = relationship(back_populates="upvotes")


class AdoptionForm(Base):
    """Application to adopt a donated pet."""

    __tablename__ = "adoption_forms"
    __table_args__ = (
        UniqueConstraint("user_id", "donation_post_id", name="uq_adoption_forms_user_post"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    donation_post_id: Mapped[str] = mapped_column(
        ForeignKey("donation_posts.id", ondelete="CASCADE"), index=True
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    meeting_schedule: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[AdoptionFormStatus] = mapped_column(
        SQLEnum(AdoptionFormStatus, name="adoption_form_status_enum"),
        nullable=False,
        default=AdoptionFormStatus.PENDING,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=_utcnow)

    user: Mapped[User] = relationship(back_populates="adoption_forms")
    donation_post: Mapped[DonationPost] = relationship(back_populates="applications")
