"""Data schemas and models for PawMart."""

from .user_profile import UserProfile, UserPreferences, PreferencesUpdate, ProfileUpdate, UserCreate
from .pet_data import (
    Pet,
    PetAttributes,
    PetCreate,
    PetOrder,
    ScoredPet,
    PetRecommendations,
    CompatibilityBreakdown,
)
from .store import (
    Product,
    ProductCreate,
    Cart,
    CartItem,
    Order,
    OrderItem,
    OrderStatus,
    ShippingInfo,
    ProductRating,
)
from .community import (
    AdoptionForm,
    AdoptionFormCreate,
    AdoptionFormStatus,
    CommentCreate,
    DonationPost,
    DonationPostCreate,
    DonationPostDetail,
    DonationPostUpdate,
    Meetings,
    MissingPost,
    MissingPostCreate,
    MissingPostDetail,
    MissingPostStatus,
    MissingPostUpdate,
    PostComment,
    UpvoteStatus,
)

__all__ = [
    "UserProfile",
    "UserPreferences",
    "PreferencesUpdate",
    "ProfileUpdate",
    "UserCreate",
    "Pet",
    "PetAttributes",
    "PetCreate",
    "PetOrder",
    "ScoredPet",
    "PetRecommendations",
    "CompatibilityBreakdown",
    "Product",
    "ProductCreate",
    "Cart",
    "CartItem",
    "Order",
    "OrderItem",
    "OrderStatus",
    "ShippingInfo",
    "ProductRating",
    "AdoptionForm",
    "AdoptionFormCreate",
    "AdoptionFormStatus",
    "CommentCreate",
    "DonationPost",
    "DonationPostCreate",
    "DonationPostDetail",
    "DonationPostUpdate",
    "Meetings",
    "MissingPost",
    "MissingPostCreate",
    "MissingPostDetail",
    "MissingPostStatus",
    "MissingPostUpdate",
    "PostComment",
    "UpvoteStatus",
]
