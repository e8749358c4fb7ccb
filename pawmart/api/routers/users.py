"""User account and preference routes."""

from typing import List

from fastapi import APIRouter, Depends, status

from ...schemas.pet_data import PetOrder
from ...schemas.user_profile import (
    PreferencesUpdate,
    ProfileUpdate,
    UserCreate,
    UserPreferences,
    UserProfile,
)
from ...services import PetShopService, UserService
from ..dependencies import get_current_user_id, get_petshop_service, get_user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserProfile, status_code=status.HTTP_201_CREATED)
def register_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserProfile:
    """Register a new user. The returned id identifies the caller on other routes."""
    return service.create_user(data)


@router.get("/me", response_model=UserProfile)
def get_me(
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
) -> UserProfile:
    return service.get_user(user_id)


@router.put("/me", response_model=UserProfile)
def update_me(
    update: ProfileUpdate,
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
) -> UserProfile:
    return service.update_profile(user_id, update)


@router.get("/preferences", response_model=UserPreferences)
def get_preferences(
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
) -> UserPreferences:
    return service.get_preferences(user_id)


@router.put("/preferences", response_model=UserProfile)
def update_preferences(
    update: PreferencesUpdate,
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
) -> UserProfile:
    """Update any subset of the caller's adoption preferences."""
    return service.update_preferences(user_id, update)


@router.get("/pet-orders", response_model=List[PetOrder])
def list_pet_orders(
    user_id: str = Depends(get_current_user_id),
    service: PetShopService = Depends(get_petshop_service),
) -> List[PetOrder]:
    return service.list_user_pet_orders(user_id)
