"""Adoption catalog routes."""

from typing import List

from fastapi import APIRouter, Depends, status

from ...schemas.pet_data import Pet, PetOrder, PetRecommendations
from ...services import PetShopService
from ..dependencies import get_current_user_id, get_petshop_service

router = APIRouter(prefix="/api/pets", tags=["pets"])


@router.get("", response_model=List[Pet])
def list_pets(service: PetShopService = Depends(get_petshop_service)) -> List[Pet]:
    return service.list_available_pets()


# Declared before /{pet_id} so "recommended" is not taken as an id
@router.get("/recommended", response_model=PetRecommendations)
def recommended_pets(
    user_id: str = Depends(get_current_user_id),
    service: PetShopService = Depends(get_petshop_service),
) -> PetRecommendations:
    """Available pets ranked by compatibility with the caller."""
    return service.get_recommended_pets(user_id)


@router.get("/{pet_id}", response_model=Pet)
def get_pet(pet_id: str, service: PetShopService = Depends(get_petshop_service)) -> Pet:
    return service.get_pet(pet_id)


@router.post("/{pet_id}/order", response_model=PetOrder, status_code=status.HTTP_201_CREATED)
def order_pet(
    pet_id: str,
    user_id: str = Depends(get_current_user_id),
    service: PetShopService = Depends(get_petshop_service),
) -> PetOrder:
    return service.create_pet_order(user_id, pet_id)
