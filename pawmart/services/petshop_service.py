"""
Pet Shop Service - adoption listings, adoption orders and recommendations.
"""

from typing import List, Optional

from loguru import logger
from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from ..config import get_settings
from ..db import models
from ..exceptions import ConflictError, NotFoundError
from ..models.compatibility_model import CompatibilityModel
from ..schemas.pet_data import (
    Pet,
    PetAttributes,
    PetCreate,
    PetOrder,
    PetRecommendations,
    ScoredPet,
)
from ..schemas.user_profile import UserPreferences
from ..utils.helpers import to_decimal
from ..utils.validators import sanitize_string
from .user_service import get_user_row


class PetShopService:
    """
    Adoption catalog operations.
    Uses the compatibility model to rank available pets for a user.
    """

    def __init__(self, session: Session, top_k: Optional[int] = None):
        self.session = session
        if top_k is None:
            top_k = get_settings().recommendation_top_k
        self.model = CompatibilityModel(top_k=top_k)

    def _get_pet_row(self, pet_id: str) -> models.Pet:
        pet = self.session.get(models.Pet, pet_id)
        if pet is None:
            raise NotFoundError("Pet not found")
        return pet

    def _available_pets(self) -> List[models.Pet]:
        stmt = (
            select(models.Pet)
            .where(models.Pet.is_available.is_(True))
            .order_by(models.Pet.created_at.desc(), models.Pet.id)
        )
        return list(self.session.scalars(stmt).all())

    def list_available_pets(self) -> List[Pet]:
        """Get all pets still open for adoption, newest first."""
        return [Pet.model_validate(pet) for pet in self._available_pets()]

    def get_pet(self, pet_id: str) -> Pet:
        return Pet.model_validate(self._get_pet_row(pet_id))

    def create_pet(self, data: PetCreate) -> Pet:
        """Add a listing to the adoption catalog."""
        values = data.model_dump()
        values["name"] = sanitize_string(values["name"], 255)
        values["breed"] = sanitize_string(values["breed"], 255)
        values["price"] = to_decimal(values["price"])

        pet = models.Pet(**values)
        self.session.add(pet)
        self.session.commit()

        logger.info(f"Created pet listing {pet.id} ({pet.name})")
        return Pet.model_validate(pet)

    def create_pet_order(self, user_id: str, pet_id: str) -> PetOrder:
        """
        Adopt a pet.

        Creating the order and marking the pet unavailable happen in one
        transaction. The availability flip only succeeds while the pet is
        still available, so each listing is adopted at most once.

        Args:
            user_id: Adopting user
            pet_id: Pet to adopt

        Returns:
            The created order with its pet

        Raises:
            NotFoundError: If the user or pet does not exist
            ConflictError: If the pet has already been adopted
        """
        get_user_row(self.session, user_id)
        self._get_pet_row(pet_id)

        try:
            result = self.session.execute(
                update(models.Pet)
                .where(models.Pet.id == pet_id, models.Pet.is_available.is_(True))
                .values(is_available=False)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                raise ConflictError("Pet is no longer available")

            order = models.PetOrder(user_id=user_id, pet_id=pet_id)
            self.session.add(order)
            self.session.commit()
        except ConflictError:
            self.session.rollback()
            logger.warning(f"User {user_id} tried to adopt unavailable pet {pet_id}")
            raise
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error creating pet order: {e}")
            raise

        self.session.expire_all()
        logger.info(f"User {user_id} adopted pet {pet_id} (order {order.id})")
        return PetOrder.model_validate(order)

    def list_user_pet_orders(self, user_id: str) -> List[PetOrder]:
        """Get a user's adoption orders, newest first."""
        get_user_row(self.session, user_id)
        stmt = (
            select(models.PetOrder)
            .where(models.PetOrder.user_id == user_id)
            .options(selectinload(models.PetOrder.pet))
            .order_by(models.PetOrder.created_at.desc(), models.PetOrder.id)
        )
        return [PetOrder.model_validate(order) for order in self.session.scalars(stmt)]

    def get_recommended_pets(self, user_id: str) -> PetRecommendations:
        """
        Rank every available pet for a user.

        Args:
            user_id: User identifier

        Returns:
            PetRecommendations with the top matches and the full scored list,
            both sorted by compatibility score descending

        Raises:
            NotFoundError: If the user does not exist
        """
        prefs = UserPreferences.model_validate(get_user_row(self.session, user_id))
        pets = self._available_pets()

        logger.info(f"Scoring {len(pets)} available pets for user {user_id}")
        recommended, ranked = self.model.recommend(prefs, pets, PetAttributes.model_validate)

        def scored(pet: models.Pet, score: float) -> ScoredPet:
            return ScoredPet(**Pet.model_validate(pet).model_dump(), compatibility_score=score)

        all_pets = [scored(pet, score) for pet, score in ranked]
        return PetRecommendations(
            recommended_pets=all_pets[: len(recommended)],
            all_pets=all_pets,
        )
