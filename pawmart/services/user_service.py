"""
User Service - accounts and adoption preferences.
"""

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db import models
from ..exceptions import ConflictError, NotFoundError
from ..schemas.user_profile import (
    PreferencesUpdate,
    ProfileUpdate,
    UserCreate,
    UserPreferences,
    UserProfile,
)
from ..utils.validators import sanitize_optional, sanitize_string

PROFILE_FIELD_LIMITS = {"name": 255, "image": 1000, "country": 100, "city": 100, "area": 100}


def get_user_row(session: Session, user_id: str) -> models.User:
    """
    Fetch a user row or fail.

    Raises:
        NotFoundError: If the user does not exist
    """
    user = session.get(models.User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


class UserService:
    """Reads and updates user accounts and their adoption preferences."""

    def __init__(self, session: Session):
        self.session = session

    def get_user(self, user_id: str) -> UserProfile:
        return UserProfile.model_validate(get_user_row(self.session, user_id))

    def create_user(self, data: UserCreate) -> UserProfile:
        """
        Register a new user.

        Args:
            data: Validated registration data

        Returns:
            The created user profile

        Raises:
            ConflictError: If the email address is already registered
        """
        email = data.email.lower()
        existing = self.session.scalar(select(models.User.id).where(models.User.email == email))
        if existing is not None:
            raise ConflictError("A user with this email already exists")

        user = models.User(
            name=sanitize_string(data.name, 255),
            email=email,
            age=data.age,
            image=sanitize_optional(data.image),
            country=sanitize_optional(data.country, 100),
            city=sanitize_optional(data.city, 100),
            area=sanitize_optional(data.area, 100),
            daily_availability=data.daily_availability,
            has_outdoor_space=data.has_outdoor_space,
            has_children=data.has_children,
            has_allergies=data.has_allergies,
            experience_level=data.experience_level,
        )
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise ConflictError("A user with this email already exists") from e

        logger.info(f"Created user {user.id}")
        return UserProfile.model_validate(user)

    def get_preferences(self, user_id: str) -> UserPreferences:
        """Get the scoring view of a user's preferences."""
        return UserPreferences.model_validate(get_user_row(self.session, user_id))

    def update_preferences(self, user_id: str, update: PreferencesUpdate) -> UserProfile:
        """
        Apply a partial preferences update.

        Only fields explicitly present in the update are written.

        Args:
            user_id: User identifier
            update: Fields to change

        Returns:
            The updated user profile
        """
        user = get_user_row(self.session, user_id)
        changes = update.model_dump(exclude_unset=True, exclude_none=True)

        for field, value in changes.items():
            setattr(user, field, value)

        if changes:
            self.session.commit()
            logger.info(f"Updated preferences for user {user_id}: {sorted(changes)}")

        return UserProfile.model_validate(user)

    def update_profile(self, user_id: str, update: ProfileUpdate) -> UserProfile:
        """
        Apply a partial profile update.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = get_user_row(self.session, user_id)
        changes = update.model_dump(exclude_unset=True, exclude_none=True)

        for field, value in changes.items():
            if isinstance(value, str):
                value = sanitize_string(value, PROFILE_FIELD_LIMITS[field])
            setattr(user, field, value)

        self.session.commit()
        logger.info(f"Updated profile for user {user_id}")
        return UserProfile.model_validate(user)
