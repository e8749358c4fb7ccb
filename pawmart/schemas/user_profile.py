"""
User profile and preferences data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserPreferences(BaseModel):
    """
    Adoption preferences used for compatibility scoring.

    Values are not range-checked here: the scorer accepts any integers and
    only clamps its final result. Range checks happen on the way in, see
    PreferencesUpdate and UserCreate.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    daily_availability: int = Field(..., description="Hours per day available for the pet (1-5)")
    has_outdoor_space: bool = Field(..., description="Has yard or outdoor space")
    has_children: bool = Field(..., description="Has children at home")
    has_allergies: bool = Field(..., description="Someone at home has pet allergies")
    experience_level: int = Field(..., description="Pet ownership experience (1-5)")


class PreferencesUpdate(BaseModel):
    """Partial preferences update; omitted fields are left unchanged."""

    daily_availability: Optional[int] = Field(default=None, ge=1, le=5)
    has_outdoor_space: Optional[bool] = None
    has_children: Optional[bool] = None
    has_allergies: Optional[bool] = None
    experience_level: Optional[int] = Field(default=None, ge=1, le=5)


class UserCreate(BaseModel):
    """Data required to register a user."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    age: Optional[int] = Field(default=None, ge=0)
    image: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    area: Optional[str] = None

    daily_availability: int = Field(default=3, ge=1, le=5)
    has_outdoor_space: bool = False
    has_children: bool = False
    has_allergies: bool = False
    experience_level: int = Field(default=3, ge=1, le=5)


class ProfileUpdate(BaseModel):
    """Partial profile update; omitted fields are left unchanged."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    age: Optional[int] = Field(default=None, ge=0)
    image: Optional[str] = None
    country: Optional[str] = Field(default=None, max_length=100)
    city: Optional[str] = Field(default=None, max_length=100)
    area: Optional[str] = Field(default=None, max_length=100)


class UserProfile(BaseModel):
    """Complete user profile as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    age: Optional[int] = None
    image: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    area: Optional[str] = None

    daily_availability: int
    has_outdoor_space: bool
    has_children: bool
    has_allergies: bool
    experience_level: int

    created_at: datetime
    updated_at: datetime
