"""
Pet data models and schemas.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class PetAttributes(BaseModel):
    """Pet attributes that feed the compatibility scorer."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    energy_level: int = Field(..., description="Energy level (1-5)")
    space_required: int = Field(..., description="Space requirement (1-5)")
    maintenance: int = Field(..., description="Grooming and care effort (1-5)")
    child_friendly: bool = Field(...)
    allergy_safe: bool = Field(...)
    neutered: bool = Field(default=False)
    vaccinated: bool = Field(default=False)


class PetCreate(BaseModel):
    """Catalog entry for a new adoption listing."""

    name: str = Field(..., min_length=1, max_length=255)
    breed: str = Field(..., min_length=1, max_length=255)
    age: int = Field(..., ge=0, description="Age in years")
    price: float = Field(..., ge=0)
    images: str = Field(default="")
    bio: str = Field(default="")
    description: str = Field(default="")

    energy_level: int = Field(..., ge=1, le=5)
    space_required: int = Field(..., ge=1, le=5)
    maintenance: int = Field(..., ge=1, le=5)
    child_friendly: bool = False
    allergy_safe: bool = False
    neutered: bool = False
    vaccinated: bool = False

    class Config:
        str_strip_whitespace = True
        json_schema_extra = {
            "example": {
                "name": "Max",
                "breed": "Golden Retriever",
                "age": 3,
                "price": 350.0,
                "bio": "Friendly and energetic golden retriever who loves to play fetch.",
                "energy_level": 4,
                "space_required": 4,
                "maintenance": 3,
                "child_friendly": True,
                "allergy_safe": False,
                "neutered": True,
                "vaccinated": True
            }
        }


class Pet(BaseModel):
    """Adoption listing as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    breed: str
    age: int
    price: float
    images: str
    bio: str
    description: str

    energy_level: int
    space_required: int
    maintenance: int
    child_friendly: bool
    allergy_safe: bool
    neutered: bool
    vaccinated: bool

    is_available: bool
    created_at: datetime

    def attributes(self) -> PetAttributes:
        """Scoring view of this listing."""
        return PetAttributes.model_validate(self)


class ScoredPet(Pet):
    """Pet annotated with its compatibility score for one user."""

    compatibility_score: float = Field(..., ge=0, le=100)


class PetRecommendations(BaseModel):
    """Top matches plus the full ranked list."""

    recommended_pets: List[ScoredPet] = Field(default_factory=list)
    all_pets: List[ScoredPet] = Field(default_factory=list)


class CompatibilityBreakdown(BaseModel):
    """Per-term contributions to a compatibility score."""

    model_config = ConfigDict(frozen=True)

    availability: float
    space: float
    children: float
    allergies: float
    experience: float
    health: float
    raw_total: float = Field(..., description="Sum of all terms before clamping")
    score: float = Field(..., ge=0, le=100, description="Final score clamped to [0, 100]")


class PetOrder(BaseModel):
    """Adoption order."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    pet_id: str
    created_at: datetime
    pet: Optional[Pet] = None
