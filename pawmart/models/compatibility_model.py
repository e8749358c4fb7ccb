"""
Compatibility model for pet matching.
Scores how well a pet fits a user's household as a weighted sum of six
independent terms, clamped to [0, 100].
"""

from typing import Callable, List, Sequence, Tuple, TypeVar

from ..schemas.pet_data import CompatibilityBreakdown, PetAttributes
from ..schemas.user_profile import UserPreferences

MIN_SCORE = 0.0
MAX_SCORE = 100.0

AVAILABILITY_WEIGHT = 25.0
AVAILABILITY_HOURS_FACTOR = 3
AVAILABILITY_PENALTY = 2.5

SPACE_WEIGHT = 15.0
SPACE_PENALTY = 3

MATCH_BONUS = 15.0
MISMATCH_PENALTY = -15.0
NEUTRAL_BONUS = 10.0

EXPERIENCE_WEIGHT = 15.0
EXPERIENCE_PENALTY = 3

HEALTH_BONUS = 7.5

P = TypeVar("P")


def availability_term(prefs: UserPreferences, pet: PetAttributes) -> float:
    """Daily availability against the pet's energy plus maintenance. Never negative."""
    demand = pet.energy_level + pet.maintenance
    mismatch = abs(prefs.daily_availability * AVAILABILITY_HOURS_FACTOR - demand)
    return max(0.0, AVAILABILITY_WEIGHT - mismatch * AVAILABILITY_PENALTY)


def space_term(prefs: UserPreferences, pet: PetAttributes) -> float:
    """Full marks with outdoor space; otherwise penalized by space requirement (may go negative)."""
    if prefs.has_outdoor_space:
        return SPACE_WEIGHT
    return SPACE_WEIGHT - pet.space_required * SPACE_PENALTY


def _household_term(user_flag: bool, pet_flag: bool) -> float:
    if not user_flag:
        return NEUTRAL_BONUS
    return MATCH_BONUS if pet_flag else MISMATCH_PENALTY


def children_term(prefs: UserPreferences, pet: PetAttributes) -> float:
    return _household_term(prefs.has_children, pet.child_friendly)


def allergy_term(prefs: UserPreferences, pet: PetAttributes) -> float:
    return _household_term(prefs.has_allergies, pet.allergy_safe)


def experience_term(prefs: UserPreferences, pet: PetAttributes) -> float:
    """Owner experience against the pet's maintenance needs. Never negative."""
    mismatch = abs(prefs.experience_level - pet.maintenance)
    return max(0.0, EXPERIENCE_WEIGHT - mismatch * EXPERIENCE_PENALTY)


def health_term(pet: PetAttributes) -> float:
    score = 0.0
    if pet.neutered:
        score += HEALTH_BONUS
    if pet.vaccinated:
        score += HEALTH_BONUS
    return score


def score_breakdown(prefs: UserPreferences, pet: PetAttributes) -> CompatibilityBreakdown:
    """
    Calculate every term of the compatibility score.

    Only the final sum is clamped; individual terms keep their raw values
    so a space-hungry pet can pull the total down by more than its weight.

    Args:
        prefs: User preferences
        pet: Pet scoring attributes

    Returns:
        CompatibilityBreakdown with each term, the raw total and the clamped score
    """
    terms = {
        "availability": availability_term(prefs, pet),
        "space": space_term(prefs, pet),
        "children": children_term(prefs, pet),
        "allergies": allergy_term(prefs, pet),
        "experience": experience_term(prefs, pet),
        "health": health_term(pet),
    }
    raw_total = sum(terms.values())

    return CompatibilityBreakdown(
        **terms,
        raw_total=raw_total,
        score=max(MIN_SCORE, min(MAX_SCORE, raw_total)),
    )


def calculate_compatibility_score(prefs: UserPreferences, pet: PetAttributes) -> float:
    """
    Calculate the compatibility score between a user and a pet.

    Args:
        prefs: User preferences
        pet: Pet scoring attributes

    Returns:
        Score in [0, 100]
    """
    return score_breakdown(prefs, pet).score


class CompatibilityModel:
    """
    Ranks pets for a user by compatibility score.

    Callers provide a function mapping their pet objects to PetAttributes,
    so ORM rows, API models and plain attribute sets can be ranked alike.
    """

    def __init__(self, top_k: int = 3):
        """Initialize the model with the number of pets to recommend."""
        self.top_k = top_k

    def rank_pets(
        self,
        prefs: UserPreferences,
        pets: Sequence[P],
        to_attributes: Callable[[P], PetAttributes] = PetAttributes.model_validate,
    ) -> List[Tuple[P, float]]:
        """
        Score and rank a list of pets for a user.

        Args:
            prefs: User preferences
            pets: Candidate pets
            to_attributes: Maps a candidate to PetAttributes

        Returns:
            List of (pet, score) tuples, highest score first; ties keep input order
        """
        scored_pets = [
            (pet, calculate_compatibility_score(prefs, to_attributes(pet)))
            for pet in pets
        ]

        # Sort by score descending
        scored_pets.sort(key=lambda x: x[1], reverse=True)

        return scored_pets

    def recommend(
        self,
        prefs: UserPreferences,
        pets: Sequence[P],
        to_attributes: Callable[[P], PetAttributes] = PetAttributes.model_validate,
    ) -> Tuple[List[Tuple[P, float]], List[Tuple[P, float]]]:
        """
        Split a ranked list into the top matches and the full ranking.

        Returns:
            Tuple of (recommended, all_ranked)
        """
        ranked = self.rank_pets(prefs, pets, to_attributes)
        return ranked[: self.top_k], ranked
