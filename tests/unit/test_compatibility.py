"""
Unit tests for the compatibility scorer.
"""

import itertools

import pytest

from pawmart.models.compatibility_model import (
    CompatibilityModel,
    availability_term,
    calculate_compatibility_score,
    score_breakdown,
)
from pawmart.schemas.pet_data import PetAttributes
from pawmart.schemas.user_profile import UserPreferences


def make_prefs(**overrides) -> UserPreferences:
    data = {
        "daily_availability": 3,
        "has_outdoor_space": True,
        "has_children": False,
        "has_allergies": False,
        "experience_level": 2,
    }
    data.update(overrides)
    return UserPreferences(**data)


def make_pet(**overrides) -> PetAttributes:
    data = {
        "energy_level": 4,
        "space_required": 4,
        "maintenance": 3,
        "child_friendly": True,
        "allergy_safe": False,
        "neutered": True,
        "vaccinated": True,
    }
    data.update(overrides)
    return PetAttributes(**data)


class TestCompatibilityScore:
    """Unit tests for calculate_compatibility_score and score_breakdown."""

    def test_example_scenario(self):
        """Outdoor space, no children, no allergies against an active, healthy dog."""
        breakdown = score_breakdown(make_prefs(), make_pet())

        assert breakdown.availability == 20
        assert breakdown.space == 15
        assert breakdown.children == 10
        assert breakdown.allergies == 10
        assert breakdown.experience == 12
        assert breakdown.health == 15
        assert breakdown.score == 82
        assert calculate_compatibility_score(make_prefs(), make_pet()) == 82

    def test_child_unfriendly_pet_with_children(self):
        prefs = make_prefs(has_children=True)
        friendly = score_breakdown(prefs, make_pet(child_friendly=True))
        unfriendly = score_breakdown(prefs, make_pet(child_friendly=False))
        childless = score_breakdown(make_prefs(has_children=False), make_pet(child_friendly=False))

        assert unfriendly.children == -15
        assert friendly.children == 15
        assert friendly.score - unfriendly.score == 30
        # Compared with a household without children the penalty costs 25 points
        assert childless.score - unfriendly.score == 25

    @pytest.mark.parametrize("child_friendly", [True, False])
    def test_no_children_is_neutral(self, child_friendly):
        breakdown = score_breakdown(make_prefs(has_children=False), make_pet(child_friendly=child_friendly))
        assert breakdown.children == 10

    @pytest.mark.parametrize("allergy_safe", [True, False])
    def test_no_allergies_is_neutral(self, allergy_safe):
        breakdown = score_breakdown(make_prefs(has_allergies=False), make_pet(allergy_safe=allergy_safe))
        assert breakdown.allergies == 10

    def test_allergy_terms(self):
        prefs = make_prefs(has_allergies=True)
        assert score_breakdown(prefs, make_pet(allergy_safe=True)).allergies == 15
        assert score_breakdown(prefs, make_pet(allergy_safe=False)).allergies == -15

    @pytest.mark.parametrize("field", ["neutered", "vaccinated"])
    def test_health_bonus_is_additive(self, field):
        without = calculate_compatibility_score(make_prefs(), make_pet(**{field: False}))
        with_bonus = calculate_compatibility_score(make_prefs(), make_pet(**{field: True}))
        assert with_bonus - without == 7.5

    def test_space_term_without_outdoor_space(self):
        prefs = make_prefs(has_outdoor_space=False)
        assert score_breakdown(prefs, make_pet(space_required=1)).space == 12
        assert score_breakdown(prefs, make_pet(space_required=5)).space == 0

    def test_space_term_ignores_requirement_with_outdoor_space(self):
        for space_required in range(1, 6):
            breakdown = score_breakdown(make_prefs(), make_pet(space_required=space_required))
            assert breakdown.space == 15

    def test_intermediate_terms_are_not_clamped(self):
        """Out-of-range input drives a term negative; only the total is clamped."""
        prefs = make_prefs(has_outdoor_space=False)
        pet = make_pet(space_required=10)

        breakdown = score_breakdown(prefs, pet)

        assert breakdown.space == -15
        assert breakdown.raw_total == breakdown.score

    def test_total_is_clamped_at_zero(self):
        prefs = make_prefs(
            daily_availability=1,
            has_outdoor_space=False,
            has_children=True,
            has_allergies=True,
            experience_level=5,
        )
        pet = PetAttributes(
            energy_level=5,
            space_required=20,
            maintenance=1,
            child_friendly=False,
            allergy_safe=False,
            neutered=False,
            vaccinated=False,
        )

        breakdown = score_breakdown(prefs, pet)

        assert breakdown.raw_total < 0
        assert breakdown.score == 0

    def test_maximum_score_is_hundred(self):
        prefs = make_prefs(daily_availability=2, has_children=True, has_allergies=True, experience_level=3)
        pet = make_pet(energy_level=3, maintenance=3, child_friendly=True, allergy_safe=True)

        breakdown = score_breakdown(prefs, pet)

        # 25 + 15 + 15 + 15 + 15 + 15
        assert breakdown.raw_total == 100
        assert breakdown.score == 100

    def test_score_is_bounded_for_all_valid_inputs(self):
        pets = [
            PetAttributes(
                energy_level=energy,
                space_required=space,
                maintenance=maintenance,
                child_friendly=child,
                allergy_safe=allergy,
                neutered=neutered,
                vaccinated=vaccinated,
            )
            for energy, space, maintenance in itertools.product(range(1, 6), repeat=3)
            for child, allergy, neutered, vaccinated in itertools.product([True, False], repeat=4)
        ]
        users = [
            UserPreferences(
                daily_availability=availability,
                has_outdoor_space=outdoor,
                has_children=children,
                has_allergies=allergies,
                experience_level=experience,
            )
            for availability, experience in itertools.product([1, 5], repeat=2)
            for outdoor, children, allergies in itertools.product([True, False], repeat=3)
        ]

        for prefs in users:
            for pet in pets:
                assert 0 <= calculate_compatibility_score(prefs, pet) <= 100

    def test_availability_term_is_monotonic_in_mismatch(self):
        pet = make_pet(energy_level=3, maintenance=3)  # demand 6
        terms = {
            availability: availability_term(make_prefs(daily_availability=availability), pet)
            for availability in range(1, 6)
        }
        mismatches = {a: abs(a * 3 - 6) for a in terms}

        for a, b in itertools.permutations(terms, 2):
            if mismatches[a] < mismatches[b]:
                assert terms[a] >= terms[b]

    def test_availability_term_never_negative(self):
        pet = make_pet(energy_level=1, maintenance=1)
        assert availability_term(make_prefs(daily_availability=5), pet) == 0

    def test_deterministic(self):
        prefs, pet = make_prefs(has_children=True), make_pet(child_friendly=False)
        assert calculate_compatibility_score(prefs, pet) == calculate_compatibility_score(prefs, pet)


class TestCompatibilityModel:
    """Unit tests for ranking."""

    @pytest.fixture
    def model(self):
        return CompatibilityModel(top_k=3)

    @pytest.fixture
    def pets(self):
        return [
            make_pet(neutered=False, vaccinated=False),   # 67
            make_pet(),                                   # 82
            make_pet(vaccinated=False),                   # 74.5
            make_pet(energy_level=1, maintenance=1),      # 69.5
            make_pet(neutered=False),                     # 74.5
        ]

    def test_rank_pets_sorted_descending(self, model, pets):
        ranked = model.rank_pets(make_prefs(), pets)

        scores = [score for _, score in ranked]
        assert scores == sorted(scores, reverse=True)
        assert ranked[0][0] is pets[1]
        assert len(ranked) == len(pets)

    def test_rank_pets_ties_keep_input_order(self, model, pets):
        ranked = model.rank_pets(make_prefs(), pets)
        tied = [pet for pet, score in ranked if score == 74.5]
        assert tied == [pets[2], pets[4]]

    def test_recommend_returns_top_k_and_all(self, model, pets):
        recommended, ranked = model.recommend(make_prefs(), pets)

        assert len(recommended) == 3
        assert recommended == ranked[:3]
        assert len(ranked) == len(pets)

    def test_recommend_with_fewer_pets_than_top_k(self, model):
        recommended, ranked = model.recommend(make_prefs(), [make_pet()])
        assert len(recommended) == 1
        assert len(ranked) == 1

    def test_rank_pets_with_attribute_mapper(self, model):
        rows = [{"id": "a", "attrs": make_pet(neutered=False)}, {"id": "b", "attrs": make_pet()}]
        ranked = model.rank_pets(make_prefs(), rows, lambda row: row["attrs"])
        assert [row["id"] for row, _ in ranked] == ["b", "a"]

    def test_empty_catalog(self, model):
        assert model.recommend(make_prefs(), []) == ([], [])
