"""
Sample catalog data for development databases.
"""

from typing import Dict

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from .db import models
from .schemas.pet_data import PetCreate
from .schemas.store import ProductCreate
from .services.petshop_service import PetShopService
from .services.store_service import StoreService

SAMPLE_PETS = [
    PetCreate(
        name="Max",
        breed="Golden Retriever",
        age=3,
        price=350.0,
        bio="Friendly and energetic golden retriever who loves to play fetch.",
        description="Great with children and other pets, house-trained and loves outdoor activities.",
        energy_level=4,
        space_required=4,
        maintenance=3,
        child_friendly=True,
        allergy_safe=False,
        neutered=True,
        vaccinated=True,
    ),
    PetCreate(
        name="Bella",
        breed="Beagle",
        age=2,
        price=300.0,
        bio="Curious and playful beagle who loves to explore.",
        description="Affectionate and good with children; might need some training with other pets.",
        energy_level=5,
        space_required=3,
        maintenance=3,
        child_friendly=True,
        allergy_safe=False,
        vaccinated=True,
    ),
    PetCreate(
        name="Luna",
        breed="Siamese",
        age=2,
        price=250.0,
        bio="Elegant and vocal Siamese cat who loves attention.",
        description="Independent but enjoys cuddle time. Litter-trained.",
        energy_level=3,
        space_required=2,
        maintenance=2,
        child_friendly=True,
        allergy_safe=False,
        neutered=True,
        vaccinated=True,
    ),
    PetCreate(
        name="Oliver",
        breed="Maine Coon",
        age=4,
        price=275.0,
        bio="Gentle giant with a fluffy coat.",
        description="Calm and sociable, needs regular grooming.",
        energy_level=2,
        space_required=3,
        maintenance=4,
        child_friendly=True,
        allergy_safe=False,
        neutered=True,
    ),
    PetCreate(
        name="Charlie",
        breed="Cockatiel",
        age=1,
        price=150.0,
        bio="Cheerful cockatiel who whistles tunes.",
        description="Small space needs and suitable for homes with allergies.",
        energy_level=3,
        space_required=1,
        maintenance=3,
        child_friendly=True,
        allergy_safe=True,
        vaccinated=True,
    ),
]

SAMPLE_PRODUCTS = [
    ProductCreate(name="Premium Dog Food", price=29.99, stock=50, category="food",
                  description="Real chicken and vegetables for adult dogs of all breeds."),
    ProductCreate(name="Kitten Formula", price=24.99, stock=35, category="food",
                  description="Balanced nutrition for growing kittens."),
    ProductCreate(name="Senior Cat Food", price=27.99, stock=40, category="food",
                  description="Gentle formula for older cats."),
    ProductCreate(name="Grain-Free Dog Food", price=39.99, stock=25, category="food",
                  description="For dogs with grain sensitivities."),
    ProductCreate(name="Interactive Cat Toy", price=19.99, stock=45, category="toy",
                  description="Keeps indoor cats active."),
    ProductCreate(name="Durable Dog Chew Toy", price=14.99, stock=60, category="toy",
                  description="Built for heavy chewers."),
    ProductCreate(name="Bird Swing", price=9.99, stock=30, category="toy",
                  description="Wooden swing for small and medium birds."),
]


def seed_catalog(session: Session) -> Dict[str, int]:
    """
    Load sample pets and products into an empty catalog.

    Tables that already hold rows are left untouched.

    Returns:
        Number of pets and products created
    """
    created = {"pets": 0, "products": 0}

    if not session.scalar(select(func.count()).select_from(models.Pet)):
        petshop = PetShopService(session)
        for pet in SAMPLE_PETS:
            petshop.create_pet(pet)
            created["pets"] += 1

    if not session.scalar(select(func.count()).select_from(models.Product)):
        store = StoreService(session)
        for product in SAMPLE_PRODUCTS:
            store.create_product(product)
            created["products"] += 1

    logger.info(f"Seeded {created['pets']} pets and {created['products']} products")
    return created
