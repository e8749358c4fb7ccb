"""
Shared pytest fixtures: an in-memory database per test and factories for
users, pets, products and board posts.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from pawmart.api.app import create_app
from pawmart.db.session import create_db_engine, create_tables, drop_tables, get_session
from pawmart.schemas.community import DonationPostCreate, MissingPostCreate
from pawmart.schemas.pet_data import PetCreate
from pawmart.schemas.store import ProductCreate
from pawmart.schemas.user_profile import UserCreate
from pawmart.services import (
    DonationPostService,
    MissingPostService,
    PetShopService,
    StoreService,
    UserService,
)


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database."""
    engine = create_db_engine("sqlite://")
    create_tables(engine)
    yield engine
    drop_tables(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def make_user(session):
    """Create a user; keyword arguments override the defaults."""
    counter = {"n": 0}

    def _make_user(**overrides):
        counter["n"] += 1
        data = {
            "name": f"Test User {counter['n']}",
            "email": f"user{counter['n']}@example.com",
            "daily_availability": 3,
            "has_outdoor_space": True,
            "has_children": False,
            "has_allergies": False,
            "experience_level": 2,
        }
        data.update(overrides)
        return UserService(session).create_user(UserCreate(**data))

    return _make_user


@pytest.fixture
def make_pet(session):
    """Create a pet listing; keyword arguments override the defaults."""

    def _make_pet(**overrides):
        data = {
            "name": "Max",
            "breed": "Golden Retriever",
            "age": 3,
            "price": 350.0,
            "energy_level": 4,
            "space_required": 4,
            "maintenance": 3,
            "child_friendly": True,
            "allergy_safe": False,
            "neutered": True,
            "vaccinated": True,
        }
        data.update(overrides)
        return PetShopService(session).create_pet(PetCreate(**data))

    return _make_pet


@pytest.fixture
def make_product(session):
    """Create a product; keyword arguments override the defaults."""

    def _make_product(**overrides):
        data = {
            "name": "Premium Dog Food",
            "price": 29.99,
            "category": "food",
            "stock": 10,
        }
        data.update(overrides)
        return StoreService(session).create_product(ProductCreate(**data))

    return _make_product


@pytest.fixture
def make_donation_post(session):
    """Create a donation post owned by `user_id`; keyword arguments override the defaults."""

    def _make_donation_post(user_id, **overrides):
        data = {
            "title": "Friendly cat needs a home",
            "description": "Moving abroad and cannot take her along",
            "country": "Bangladesh",
            "city": "Dhaka",
            "area": "Mirpur",
            "species": "cat",
            "breed": "Persian",
            "gender": "female",
            "age": 2,
            "vaccinated": True,
        }
        data.update(overrides)
        return DonationPostService(session).create_post(user_id, DonationPostCreate(**data))

    return _make_donation_post


@pytest.fixture
def make_missing_post(session):
    """Create a missing-pet post owned by `user_id`; keyword arguments override the defaults."""

    def _make_missing_post(user_id, **overrides):
        data = {
            "title": "Lost beagle",
            "description": "Ran off near the park on Sunday evening",
            "country": "Bangladesh",
            "city": "Dhaka",
            "area": "Mirpur",
            "species": "dog",
            "breed": "Beagle",
            "age": 4,
        }
        data.update(overrides)
        return MissingPostService(session).create_post(user_id, MissingPostCreate(**data))

    return _make_missing_post


@pytest.fixture
def client(session_factory):
    """API client whose requests use the test database."""
    app = create_app()

    def _get_test_session():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_session] = _get_test_session
    return TestClient(app)
