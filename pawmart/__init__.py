"""
PawMart - Pet Adoption Marketplace

This package contains the compatibility scorer that ranks adoptable pets for
a household, plus the data-access services and HTTP API for adoption
listings, the pet-product store, carts, orders and ratings.
"""

__version__ = "1.0.0"

from .models.compatibility_model import calculate_compatibility_score, score_breakdown

__all__ = ["calculate_compatibility_score", "score_breakdown", "__version__"]
