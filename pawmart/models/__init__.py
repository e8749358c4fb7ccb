"""Matching models for PawMart."""

from .compatibility_model import (
    CompatibilityModel,
    calculate_compatibility_score,
    score_breakdown,
)

__all__ = ["CompatibilityModel", "calculate_compatibility_score", "score_breakdown"]
