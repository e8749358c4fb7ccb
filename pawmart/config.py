"""
Configuration management for PawMart.
Loads settings from environment variables and provides typed configuration access.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, staging, production")
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Enable debug mode (echoes SQL)")

    # Database
    database_url: str = Field(
        default="sqlite:///./pawmart.db",
        description="SQLAlchemy database URL"
    )
    seed_on_startup: bool = Field(
        default=False,
        description="Create tables and load sample catalog data when the API starts"
    )

    # API Settings
    api_host: str = Field(default="0.0.0.0", description="API bind host")
    api_port: int = Field(default=8080, description="API bind port")

    # Recommendation Settings
    recommendation_top_k: int = Field(
        default=3,
        ge=1,
        description="Number of pets returned as recommended"
    )

    # Store Settings
    featured_products_limit: int = Field(
        default=10,
        ge=1,
        description="Default number of featured products"
    )

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = Settings()
    return _settings


# Convenience access
settings = get_settings()
