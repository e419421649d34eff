from typing import Optional
from pydantic import validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

from app.core.exceptions import ConfigurationError

# Explicitly load .env file and override existing environment variables
# This ensures that values from .env take precedence over system-wide environment variables.
load_dotenv(override=True)

class Settings(BaseSettings):
    """Base settings for the car rental data service."""

    # API settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Car Rental Platform Data Service"

    # MongoDB settings
    # No defaults: both must come from the environment or the .env file
    MONGODB_URI: Optional[str] = None
    MONGODB_DB_NAME: Optional[str] = None

    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    MONGODB_CONNECT_TIMEOUT_MS: int = 10000

    # Seed data settings
    SEED_ADMIN_EMAIL: str = "admin@carrentalplatform.com"
    SEED_ADMIN_PASSWORD: str = "ChangeMe123!"  # Change this in production

    @validator("MONGODB_URI", "MONGODB_DB_NAME", pre=True)
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def require_mongodb(self) -> None:
        """Raise ConfigurationError unless both MongoDB settings are present."""
        if not self.MONGODB_URI:
            raise ConfigurationError("MONGODB_URI environment variable is not set")
        if not self.MONGODB_DB_NAME:
            raise ConfigurationError("MONGODB_DB_NAME environment variable is not set")

    model_config = {
        "case_sensitive": True,
        "env_file": ".env",
        "extra": "ignore",
    }

# Create settings instance
settings = Settings()
