"""Configuration module using pydantic-settings for type-safe env variable loading."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Uses pydantic-settings for type-safe configuration with validation.
    Automatically loads from .env file if present.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Google Knowledge Graph Search API Configuration
    google_api_key: str = Field(
        default="",
        description="Google API key with the Knowledge Graph Search API enabled",
    )
    kg_search_url: str = Field(
        default="https://kgsearch.googleapis.com/v1/entities:search",
        description="Knowledge Graph Search API endpoint",
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Search Configuration
    search_timeout: float = Field(
        default=5.0,
        gt=0,
        le=120,
        description="Timeout in seconds for Knowledge Graph API requests (httpx default: 5s)",
    )
    default_language: str = Field(
        default="",
        description="Default ISO 639 language code for results. Empty lets the API decide",
    )


# Global settings instance
settings = Settings()
