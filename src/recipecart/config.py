"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RECIPECART_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shopping list
    # Used when an ingredient has no aisle
    default_aisle: str = Field(default="Other", min_length=1)
    display_decimals: int = Field(default=2, ge=0, le=6)

    # Application
    log_level: str = "INFO"
    log_format: str = "text"  # "text" or "json"

    @property
    def json_logs(self) -> bool:
        """Check if logs should be emitted as JSON."""
        return self.log_format.lower() == "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
