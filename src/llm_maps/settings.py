"""Central application settings using Pydantic."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Core application
    log_level: str = Field("INFO")
    port: int = Field(5002)

    # Google Maps
    google_maps_api_key: str = Field(...)
    maps_request_timeout: float = Field(10.0, gt=0)

    # Tool defaults
    default_location: str = Field("Batam, Riau Islands, Indonesia")
    timezone: str = Field("Asia/Jakarta")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return str(v).upper()


def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    return Settings()
