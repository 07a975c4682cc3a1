"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: str = "json"
    storage_namespace: str = "nutrition-storage"
    data_dir: str = ".nutrition_ledger"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    fdc_api_key: str = "DEMO_KEY"
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    timezone: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_timezone(raw: str | None) -> str | None:
    """Return an IANA zone name, or None to use the device's local zone."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned.lower() in {"", "local"}:
        return None
    return cleaned
