"""Application configuration via pydantic-settings.

Reads KASIR_* environment variables and an optional .env file in the working
directory. Every field has a default, so the cashier runs with no configuration.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    model_config = SettingsConfigDict(
        env_prefix="KASIR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Logging ---
    log_level: str = "WARNING"
    log_to_file: bool = True
    log_dir: str = "logs"

    # --- Menu ---
    # None means the built-in house menu
    menu_json_path: str | None = None

    # --- Session ---
    sentinel: str = "selesai"
    currency_prefix: str = "Rp"
    processing_delay_seconds: float = 2.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance (created once)."""
    return Settings()
