from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from a .env file if present (local dev only)
load_dotenv()


class Settings(BaseSettings):
    """Application configuration loaded from IMAGEN_* environment variables or .env file."""

    # Server
    listen: str = Field(":3000", description="Comma-separated listen addresses, e.g. ':3000,[::1]:4567'.")

    # Logging
    log_level: str = Field("INFO", description="Root log level for the CLI and server.")

    # Rendering
    font_path: Optional[str] = Field(
        default=None,
        description="TrueType/TTC font tried before the platform defaults.",
    )
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for batch-mode randomness (noise tiles, 'random' colours).",
    )

    model_config = SettingsConfigDict(env_prefix="IMAGEN_", env_file=".env", case_sensitive=False)


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
