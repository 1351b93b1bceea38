"""
Recipe Feed Configuration
=========================

Centralized scraper settings, overridable through `RECIPE_FEED_*`
environment variables or a local `.env` file.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scraper settings loaded from environment."""

    # Site
    site_name: str = "Marley Spoon"
    base_url: str = "https://marleyspoon.de"
    menu_path: str = "/menu"

    # Storage
    output_path: Path = Path("data/recipes.json")
    log_dir: Path = Path("data/logs")

    # Browser
    headless: bool = True
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
    locale: str = "de-DE"
    navigation_timeout_ms: int = Field(default=45000, gt=0)
    listing_settle_ms: int = Field(default=2500, ge=0)
    recipe_settle_ms: int = Field(default=800, ge=0)

    # Run policy
    incremental: bool = True  # skip recipe ids already in the store
    max_recipes: Optional[int] = Field(default=None, gt=0)
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="RECIPE_FEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def menu_url(self) -> str:
        return self.base_url.rstrip("/") + self.menu_path


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
