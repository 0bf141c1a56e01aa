"""Application configuration."""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite+aiosqlite:///./storefront.db"

    # Admin access (unset or empty disables the check)
    admin_password: Optional[str] = None

    # Menu
    menu_page_size: int = 6
    menu_max_page_size: int = 50
    menu_seed_file: Optional[str] = None

    # Restaurant
    restaurant_name: str = "Restaurant"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
