"""
Application configuration using pydantic-settings.
"""
from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"
    project_name: str = "Chronoscape"

    # Asset library
    # "http" probes asset_base_url with HEAD requests,
    # "directory" reads the file names under asset_dir once at startup
    asset_source: Literal["http", "directory"] = "http"
    asset_base_url: str = "http://localhost:3000"
    asset_dir: Optional[str] = None
    asset_path_prefix: str = "/locations"
    asset_extension: str = ".jpg"

    # Probing
    probe_timeout: float = 5.0
    probe_cache: bool = True

    # Resolution
    include_parent_regions: bool = False
    alias_table_path: Optional[str] = None  # defaults to the bundled table

    # CORS
    backend_cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    class Config:
        env_file = "../.env"  # Load from project root
        env_prefix = "CHRONOSCAPE_"
        extra = "ignore"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
