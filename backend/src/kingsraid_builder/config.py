"""Application configuration via pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

# backend/src/kingsraid_builder/config.py -> repo root
REPO_ROOT = Path(__file__).parents[3]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Settings
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3002  # env var: PORT
    log_level: str = "INFO"

    # CORS - comma-separated origins (env var: CORS_ORIGINS)
    cors_origins: str = "http://localhost:3002,http://127.0.0.1:3002"

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Static content
    public_dir: str = "public"
    views_dir: str = "views"

    # Hero data, relative to public_dir
    hero_data_dir: str = "kingsraid-data"
    release_order_file: str = "kingsraid-data/release_order.json"

    # Team store (DuckDB file)
    database_path: str = "data/teams.duckdb"


def resolve_path(value: str, base: Path = REPO_ROOT) -> Path:
    """Resolve a configured path; relative paths are taken from ``base``."""
    path = Path(value)
    if path.is_absolute():
        return path
    return base / path


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
