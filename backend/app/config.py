"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden from the environment or a .env file
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults run out-of-the-box against a local SQLite file on port 3000
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./contacts.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    # Create missing tables on startup; turn off when Alembic owns the schema
    database_create_tables: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # API
    cors_origins: list[str] = ["http://localhost:3000"]
    static_dir: str = "static"

    # API documentation (OpenAPI schema + interactive UI)
    docs_enabled: bool = True
    api_title: str = "Contacts API"
    api_description: str = "Customer API Information"
    api_contact_name: str = "Contacts API maintainers"
    api_servers: list[dict[str, str]] = [
        {"url": "http://localhost:3000", "description": "Development server"},
        {"url": "http://127.0.0.1:3000", "description": "Staging server"},
        {"url": "http://localhost:3000", "description": "Production server"},
    ]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
