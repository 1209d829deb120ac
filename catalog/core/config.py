from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Catalog API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # Database (SQLite via aiosqlite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./catalog_dev.db",
        alias="DATABASE_URL",
    )

    # Cache
    cache_ttl_seconds: int | None = Field(
        default=None, alias="CACHE_TTL_SECONDS",
    )  # None = entries live until a write invalidates them

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
