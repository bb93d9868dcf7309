"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here. No scattered magic strings.
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (serves /docs and /openapi.json).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the HTTP listener binds to.
        port: Port the HTTP listener binds to.
        storage_backend: "postgres" for the SQL adapter, "memory" for
            process-local storage.
        create_schema: Create the users table on startup if missing.
        rate_limit_enabled: Enforce rate_limit_default on every route.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "UserService"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080
    storage_backend: Literal["postgres", "memory"] = "postgres"
    create_schema: bool = False
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    # Postgres settings
    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "users"
    db_pool_size: int = 5
    db_max_overflow: int = 10

    def get_database_url(self) -> str:
        """Return the effective async DSN for the user store.

        Priority:
        1. Explicit `DATABASE_URL`. A plain ``postgresql://`` scheme is
           rewritten to use the asyncpg driver.
        2. Build DSN from postgres_* values (useful for Docker Compose or local setups)
        """
        if self.database_url:
            if self.database_url.startswith("postgresql://"):
                return self.database_url.replace(
                    "postgresql://", "postgresql+asyncpg://", 1
                )
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
