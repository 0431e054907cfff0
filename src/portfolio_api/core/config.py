"""
Application configuration management using Pydantic Settings.

This module centralizes all environment-based configuration for the application,
providing type-safe access to configuration values with validation.
"""

from typing import List, Optional
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
import logging

logger = logging.getLogger('CORE_CONFIG')


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Name of the application
        environment: "development" or "production"

        # Database Configuration
        database_url: Client-server database URL (used in production)
        sqlite_path: File used by the development SQLite engine

        # Connection Pool Settings (PostgreSQL only)
        db_pool_size: Database connection pool size
        db_max_overflow: Maximum overflow connections
        db_pool_timeout: Pool checkout timeout in seconds
        db_pool_recycle: Connection recycle time in seconds

        # Server
        host / port: uvicorn bind address
        cors_origins: Allowed CORS origins

        # Identity
        min_password_length: Shortest password accepted at registration
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="allow",
    )

    # Application Settings
    app_name: str = "Research Portfolio API"
    environment: str = Field(
        "development",
        validation_alias=AliasChoices("environment", "node_env"),
    )
    log_level: str = "INFO"

    # Database Configuration
    database_url: Optional[str] = None
    sqlite_path: str = "app.db"

    # Connection Pool Settings
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 10
    db_pool_recycle: int = 3600
    db_pool_pre_ping: bool = True
    db_echo: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 10000
    cors_origins: str = "*"

    # Identity
    min_password_length: int = 6

    @property
    def cors_origin_list(self) -> List[str]:
        """CORS_ORIGINS is a comma separated list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def is_postgres(self) -> bool:
        """True when the client-server engine is the active backend."""
        return self.get_database_url().startswith("postgresql")

    def get_database_url(self) -> str:
        """
        Select the database URL for the active environment.

        Production with DATABASE_URL set uses that server; everything else
        falls back to the SQLite file at ``sqlite_path``.

        Returns:
            str: SQLAlchemy database URL
        """
        if self.is_production and self.database_url:
            url = self.database_url
            # Hosted providers still hand out the legacy scheme
            if url.startswith("postgres://"):
                url = "postgresql://" + url[len("postgres://"):]
            return url

        return f"sqlite:///{self.sqlite_path}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings object
    """
    return Settings()
