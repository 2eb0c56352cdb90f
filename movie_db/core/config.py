"""
Configuration Settings.

This module defines the library configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.

Environment variables use double underscore (__) as delimiters for nested properties.
For example: DATABASE__URL maps to settings.database.url
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Database Configuration Models
# =====================================================================


class DatabaseConfig(BaseModel):
    """Named database unit configuration.

    The unit name identifies a set of connection parameters. When no explicit
    URL is given, the unit resolves to a SQLite file named after it.
    """

    unit_name: str = Field(default="movie_db", description="Name of the database configuration unit")
    url: Optional[str] = Field(default=None, description="Explicit SQLAlchemy URL overriding the unit default")
    echo: bool = Field(default=False, description="Echo emitted SQL through the sqlalchemy.engine logger")

    model_config = {"populate_by_name": True}

    def resolved_url(self) -> str:
        """Return the effective SQLAlchemy URL for this unit."""
        if self.url:
            return self.url
        return f"sqlite:///{self.unit_name}.sqlite3"


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Library settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
        populate_by_name=True,
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="MOVIE_DB_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="MOVIE_DB_LOG_FORMAT",
    )
    log_file_enabled: bool = Field(
        default=False,
        description="Also write logs to a file under log_file_dir",
        alias="MOVIE_DB_LOG_FILE_ENABLED",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file",
        alias="MOVIE_DB_LOG_FILE_DIR",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig,
        description="Named database unit used by the store",
    )


settings = Settings()
