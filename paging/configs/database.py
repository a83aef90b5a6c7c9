"""
Relational database configuration settings.

Manages the SQLAlchemy connection parameters used by the relational
store's connection helpers.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from paging.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """SQLAlchemy database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PAGING_DB_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(
        default="sqlite:///./paging.db",
        description="SQLAlchemy database URL",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")
    pool_pre_ping: bool = Field(
        default=True,
        description="Verify pooled connections before use",
    )

    @property
    def is_sqlite(self) -> bool:
        """
        Whether the configured URL targets SQLite.

        Returns:
            bool: True for sqlite URLs (any driver)
        """
        return self.url.startswith("sqlite")
