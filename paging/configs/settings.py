"""
Unified library settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator
"""

from functools import lru_cache

from pydantic import Field

from paging.configs.base import BaseSettings
from paging.configs.database import DatabaseSettings
from paging.configs.mongo import MongoSettings
from paging.configs.pagination import PaginationSettings


class Settings(BaseSettings):
    """Unified settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    mongo: MongoSettings = Field(default_factory=MongoSettings)
    pagination: PaginationSettings = Field(default_factory=PaginationSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get settings singleton.

    Environment variables are read once, on first call. Call
    ``get_settings.cache_clear()`` to reload them.

    Returns:
        Settings: Settings instance

    Usage:
        from paging.configs import get_settings
        settings = get_settings()
    """
    return Settings()
