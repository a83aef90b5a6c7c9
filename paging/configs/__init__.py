"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from paging.configs.database import DatabaseSettings
from paging.configs.mongo import MongoSettings
from paging.configs.pagination import PaginationSettings
from paging.configs.settings import Settings, get_settings

__all__ = [
    "DatabaseSettings",
    "MongoSettings",
    "PaginationSettings",
    "Settings",
    "get_settings",
]
