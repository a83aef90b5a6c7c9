"""
MongoDB configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Document store connection configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from paging.configs.base import BaseSettings


class MongoSettings(BaseSettings):
    """MongoDB client configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PAGING_MONGO_",
        case_sensitive=False,
        extra="ignore",
    )

    uri: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URI",
    )
    database: str = Field(default="paging", description="MongoDB database name")
    server_selection_timeout_ms: int = Field(
        default=5000,
        description="Server selection timeout in milliseconds",
    )
