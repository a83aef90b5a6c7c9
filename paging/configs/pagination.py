"""
Pagination defaults.

Dependencies: pydantic, pydantic_settings
System role: Defaults for the page helpers
"""

from pydantic import Field

from paging.configs.base import BaseSettings


class PaginationSettings(BaseSettings):
    """Defaults applied by the page helpers when the caller omits them."""

    default_per_page: int = Field(
        default=20,
        ge=1,
        description="Page size used when a request does not specify one",
    )
