"""
Core domain: Store interface, page helpers and exceptions.
"""

from paging.core.exceptions import (
    InvalidPageRequestError,
    PagingException,
    StoreConfigurationError,
)
from paging.core.paginator import (
    CursorPage,
    Page,
    PageRequest,
    default_page_request,
    paginate_after,
    paginate_page,
)
from paging.core.store import Store

__all__ = [
    "Store",
    "Page",
    "PageRequest",
    "CursorPage",
    "default_page_request",
    "paginate_page",
    "paginate_after",
    "PagingException",
    "InvalidPageRequestError",
    "StoreConfigurationError",
]
