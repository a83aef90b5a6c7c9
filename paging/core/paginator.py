"""
Page helpers built on the Store interface.

Turns page numbers into limit/offset calls and derives page metadata, and
wraps cursor pagination with the next cursor taken from the last row.

Dependencies: paging.core.store, paging.configs
System role: Caller-facing convenience over any Store
"""

import math
from dataclasses import dataclass
from typing import Any, Mapping

from paging.configs import get_settings
from paging.core.exceptions import InvalidPageRequestError
from paging.core.store import Store


@dataclass(frozen=True)
class PageRequest:
    """1-based page request."""

    page: int
    per_page: int

    def __post_init__(self) -> None:
        if self.page < 1:
            raise InvalidPageRequestError("page must be >= 1", field="page", value=self.page)
        if self.per_page < 1:
            raise InvalidPageRequestError(
                "per_page must be >= 1", field="per_page", value=self.per_page
            )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


@dataclass
class Page:
    """Offset pagination result with page metadata."""

    items: list[Any]
    total: int
    page: int
    per_page: int
    total_pages: int

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


@dataclass
class CursorPage:
    """Cursor pagination result."""

    items: list[Any]
    limit: int
    next_cursor: Any
    has_more: bool


def default_page_request(page: int = 1) -> PageRequest:
    """Build a page request using the configured default page size."""
    return PageRequest(page=page, per_page=get_settings().pagination.default_per_page)


def paginate_page(store: Store, request: PageRequest) -> Page:
    """
    Fetch one numbered page from a store.

    Args:
        store: Store to paginate
        request: Page number and size

    Returns:
        Page: Rows of the page (the store's destination list) and metadata
    """
    total = store.paginate_offset(request.per_page, request.offset)
    return Page(
        items=store.get_items(),
        total=total,
        page=request.page,
        per_page=request.per_page,
        total_pages=math.ceil(total / request.per_page),
    )


def paginate_after(
    store: Store,
    limit: int,
    cursor: Any,
    field_name: str,
    reverse: bool = False,
) -> CursorPage:
    """
    Fetch rows past a cursor and compute the cursor of the following page.

    ``has_more`` is a guess: a full page means there may be more rows.

    Args:
        store: Store to paginate
        limit: Maximum number of rows
        cursor: Marker value
        field_name: Field the cursor applies to
        reverse: Walk downwards instead of upwards

    Returns:
        CursorPage: Rows, next cursor (None when the page is empty), has_more

    Raises:
        InvalidPageRequestError: If limit is below 1
    """
    if limit < 1:
        raise InvalidPageRequestError("limit must be >= 1", field="limit", value=limit)

    store.paginate_cursor(limit, cursor, field_name, reverse)
    items = store.get_items()

    next_cursor = field_value(items[-1], field_name) if items else None
    return CursorPage(
        items=items,
        limit=limit,
        next_cursor=next_cursor,
        has_more=len(items) == limit,
    )


def field_value(item: Any, field_name: str) -> Any:
    """Read a field from a document (mapping) or an ORM row (attribute)."""
    if isinstance(item, Mapping):
        return item[field_name]
    return getattr(item, field_name)
