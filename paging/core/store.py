"""
Pagination store interface.

A store wraps an existing data-access handle together with a caller-owned
destination list. Paginating runs one query against the underlying library
and writes the rows it returned into that list.

Dependencies: None (pure domain layer)
System role: Contract shared by the relational and document-store adapters
"""

from abc import ABC, abstractmethod
from typing import Any


class Store(ABC):
    """
    Abstract pagination store.

    Implementations must:
        - replace the destination list contents in place, so the reference
          returned by ``get_items`` is the one the caller supplied
        - let any failure of the underlying library propagate unchanged
        - never validate ``limit`` / ``offset``; the backend decides what
          zero or negative values mean
    """

    @abstractmethod
    def paginate_offset(self, limit: int, offset: int) -> int:
        """
        Fetch ``limit`` rows starting at ``offset`` into the destination list.

        Args:
            limit: Maximum number of rows to fetch
            offset: Number of leading rows to skip

        Returns:
            int: Total number of matching rows, ignoring limit and offset
        """
        ...

    @abstractmethod
    def paginate_cursor(
        self,
        limit: int,
        cursor: Any,
        field_name: Any,
        reverse: bool = False,
    ) -> None:
        """
        Fetch ``limit`` rows whose ``field_name`` is strictly past ``cursor``.

        Args:
            limit: Maximum number of rows to fetch
            cursor: Comparable marker value (id, datetime, ...)
            field_name: Field the cursor applies to
            reverse: Select rows strictly below the cursor instead of above
        """
        ...

    @abstractmethod
    def get_items(self) -> list[Any]:
        """Return the destination list supplied by the caller."""
        ...
