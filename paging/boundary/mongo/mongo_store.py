"""
MongoDB pagination store.

Translates offset and cursor pagination requests into pymongo
``find``/``limit``/``skip`` calls over a filter document.

Dependencies: pymongo
System role: Document-store adapter of the Store interface
"""

import logging
from typing import Any

from pymongo.collection import Collection

from paging.core.store import Store
from paging.observability.log_utils import log_with_context
from paging.observability.logger import get_logger

logger = get_logger(__name__)


class MongoStore(Store):
    """
    Store backed by a pymongo collection and a filter document.

    Cursor pagination writes its range constraint into ``filter`` in place,
    overwriting any earlier constraint on the same field. Later calls on the
    same instance therefore see that constraint too, including offset
    pagination. Instances must not be shared between concurrent callers.

    Attributes:
        collection: Collection queried
        filter: Filter document (mutated by paginate_cursor)
        items: Destination list receiving the fetched documents
    """

    def __init__(
        self,
        collection: Collection,
        items: list[Any] | None = None,
        filter: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store.

        Args:
            collection: pymongo collection
            items: Destination list (a new one is created when omitted)
            filter: Filter document (a new empty one is created when omitted)
        """
        self.collection = collection
        self.items = items if items is not None else []
        self.filter = filter if filter is not None else {}

    def get_items(self) -> list[Any]:
        return self.items

    def paginate_offset(self, limit: int, offset: int) -> int:
        """
        Count documents matching the filter, then fetch one page.

        Args:
            limit: Maximum number of documents (0 means no limit)
            offset: Number of leading documents to skip

        Returns:
            int: Number of documents matching the filter
        """
        total = self.collection.count_documents(self.filter)

        docs = list(self.collection.find(self.filter).limit(limit).skip(offset))
        self.items[:] = docs

        log_with_context(
            logger,
            logging.DEBUG,
            "Offset page fetched",
            store="mongo",
            limit=limit,
            offset=offset,
            rows=len(docs),
            total=total,
        )
        return total

    def paginate_cursor(
        self,
        limit: int,
        cursor: Any,
        field_name: str,
        reverse: bool = False,
    ) -> None:
        """
        Fetch documents whose field is strictly past the cursor.

        Args:
            limit: Maximum number of documents
            cursor: Marker value (int, datetime, ObjectId, ...)
            field_name: Document field the cursor applies to
            reverse: Use ``$lt`` instead of ``$gt``
        """
        operator = "$lt" if reverse else "$gt"
        self.filter[field_name] = {operator: cursor}

        docs = list(self.collection.find(self.filter).limit(limit))
        self.items[:] = docs

        log_with_context(
            logger,
            logging.DEBUG,
            "Cursor page fetched",
            store="mongo",
            limit=limit,
            cursor=cursor,
            field=field_name,
            reverse=reverse,
            rows=len(docs),
        )


def new_mongo_store(
    collection: Collection,
    items: list[Any] | None = None,
    filter: dict[str, Any] | None = None,
) -> MongoStore:
    """
    Build a MongoDB store.

    Args:
        collection: pymongo collection
        items: Destination list
        filter: Filter document

    Returns:
        MongoStore: New store instance
    """
    return MongoStore(collection, items, filter)
