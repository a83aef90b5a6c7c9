"""
Pagination stores over SQLAlchemy and MongoDB.

Usage:
    from sqlalchemy import select
    from paging import SQLAlchemyStore

    users = []
    store = SQLAlchemyStore(session, select(User).order_by(User.id), users)
    total = store.paginate_offset(10, 0)

    docs = []
    store = MongoStore(db.events, docs, {"kind": "login"})
    store.paginate_cursor(50, last_seen_id, "_id")
"""

from paging.boundary.db.sqlalchemy_store import SQLAlchemyStore, new_sqlalchemy_store
from paging.boundary.mongo.mongo_store import MongoStore, new_mongo_store
from paging.core import (
    CursorPage,
    InvalidPageRequestError,
    Page,
    PageRequest,
    PagingException,
    Store,
    StoreConfigurationError,
    default_page_request,
    paginate_after,
    paginate_page,
)

__all__ = [
    # Interface
    "Store",
    # Adapters
    "SQLAlchemyStore",
    "new_sqlalchemy_store",
    "MongoStore",
    "new_mongo_store",
    # Page helpers
    "Page",
    "PageRequest",
    "CursorPage",
    "default_page_request",
    "paginate_page",
    "paginate_after",
    # Exceptions
    "PagingException",
    "InvalidPageRequestError",
    "StoreConfigurationError",
]
