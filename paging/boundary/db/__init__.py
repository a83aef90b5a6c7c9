"""
Relational boundary: SQLAlchemy store and connection helpers.

Exports:
  - SQLAlchemyStore, new_sqlalchemy_store: Relational pagination store
  - get_engine(), get_session_factory(), get_db(): Connection helpers

Dependencies: sqlalchemy, paging.configs
"""

from paging.boundary.db.connection import get_db, get_engine, get_session_factory
from paging.boundary.db.sqlalchemy_store import SQLAlchemyStore, new_sqlalchemy_store

__all__ = [
    "SQLAlchemyStore",
    "new_sqlalchemy_store",
    "get_db",
    "get_engine",
    "get_session_factory",
]
