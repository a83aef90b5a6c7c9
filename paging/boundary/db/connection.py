"""
Database connection helpers.

Provides SQLAlchemy engine, session factory, and a generator dependency
yielding sessions for relational stores.

Dependencies: sqlalchemy, paging.configs
System role: Convenience construction of the sessions stores operate on
"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from paging.configs import get_settings
from paging.configs.database import DatabaseSettings


def get_engine(db_config: DatabaseSettings | None = None) -> Engine:
    """
    Create SQLAlchemy engine from database settings.

    In-memory SQLite URLs get a StaticPool so every session sees the same
    database.

    Args:
        db_config: Database settings (defaults to global settings)

    Returns:
        Engine: Configured SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid

    Usage:
        engine = get_engine()
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    """
    db_config = db_config or get_settings().database

    kwargs = {}
    if db_config.is_sqlite and ":memory:" in db_config.url:
        kwargs["connect_args"] = {"check_same_thread": False}
        kwargs["poolclass"] = StaticPool

    return create_engine(
        db_config.url,
        echo=db_config.echo_sql,
        pool_pre_ping=db_config.pool_pre_ping,
        **kwargs,
    )


def get_session_factory(engine: Engine | None = None) -> sessionmaker:
    """
    Create session factory for database operations.

    autoflush=False for explicit transaction control and predictable
    behavior.

    Args:
        engine: Engine to bind (defaults to get_engine())

    Returns:
        sessionmaker: Session factory

    Usage:
        SessionFactory = get_session_factory()
        with SessionFactory() as session:
            store = SQLAlchemyStore(session, select(User))
    """
    engine = engine or get_engine()
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db() -> Generator[Session, None, None]:
    """
    Yield a database session and close it afterwards.

    Suitable as a FastAPI-style dependency.

    Yields:
        Session: SQLAlchemy database session

    Raises:
        SQLAlchemyError: Propagated from database operations
    """
    SessionFactory = get_session_factory()
    db = SessionFactory()
    try:
        yield db
    finally:
        db.close()
