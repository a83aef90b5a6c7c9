"""
Shared test fixtures.

Provides: In-memory SQLite session with a test model, mongomock collections,
settings cache reset
Dependencies: pytest, sqlalchemy, mongomock
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timedelta

import mongomock
import pytest
from sqlalchemy import DateTime, ForeignKey, Integer, String, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, relationship
from sqlalchemy.pool import StaticPool

from paging.configs import get_settings

BASE_TIME = datetime(2024, 1, 1)


class WidgetBase(DeclarativeBase):
    """Declarative base for test-only models."""

    pass


class Widget(WidgetBase):
    """Test model with an integer key, a name and a timestamp."""

    __tablename__ = "widgets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    color: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    parts: Mapped[list["Part"]] = relationship(back_populates="widget")


class Part(WidgetBase):
    """Child of a widget, used for eager-loading tests."""

    __tablename__ = "parts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    widget_id: Mapped[int] = mapped_column(ForeignKey("widgets.id"), nullable=False)
    label: Mapped[str] = mapped_column(String(20), nullable=False)

    widget: Mapped[Widget] = relationship(back_populates="parts")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Ensure each test reads settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def db_session():
    """
    Create in-memory SQLite database for testing.

    Yields:
        Session: Session on a fresh database with the widgets table
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    WidgetBase.metadata.create_all(engine)

    with Session(engine) as session:
        yield session
        session.rollback()

    WidgetBase.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def seeded_session(db_session: Session) -> Session:
    """
    Session with 25 widgets: ids 1..25, alternating red/blue, one minute apart.
    Widgets 1 and 2 own three parts each.
    """
    db_session.add_all(
        Widget(
            id=i,
            name=f"widget-{i}",
            color="red" if i % 2 else "blue",
            created_at=BASE_TIME + timedelta(minutes=i),
        )
        for i in range(1, 26)
    )
    db_session.add_all(
        Part(widget_id=w, label=f"part-{w}-{n}") for w in (1, 2) for n in range(3)
    )
    db_session.commit()
    return db_session


@pytest.fixture
def mongo_collection():
    """
    Provide a mongomock collection holding documents {id: 1..5}.

    Returns:
        mongomock.Collection: Collection with five documents
    """
    client = mongomock.MongoClient()
    collection = client["paging_test"]["items"]
    collection.insert_many(
        [{"id": i, "kind": "even" if i % 2 == 0 else "odd"} for i in range(1, 6)]
    )
    return collection


@pytest.fixture
def widget_model() -> type[Widget]:
    """Provide the Widget model class."""
    return Widget


@pytest.fixture
def base_time() -> datetime:
    """Provide the timestamp widget creation times are offset from."""
    return BASE_TIME
