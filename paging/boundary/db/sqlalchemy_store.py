"""
SQLAlchemy pagination store.

Translates offset and cursor pagination requests into ``Select`` clauses
executed through a caller-supplied ORM session.

Dependencies: sqlalchemy
System role: Relational adapter of the Store interface
"""

import logging
from typing import Any

from sqlalchemy import ColumnElement, Select, func, literal_column, select
from sqlalchemy.orm import Session

from paging.core.exceptions import StoreConfigurationError
from paging.core.store import Store
from paging.observability.log_utils import log_with_context
from paging.observability.logger import get_logger

logger = get_logger(__name__)


class SQLAlchemyStore(Store):
    """
    Store backed by a SQLAlchemy session and a base select statement.

    The base statement may carry caller filters, joins and ordering; the
    store adds limit/offset or a cursor bound on top of it. ``Select``
    objects are immutable, so constraints added for one call never leak
    into the next one or into the count query.

    Attributes:
        session: ORM session the statements are executed with
        statement: Base select statement
        items: Destination list receiving the fetched rows
    """

    def __init__(
        self,
        session: Session,
        statement: Select,
        items: list[Any] | None = None,
    ) -> None:
        """
        Initialize store.

        Args:
            session: SQLAlchemy session
            statement: Base ``select(...)`` statement
            items: Destination list (a new one is created when omitted)

        Raises:
            StoreConfigurationError: If statement is not a Select
        """
        if not isinstance(statement, Select):
            raise StoreConfigurationError(
                "SQLAlchemyStore requires a Select statement",
                store="sqlalchemy",
                details={"statement_type": type(statement).__name__},
            )
        self.session = session
        self.statement = statement
        self.items = items if items is not None else []

    def get_items(self) -> list[Any]:
        return self.items

    def paginate_offset(self, limit: int, offset: int) -> int:
        """
        Fetch one page by limit/offset, then count all matching rows.

        Two round trips: one for the page, one for the count.

        Args:
            limit: Maximum number of rows to fetch
            offset: Number of leading rows to skip

        Returns:
            int: Total number of rows matched by the base statement
        """
        stmt = self.statement.limit(limit).offset(offset)
        rows = self._fetch(stmt)

        count_stmt = select(func.count()).select_from(
            self.statement.order_by(None).subquery()
        )
        total = self.session.scalar(count_stmt)
        self.items[:] = rows

        log_with_context(
            logger,
            logging.DEBUG,
            "Offset page fetched",
            store="sqlalchemy",
            limit=limit,
            offset=offset,
            rows=len(rows),
            total=total,
        )
        return total

    def paginate_cursor(
        self,
        limit: int,
        cursor: Any,
        field_name: Any,
        reverse: bool = False,
    ) -> None:
        """
        Fetch rows strictly above (or below, when reversed) the cursor.

        No count is computed.

        Args:
            limit: Maximum number of rows to fetch
            cursor: Marker value compared against the field
            field_name: Attribute name, column name or column expression.
                A string matching no selected column is rendered into the
                SQL verbatim, so it must come from trusted code, never from
                request input.
            reverse: Compare with ``<`` instead of ``>``
        """
        column = self._resolve_field(field_name)
        bound = column < cursor if reverse else column > cursor

        stmt = self.statement.where(bound).limit(limit)
        rows = self._fetch(stmt)
        self.items[:] = rows

        log_with_context(
            logger,
            logging.DEBUG,
            "Cursor page fetched",
            store="sqlalchemy",
            limit=limit,
            cursor=cursor,
            field=field_name,
            reverse=reverse,
            rows=len(rows),
        )

    def _fetch(self, stmt: Select) -> list[Any]:
        """
        Execute a select and return its rows in the statement's shape.

        A single entity comes back as ORM instances, de-duplicated so that
        joined eager loads of collections work. A single column comes back
        as bare values. Several columns or entities come back as ``Row``
        tuples.

        Args:
            stmt: Statement to execute

        Returns:
            list: Fetched rows
        """
        descriptions = stmt.column_descriptions
        if len(descriptions) != 1:
            return list(self.session.execute(stmt).all())

        result = self.session.scalars(stmt)
        entity = descriptions[0].get("entity")
        if entity is not None and descriptions[0]["expr"] is entity:
            result = result.unique()
        return list(result.all())

    def _resolve_field(self, field_name: Any) -> ColumnElement:
        """
        Turn a field reference into a column expression.

        Column expressions pass through. Strings naming a column of the
        statement's selected entity resolve to that column; any other string
        becomes a literal column, and the database reports it if invalid.

        Args:
            field_name: Field reference

        Returns:
            ColumnElement: Expression usable in a WHERE clause
        """
        if not isinstance(field_name, str):
            return field_name

        columns = self.statement.selected_columns
        if field_name in columns:
            return columns[field_name]

        for description in self.statement.column_descriptions:
            entity = description.get("entity")
            if entity is not None and hasattr(entity, "__mapper__"):
                attrs = entity.__mapper__.column_attrs
                if field_name in attrs:
                    return getattr(entity, field_name)
        return literal_column(field_name)


def new_sqlalchemy_store(
    session: Session,
    statement: Select,
    items: list[Any] | None = None,
) -> SQLAlchemyStore:
    """
    Build a SQLAlchemy store.

    Args:
        session: SQLAlchemy session
        statement: Base select statement
        items: Destination list

    Returns:
        SQLAlchemyStore: New store instance
    """
    return SQLAlchemyStore(session, statement, items)
