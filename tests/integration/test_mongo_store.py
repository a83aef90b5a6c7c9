"""
Test suite for MongoStore.

Uses mongomock collections for query behavior and a mocked collection for
error propagation.

System role: Verification of the document-store adapter
"""

from datetime import datetime, timedelta
from unittest.mock import MagicMock

import mongomock
import pytest
from pymongo.errors import OperationFailure, PyMongoError

from paging.boundary.mongo.mongo_store import MongoStore, new_mongo_store
from paging.core.store import Store


def _ids(items: list) -> list[int]:
    return [doc["id"] for doc in items]


class TestMongoStoreInit:
    """Test suite for store construction."""

    def test_init_should_keep_caller_references(self, mongo_collection) -> None:
        """Test items and filter are held by reference."""
        # Arrange
        items: list = []
        filter_doc = {"kind": "odd"}

        # Act
        store = MongoStore(mongo_collection, items, filter_doc)

        # Assert
        assert isinstance(store, Store)
        assert store.get_items() is items
        assert store.filter is filter_doc

    def test_init_should_default_items_and_filter(self, mongo_collection) -> None:
        """Test missing items and filter become fresh empty containers."""
        store = MongoStore(mongo_collection)

        assert store.get_items() == []
        assert store.filter == {}

    def test_new_mongo_store_should_build_store(self, mongo_collection) -> None:
        """Test factory returns a store holding the given inputs."""
        items: list = []

        store = new_mongo_store(mongo_collection, items, {"kind": "even"})

        assert isinstance(store, MongoStore)
        assert store.collection is mongo_collection
        assert store.get_items() is items
        assert store.filter == {"kind": "even"}


class TestMongoStorePaginateOffset:
    """Test suite for MongoStore.paginate_offset()."""

    def test_paginate_offset_should_return_page_and_total(self, mongo_collection) -> None:
        """Test a page of 2 from 5 documents."""
        # Arrange
        items: list = []
        store = MongoStore(mongo_collection, items)

        # Act
        total = store.paginate_offset(2, 0)

        # Assert
        assert total == 5
        assert _ids(items) == [1, 2]

    def test_paginate_offset_should_skip_leading_documents(self, mongo_collection) -> None:
        """Test the offset is applied as a skip."""
        items: list = []
        store = MongoStore(mongo_collection, items)

        total = store.paginate_offset(2, 4)

        assert total == 5
        assert _ids(items) == [5]

    def test_paginate_offset_should_count_against_filter(self, mongo_collection) -> None:
        """Test the total only includes documents matching the filter."""
        # Arrange
        items: list = []
        store = MongoStore(mongo_collection, items, {"kind": "odd"})

        # Act
        total = store.paginate_offset(1, 1)

        # Assert
        assert total == 3
        assert _ids(items) == [3]

    def test_paginate_offset_should_replace_items_in_place(self, mongo_collection) -> None:
        """Test the destination list object is reused and overwritten."""
        items: list = [{"id": 99}]
        store = MongoStore(mongo_collection, items)

        store.paginate_offset(1, 0)

        assert store.get_items() is items
        assert _ids(items) == [1]

    def test_paginate_offset_should_propagate_count_error(self) -> None:
        """Test a failing count is raised unchanged and nothing is fetched."""
        # Arrange
        error = OperationFailure("not authorized")
        collection = MagicMock()
        collection.count_documents.side_effect = error
        items: list = []
        store = MongoStore(collection, items)

        # Act / Assert
        with pytest.raises(OperationFailure) as exc_info:
            store.paginate_offset(10, 0)

        assert exc_info.value is error
        collection.find.assert_not_called()
        assert items == []

    def test_paginate_offset_should_propagate_find_error(self) -> None:
        """Test a failing query is raised unchanged."""
        # Arrange
        error = PyMongoError("network timeout")
        collection = MagicMock()
        collection.count_documents.return_value = 5
        collection.find.side_effect = error
        store = MongoStore(collection)

        # Act / Assert
        with pytest.raises(PyMongoError) as exc_info:
            store.paginate_offset(10, 0)

        assert exc_info.value is error


class TestMongoStorePaginateCursor:
    """Test suite for MongoStore.paginate_cursor()."""

    def test_paginate_cursor_should_return_documents_after_cursor(
        self, mongo_collection
    ) -> None:
        """Test forward cursor: ids greater than 2, limited to 2."""
        # Arrange
        items: list = []
        store = MongoStore(mongo_collection, items)

        # Act
        result = store.paginate_cursor(2, 2, "id", False)

        # Assert
        assert result is None
        assert _ids(items) == [3, 4]

    def test_paginate_cursor_should_return_documents_before_cursor_when_reversed(
        self, mongo_collection
    ) -> None:
        """Test reverse cursor: ids strictly less than the cursor."""
        items: list = []
        store = MongoStore(mongo_collection, items)

        store.paginate_cursor(10, 4, "id", reverse=True)

        assert _ids(items) == [1, 2, 3]

    def test_paginate_cursor_should_write_range_into_filter(
        self, mongo_collection
    ) -> None:
        """Test the caller's filter document is mutated in place."""
        # Arrange
        filter_doc = {"kind": "odd"}
        store = MongoStore(mongo_collection, [], filter_doc)

        # Act
        store.paginate_cursor(10, 1, "id")

        # Assert
        assert filter_doc == {"kind": "odd", "id": {"$gt": 1}}
        assert _ids(store.get_items()) == [3, 5]

    def test_paginate_cursor_should_overwrite_previous_range(
        self, mongo_collection
    ) -> None:
        """Test a second call replaces the constraint on the same field."""
        # Arrange
        store = MongoStore(mongo_collection)

        # Act
        store.paginate_cursor(10, 1, "id")
        store.paginate_cursor(10, 3, "id", reverse=True)

        # Assert
        assert store.filter == {"id": {"$lt": 3}}
        assert _ids(store.get_items()) == [1, 2]

    def test_paginate_cursor_constraint_should_apply_to_later_offset_calls(
        self, mongo_collection
    ) -> None:
        """Test the stored range narrows subsequent offset pagination."""
        store = MongoStore(mongo_collection)

        store.paginate_cursor(1, 3, "id")
        total = store.paginate_offset(10, 0)

        assert total == 2
        assert _ids(store.get_items()) == [4, 5]

    def test_paginate_cursor_should_accept_datetime_cursor(self) -> None:
        """Test timestamps work as cursor values."""
        # Arrange
        base = datetime(2024, 1, 1)
        collection = mongomock.MongoClient()["paging_test"]["events"]
        collection.insert_many(
            [{"id": i, "at": base + timedelta(hours=i)} for i in range(1, 6)]
        )
        items: list = []
        store = MongoStore(collection, items)

        # Act
        store.paginate_cursor(10, base + timedelta(hours=3), "at")

        # Assert
        assert _ids(items) == [4, 5]

    def test_paginate_cursor_should_propagate_store_error_unchanged(self) -> None:
        """Test a failing query is raised as the same object."""
        # Arrange
        error = OperationFailure("unknown operator")
        collection = MagicMock()
        collection.find.side_effect = error
        items: list = ["untouched"]
        store = MongoStore(collection, items)

        # Act / Assert
        with pytest.raises(OperationFailure) as exc_info:
            store.paginate_cursor(10, 1, "id")

        assert exc_info.value is error
        assert items == ["untouched"]
