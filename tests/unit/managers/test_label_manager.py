"""
test_label_manager.py
---------------------
Unit tests for LabelManager operations inside a single session.
"""
import uuid

import pytest
from sqlalchemy import insert

from timelog.core.exceptions import DatabaseError, ParseError, ValidationError
from timelog.database.models import LabelRecord
from timelog.dataclasses import Label


class TestLabelManagerCreate:
    """Test LabelManager.create()."""

    async def test_create_with_name_only(self, label_manager):
        label = await label_manager.create("foo")

        assert label.name == "foo"
        assert label.scope is None
        assert isinstance(label.id, uuid.UUID)

    async def test_create_with_scope(self, label_manager):
        label = await label_manager.create("foo", "bar")
        assert label.scope == "bar"
        assert label.description() == "bar::foo"

    async def test_create_omits_scope_column_for_global_label(self, label_manager, db_session):
        label = await label_manager.create("foo")

        row = await db_session.get(LabelRecord, str(label.id))
        assert row.scope is None

    async def test_create_keeps_name_verbatim(self, label_manager):
        label = await label_manager.create("  Deep Work ")
        assert label.name == "  Deep Work "

    async def test_create_empty_name_rejected(self, label_manager):
        with pytest.raises(ValidationError):
            await label_manager.create("")

    async def test_duplicate_scoped_label_rejected(self, label_manager):
        await label_manager.create("foo", "bar")
        with pytest.raises(DatabaseError, match="Cannot insert new label 'bar::foo'"):
            await label_manager.create("foo", "bar")

    async def test_duplicate_global_label_rejected(self, label_manager):
        await label_manager.create("foo")
        with pytest.raises(DatabaseError, match="Cannot insert new label 'foo'"):
            await label_manager.create("foo")

    async def test_same_name_in_different_scopes(self, label_manager):
        first = await label_manager.create("foo", "bar")
        second = await label_manager.create("foo", "baz")
        global_label = await label_manager.create("foo")

        assert len({first.id, second.id, global_label.id}) == 3


class TestLabelManagerGet:
    """Test LabelManager.get() and get_by_id()."""

    async def test_get_by_id(self, label_manager):
        created = await label_manager.create("foo", "bar")
        assert await label_manager.get_by_id(created.id) == created

    async def test_get_by_id_unknown_returns_none(self, label_manager):
        assert await label_manager.get_by_id(uuid.uuid4()) is None

    async def test_get_global(self, label_manager):
        created = await label_manager.create("foo")
        assert await label_manager.get("foo") == created

    async def test_get_scoped(self, label_manager):
        await label_manager.create("foo", "bar")
        created = await label_manager.create("foo", "baz")
        assert await label_manager.get("foo", "baz") == created

    async def test_unscoped_get_ignores_scoped_labels(self, label_manager):
        await label_manager.create("foo", "bar")
        await label_manager.create("foo", "baz")
        assert await label_manager.get("foo") is None

    async def test_scoped_get_ignores_global_label(self, label_manager):
        await label_manager.create("foo")
        assert await label_manager.get("foo", "bar") is None

    async def test_get_is_exact_match(self, label_manager):
        await label_manager.create("foobar")
        assert await label_manager.get("foo") is None


class TestLabelManagerSearch:
    """Test LabelManager.search()."""

    @pytest.fixture
    async def scoped_pair(self, label_manager):
        first = await label_manager.create("foo", "bar")
        second = await label_manager.create("foo", "baz")
        return first, second

    async def test_search_empty_store(self, label_manager):
        assert await label_manager.search("foo") == []

    async def test_unscoped_name_prefix(self, label_manager):
        created = await label_manager.create("foo")
        assert await label_manager.search("foo") == [created]
        assert await label_manager.search("fo") == [created]
        assert await label_manager.search("bar") == []

    async def test_unscoped_search_on_scope_and_name(self, label_manager, scoped_pair):
        first, second = scoped_pair
        assert await label_manager.search("bar") == [first]
        assert await label_manager.search("ba") == [first, second]
        assert await label_manager.search("foo") == [first, second]
        assert await label_manager.search("fo") == [first, second]

    async def test_scoped_search(self, label_manager, scoped_pair):
        first, _ = scoped_pair
        assert await label_manager.search("foo", "bar") == [first]
        assert await label_manager.search("fo", "bar") == [first]
        assert await label_manager.search("baz", "bar") == []
        assert await label_manager.search("ba", "bar") == []

    async def test_search_is_anchored_at_start(self, label_manager):
        await label_manager.create("xfoo")
        await label_manager.create("name", "xfoo")
        assert await label_manager.search("foo") == []

    async def test_label_matching_name_and_scope_returned_once(self, label_manager):
        created = await label_manager.create("bar", "bar")
        assert await label_manager.search("ba") == [created]

    async def test_search_follows_insertion_order(self, label_manager):
        names = ["fz", "fa", "fm"]
        created = [await label_manager.create(name) for name in names]
        assert await label_manager.search("f") == created


class TestLabelManagerStoredData:
    """Test decoding of stored rows."""

    async def test_malformed_stored_id_raises_parse_error(self, label_manager, db_session):
        await db_session.execute(
            insert(LabelRecord.__table__).values(id="not-a-uuid", name="broken")
        )

        with pytest.raises(ParseError):
            await label_manager.search("broken")

    async def test_returned_labels_are_independent_values(self, label_manager):
        created = await label_manager.create("foo")
        found = await label_manager.get("foo")

        assert found == created
        assert isinstance(found, Label)
        assert found is not created
