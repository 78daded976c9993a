#!/usr/bin/env python3
"""
label_manager.py
--------------------
Manages Label rows: creation, lookup and prefix search.

Labels are unique per ``(name, scope)``; a label without scope is global.
Names are stored exactly as given (no stripping or case folding).

Usage:
    label_mgr = LabelManager(session, logger)

    focus = await label_mgr.create("focus", scope="work")
    same = await label_mgr.get("focus", scope="work")
    hits = await label_mgr.search("fo")
"""
from typing import List, Optional
from uuid import UUID

from sqlalchemy import insert, or_, select, text
from sqlalchemy.exc import IntegrityError

from timelog.core.codecs import encode_id, new_id
from timelog.core.exceptions import DatabaseError
from timelog.core.validators import DataValidator
from timelog.database.decorators import handle_db_errors, log_database_operation
from timelog.database.mappers import label_from_row, labels_from_rows
from timelog.database.models import LabelRecord
from timelog.dataclasses import Label
from .base_manager import BaseManager

# Search results follow insertion order
_STORAGE_ORDER = text("labels.rowid")


class LabelManager(BaseManager):
    """
    Manages ``labels`` table operations.
    """

    @handle_db_errors
    @log_database_operation("create_label")
    async def create(self, name: str, scope: Optional[str] = None) -> Label:
        """
        Create a new label.

        The scope column is only written when a scope is given, leaving the
        column default (NULL) for global labels.

        Args:
            name: Label name (non-empty)
            scope: Optional scope

        Returns:
            The stored Label

        Raises:
            ValidationError: If name is empty
            DatabaseError: If ``(name, scope)`` already exists or the insert
                did not affect exactly one row
            SqlError: On other backing-store failures
        """
        DataValidator.require_text(name, "Label name")
        DataValidator.optional_text(scope, "Label scope")

        label_id = new_id()
        values = {"id": encode_id(label_id), "name": name}
        if scope is not None:
            values["scope"] = scope

        try:
            await self._insert_one(insert(LabelRecord.__table__).values(**values), "label")
        except IntegrityError as e:
            display = f"{scope}::{name}" if scope is not None else name
            raise DatabaseError(f"Cannot insert new label {display!r}: {e.orig}") from e

        if self.logger:
            self.logger.log_debug(
                f"Created label: {name}", {"label_id": str(label_id), "scope": scope}
            )

        return Label(id=label_id, name=name, scope=scope)

    @handle_db_errors
    @log_database_operation("get_label_by_id")
    async def get_by_id(self, label_id: UUID) -> Optional[Label]:
        """
        Retrieve a label by ID.

        Returns:
            Label if found, None otherwise
        """
        row = await self._get_by_id(LabelRecord, label_id)
        return label_from_row(row) if row is not None else None

    @handle_db_errors
    @log_database_operation("get_label")
    async def get(self, name: str, scope: Optional[str] = None) -> Optional[Label]:
        """
        Retrieve a label by exact name and scope.

        Without a scope only global labels match; a scoped label is never
        returned for an unscoped lookup.

        Returns:
            Label if found, None otherwise
        """
        statement = select(LabelRecord).where(LabelRecord.name == name)
        if scope is not None:
            statement = statement.where(LabelRecord.scope == scope)
        else:
            statement = statement.where(LabelRecord.scope.is_(None))

        row = await self._first(statement)
        return label_from_row(row) if row is not None else None

    @handle_db_errors
    @log_database_operation("search_labels")
    async def search(self, query: str, scope: Optional[str] = None) -> List[Label]:
        """
        Prefix search over labels.

        - With a scope: name starts with ``query`` and scope equals ``scope``
        - Without: name or scope starts with ``query``

        Matching uses SQLite ``LIKE``, anchored at the start of the field.

        Returns:
            Matching labels in insertion order (possibly empty)
        """
        pattern = f"{query}%"
        if scope is not None:
            condition = (LabelRecord.name.like(pattern)) & (LabelRecord.scope == scope)
        else:
            condition = or_(LabelRecord.name.like(pattern), LabelRecord.scope.like(pattern))

        rows = await self._all(select(LabelRecord).where(condition).order_by(_STORAGE_ORDER))
        return labels_from_rows(rows)
