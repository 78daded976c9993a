#!/usr/bin/env python3
"""
base_manager.py
--------------------
Base manager providing shared query helpers for entity managers.

Managers are bound to one AsyncSession for their lifetime and never
commit; transaction boundaries belong to TimelogDB.session_scope().

Usage:
    Subclass BaseManager for each entity type:

    class LabelManager(BaseManager):
        @handle_db_errors
        @log_database_operation("get_label_by_id")
        async def get_by_id(self, label_id: UUID) -> Optional[Label]:
            row = await self._get_by_id(LabelRecord, label_id)
            ...
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import uuid
from abc import ABC
from typing import Any, List, Optional, Type, TypeVar

# --- Third party imports ---
from sqlalchemy.sql.expression import Executable, Insert
from sqlalchemy.ext.asyncio import AsyncSession

# --- Local imports ---
from timelog.core.codecs import encode_id
from timelog.core.exceptions import DatabaseError
from timelog.core.logging_manager import TimelogLogger, safe_logger

T = TypeVar("T")


class BaseManager(ABC):
    """
    Abstract base manager for session-bound store operations.

    Attributes:
        session: SQLAlchemy AsyncSession for database operations
        logger: Optional logger for operation tracking
    """

    def __init__(self, session: AsyncSession, logger: Optional[TimelogLogger] = None):
        self.session = session
        self.logger = logger

    # -------------------------------------------------------------------------
    # Query Helpers
    # -------------------------------------------------------------------------

    async def _get_by_id(self, model_class: Type[T], entity_id: uuid.UUID) -> Optional[T]:
        """
        Get a row by its UUID primary key.

        Returns:
            The ORM row if found, None otherwise
        """
        return await self.session.get(model_class, encode_id(entity_id))

    async def _first(self, statement: Executable) -> Optional[Any]:
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def _all(self, statement: Executable) -> List[Any]:
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def _insert_one(self, statement: Insert, what: str) -> None:
        """
        Execute an INSERT that must affect exactly one row.

        Args:
            statement: Core insert statement
            what: Entity description for the error message

        Raises:
            DatabaseError: If the affected row count is not 1
        """
        result = await self.session.execute(statement)
        if result.rowcount != 1:
            safe_logger(self.logger).log_warning(
                f"Insert affected unexpected row count for {what}",
                {"rowcount": result.rowcount},
            )
            raise DatabaseError(f"Cannot insert new {what}")
