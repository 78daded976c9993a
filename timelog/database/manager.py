#!/usr/bin/env python3
"""
manager.py
--------------------
Store facade for the Timelog activity tracker.

Provides the TimelogDB class, which owns the async SQLAlchemy engine and
session factory over SQLite (aiosqlite driver) and exposes the store
operations:

    Labels:
        - create_label / create_label_from: Insert a new label
        - label_by_id: Lookup by identifier
        - label_by_name: Exact lookup by name and scope
        - label_search: Scope-aware prefix search

    Activities:
        - activity_start: Insert a new activity and read it back
        - activity_by_id: Lookup with labels resolved

Every operation runs in its own session scope, so a TimelogDB instance can
be shared between concurrent callers. File databases rely on the connection
pool and SQLite's own locking. In-memory databases live on a single shared
connection, so their session scopes take turns on an asyncio.Lock; one
caller's rollback can then never discard another caller's pending writes.

Notes
==============
- Schema is created with Base.metadata.create_all; there are no migrations
- Not-found lookups return None
- SQLAlchemy failures are raised as DatabaseError / SqlError
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import asyncio
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import AsyncIterator, List, Optional, Union
from uuid import UUID

# --- Third party ---
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# --- Local imports ---
from timelog.core.logging_manager import TimelogLogger, safe_logger
from timelog.dataclasses import Activity, ActivityNew, Label, LabelNew
from .decorators import handle_db_errors
from .managers import ActivityManager, LabelManager
from .models import Base

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on FK enforcement (and ON DELETE CASCADE) for each new connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# ----- Main Store -----
class TimelogDB:
    """
    Main store for labels and activities.

    Attributes:
        - db_url (str): SQLAlchemy URL of the backing SQLite database.
        - engine (AsyncEngine): Async engine instance.
        - SessionLocal (async_sessionmaker): Session factory.
        - logger (TimelogLogger | None): Optional operation logger.

    Usage:
        db = await TimelogDB.connect(db_path="~/timelog/timelog.db")
        label = await db.create_label("focus", scope="work")
        hits = await db.label_search("fo")
        await db.dispose()
    """

    # ---- Initialization ----
    def __init__(
        self,
        db_url: Optional[str] = None,
        db_path: Optional[Union[str, Path]] = None,
        log_dir: Optional[Union[str, Path]] = None,
        echo: bool = False,
    ) -> None:
        """
        Initialize the engine and session factory (the schema is not touched).

        Args:
            db_url: Explicit SQLAlchemy URL; takes precedence over db_path
            db_path: Path to a SQLite file; parent directories are created
            log_dir: Directory for log files (optional)
            echo: Echo SQL statements through SQLAlchemy's logger

        With neither db_url nor db_path an in-memory database is used.
        """
        if log_dir:
            self.log_dir: Optional[Path] = Path(log_dir).expanduser().resolve()
            self.logger: Optional[TimelogLogger] = TimelogLogger(
                self.log_dir, component_name="database"
            )
        else:
            self.log_dir = None
            self.logger = None

        if db_url is None and db_path is not None:
            path = Path(db_path).expanduser().resolve()
            path.parent.mkdir(parents=True, exist_ok=True)
            db_url = f"sqlite+aiosqlite:///{path}"
        self.db_url: str = db_url or MEMORY_URL

        self._setup_engine(echo)

    def _setup_engine(self, echo: bool) -> None:
        """Create the async engine and session factory."""
        url = make_url(self.db_url)
        in_memory = url.database in (None, "", ":memory:")

        if in_memory:
            # One shared connection, otherwise every checkout sees an empty database
            self.engine: AsyncEngine = create_async_engine(
                self.db_url, echo=echo, poolclass=StaticPool
            )
            self._connection_lock: Optional[asyncio.Lock] = asyncio.Lock()
        else:
            self.engine = create_async_engine(self.db_url, echo=echo, pool_pre_ping=True)
            self._connection_lock = None

        event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal: async_sessionmaker[AsyncSession] = async_sessionmaker(
            bind=self.engine,
            autoflush=True,
            expire_on_commit=False,
        )

        safe_logger(self.logger).log_operation(
            "database_engine_ready", {"db_url": self.db_url, "in_memory": in_memory}
        )

    @classmethod
    async def connect(
        cls,
        db_url: Optional[str] = None,
        db_path: Optional[Union[str, Path]] = None,
        log_dir: Optional[Union[str, Path]] = None,
        echo: bool = False,
    ) -> "TimelogDB":
        """Create a store and initialize its schema."""
        db = cls(db_url=db_url, db_path=db_path, log_dir=log_dir, echo=echo)
        try:
            await db.initialize_schema()
        except Exception:
            await db.dispose()
            raise
        return db

    @handle_db_errors
    async def initialize_schema(self) -> None:
        """
        Create the labels, activities and activity_labels tables.

        Existing tables are left as they are.

        Raises:
            SqlError: If any DDL statement cannot be applied
        """
        logger = safe_logger(self.logger)
        logger.log_operation("schema_init_start", {"db_url": self.db_url})
        try:
            async with self._exclusive(), self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except Exception as e:
            logger.log_error(e, {"operation": "schema_init"})
            raise
        logger.log_operation("schema_init_complete", {"success": True})

    async def dispose(self) -> None:
        """Close pooled connections and release log files."""
        await self.engine.dispose()
        if self.logger:
            self.logger.close()

    # ---- Session Management ----
    @asynccontextmanager
    async def _exclusive(self) -> AsyncIterator[None]:
        """Hold the shared-connection lock (in-memory stores only) for the block."""
        if self._connection_lock is None:
            yield
            return
        async with self._connection_lock:
            yield

    @asynccontextmanager
    async def session_scope(self) -> AsyncIterator[AsyncSession]:
        """
        Provide a transactional scope around a series of operations.

        Commits on success; rolls back and re-raises on any exception.
        On an in-memory store scopes run one at a time, so scopes must
        not be nested.

        Usage:
            async with db.session_scope() as session:
                labels = LabelManager(session, db.logger)
                await labels.create("focus")
        """
        async with self._exclusive():
            async with self._open_session() as session:
                yield session

    @asynccontextmanager
    async def _open_session(self) -> AsyncIterator[AsyncSession]:
        session = self.SessionLocal()
        session_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        logger = safe_logger(self.logger)
        logger.log_debug("session_start", {"session_id": session_id})

        try:
            yield session
            await session.commit()
            logger.log_debug("session_commit", {"session_id": session_id})
        except Exception as e:
            await session.rollback()
            logger.log_error(e, {"operation": "session_rollback", "session_id": session_id})
            raise
        finally:
            await session.close()
            logger.log_debug("session_close", {"session_id": session_id})

    # -------------------------------------------------------------------------
    # Labels
    # -------------------------------------------------------------------------

    @handle_db_errors
    async def create_label(self, name: str, scope: Optional[str] = None) -> Label:
        """
        Create a label.

        Raises:
            ValidationError: If name is empty
            DatabaseError: If ``(name, scope)`` already exists
            SqlError: On backing-store failures
        """
        async with self.session_scope() as session:
            return await LabelManager(session, self.logger).create(name, scope)

    async def create_label_from(self, new: LabelNew) -> Label:
        """Create a label from a pending LabelNew value."""
        return await self.create_label(new.name, new.scope)

    @handle_db_errors
    async def label_by_id(self, label_id: UUID) -> Optional[Label]:
        async with self.session_scope() as session:
            return await LabelManager(session, self.logger).get_by_id(label_id)

    @handle_db_errors
    async def label_by_name(self, name: str, scope: Optional[str] = None) -> Optional[Label]:
        """Exact lookup; without scope only global labels match."""
        async with self.session_scope() as session:
            return await LabelManager(session, self.logger).get(name, scope)

    @handle_db_errors
    async def label_search(self, query: str, scope: Optional[str] = None) -> List[Label]:
        """
        Prefix search over labels.

        With a scope, matches names starting with ``query`` inside that scope.
        Without, matches labels whose name or scope starts with ``query``.
        """
        async with self.session_scope() as session:
            return await LabelManager(session, self.logger).search(query, scope)

    # -------------------------------------------------------------------------
    # Activities
    # -------------------------------------------------------------------------

    @handle_db_errors
    async def activity_start(self, new: ActivityNew) -> Activity:
        """
        Start a new activity and return it as stored.

        The insert and the read-back run in separate sessions.

        Raises:
            DatabaseError / SqlError: If the insert fails
            RuntimeError: If the new row cannot be read back
        """
        async with self.session_scope() as session:
            activity_id = await ActivityManager(session, self.logger).insert(new)

        activity = await self.activity_by_id(activity_id)
        if activity is None:
            raise RuntimeError(f"Cannot load newly created activity {activity_id}")
        return activity

    @handle_db_errors
    async def activity_by_id(self, activity_id: UUID) -> Optional[Activity]:
        async with self.session_scope() as session:
            return await ActivityManager(session, self.logger).get_by_id(activity_id)
