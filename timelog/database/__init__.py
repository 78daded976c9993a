#!/usr/bin/env python3
"""
Timelog Database Package
------------------------
Persistence layer for labels and activities.

- manager: TimelogDB store facade (engine, sessions, operations)
- managers: Session-bound LabelManager and ActivityManager
- models: SQLAlchemy ORM tables
- mappers: Row-to-value mapping
- decorators: Logging and error translation for store operations
"""

from .manager import TimelogDB
from timelog.core.exceptions import (
    DatabaseError,
    ParseError,
    SqlError,
    ValidationError,
)
from .decorators import (
    handle_db_errors,
    log_database_operation,
)

__all__ = [
    # Store
    "TimelogDB",
    # Exceptions
    "DatabaseError",
    "ParseError",
    "SqlError",
    "ValidationError",
    # Decorators
    "log_database_operation",
    "handle_db_errors",
]
