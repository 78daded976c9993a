#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Timelog project.

Exception Hierarchy:
    Exception (built-in)
    ├── DatabaseError - Logical invariant violations in the store
    │   └── SqlError - Lower-level failures surfaced by SQLAlchemy/the driver
    ├── ValueError (built-in)
    │   └── ParseError - Malformed identifier or timestamp text
    └── ValidationError - Rejected input data

Usage:
    from timelog.core.exceptions import DatabaseError, SqlError

    try:
        label = await db.create_label("focus", scope="work")
    except SqlError as e:
        logger.error(f"Driver failure: {e.cause}")
    except DatabaseError as e:
        logger.error(f"Rejected write: {e}")
"""
from typing import Optional


class DatabaseError(Exception):
    """
    Base exception for database-related errors.

    Raised directly when the store detects a logical invariant violation,
    e.g. an insert that did not affect exactly one row, or a uniqueness
    conflict on ``(name, scope)``.

    Examples:
        >>> raise DatabaseError("Cannot insert new label")
    """

    pass


class SqlError(DatabaseError):
    """
    Exception wrapping a lower-level backing-store failure.

    Covers connectivity, malformed statements, I/O and any other error
    raised by SQLAlchemy or the SQLite driver that is not classified as
    an integrity problem.

    Attributes:
        cause: The original exception raised by the driver
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"SQL error: {cause}")


class ParseError(ValueError):
    """
    Exception for malformed identifier or timestamp text.

    Attributes:
        text: The offending input
        cause: The underlying parsing exception, if any

    Examples:
        >>> raise ParseError("2024-13-01 00:00:00", "month must be in 1..12")
    """

    def __init__(self, text: object, cause: Optional[object] = None) -> None:
        self.text = text
        self.cause = cause
        message = f"Cannot parse {text!r}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Raised when input data fails validation checks:
    - Empty label names
    - Missing required interchange fields

    Examples:
        >>> raise ValidationError("Label name cannot be empty")
        >>> raise ValidationError("Required field 'id' missing or empty")
    """

    pass
