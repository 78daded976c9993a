#!/usr/bin/env python3
"""
codecs.py
--------------------
Canonical text encodings for identifiers and timestamps.

The same text forms are used for the SQLite columns and for the
interchange dictionaries handed to the surrounding application:

    - Identifiers: 36-character hyphenated hex UUID strings
    - Timestamps: naive local date-times as ``YYYY-MM-DD HH:MM:SS``
    - Optional timestamps: same pattern, or the literal ``"null"`` when absent

Every decoder raises ParseError on malformed input.
"""
from __future__ import annotations

# --- Standard library imports ---
import re
import uuid
from datetime import datetime
from typing import Optional

# --- Local imports ---
from .exceptions import ParseError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
NULL_SENTINEL = "null"

# strptime alone accepts unpadded fields ("2024-1-5 3:04:05")
_TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")
_UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


# ----- Identifiers -----

def new_id() -> uuid.UUID:
    """Generate a fresh random (version 4) identifier."""
    return uuid.uuid4()


def encode_id(value: uuid.UUID) -> str:
    """Render an identifier in its hyphenated hex form."""
    return str(value)


def decode_id(text: str) -> uuid.UUID:
    """
    Parse a hyphenated hex identifier.

    Args:
        text: Identifier text as stored or exchanged

    Returns:
        The parsed UUID

    Raises:
        ParseError: If the text is not a valid hyphenated identifier
    """
    if not isinstance(text, str) or not _UUID_RE.fullmatch(text):
        raise ParseError(text, "invalid identifier")
    try:
        return uuid.UUID(text)
    except ValueError as e:
        raise ParseError(text, e) from e


# ----- Timestamps -----

def encode_timestamp(value: datetime) -> str:
    """
    Render a timestamp as ``YYYY-MM-DD HH:MM:SS`` (sub-seconds dropped).

    Fields are padded explicitly; ``strftime("%Y")`` leaves years below
    1000 unpadded on some platforms, which decode_timestamp would reject.
    """
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )


def decode_timestamp(text: str) -> datetime:
    """
    Parse a ``YYYY-MM-DD HH:MM:SS`` timestamp.

    Args:
        text: Timestamp text

    Returns:
        Naive datetime

    Raises:
        ParseError: On any deviation from the pattern
    """
    if not isinstance(text, str) or not _TIMESTAMP_RE.fullmatch(text):
        raise ParseError(text, f"expected format {TIMESTAMP_FORMAT}")
    try:
        return datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise ParseError(text, e) from e


def encode_optional_timestamp(value: Optional[datetime]) -> str:
    """Render an optional timestamp, using ``"null"`` for absence."""
    if value is None:
        return NULL_SENTINEL
    return encode_timestamp(value)


def decode_optional_timestamp(text: str) -> Optional[datetime]:
    """
    Parse an optional timestamp.

    The ``"null"`` sentinel is recognized before pattern parsing.

    Raises:
        ParseError: If the text is neither the sentinel nor a valid timestamp
    """
    if text == NULL_SENTINEL:
        return None
    return decode_timestamp(text)
