"""
Timelog
=======

Persistence core of a personal activity tracker.

Stores activities (named events with a start, an optional end and an
optional description) and labels (named, optionally scoped tags), and
associates many labels with many activities.

Main Components:
    - core: Codecs, exceptions, validation, logging, paths
    - dataclasses: Label / Activity value types and their interchange form
    - database: SQLAlchemy (async, SQLite) store with entity managers
    - cli: Click command-line interface over the store

Example Usage:
    >>> from timelog import TimelogDB
    >>> db = await TimelogDB.connect()
    >>> label = await db.create_label("focus", scope="work")
    >>> label.description()
    'work::focus'
"""

__version__ = "0.1.0"

from timelog.database.manager import TimelogDB
from timelog.dataclasses import Activity, ActivityNew, Label, LabelNew

__all__ = [
    "TimelogDB",
    "Activity",
    "ActivityNew",
    "Label",
    "LabelNew",
]
