"""
Database Models Package
------------------------

SQLAlchemy ORM tables for the Timelog store:
- base: Declarative base
- associations: activity_labels join table
- core: LabelRecord, ActivityRecord

Usage:
    from timelog.database.models import Base, LabelRecord, activity_labels
"""
from .base import Base
from .associations import activity_labels
from .core import ActivityRecord, LabelRecord

__all__ = [
    "Base",
    "activity_labels",
    "ActivityRecord",
    "LabelRecord",
]
