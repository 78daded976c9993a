"""
Association Tables
-------------------

Many-to-many relationship table between activities and labels.

Rows are removed together with either owner (ON DELETE CASCADE). No store
operation writes to this table yet.
"""
# --- Third party imports ---
from sqlalchemy import Column, ForeignKey, Table, Text

# --- Local imports ---
from .base import Base

activity_labels = Table(
    "activity_labels",
    Base.metadata,
    Column(
        "activity_id",
        Text,
        ForeignKey("activities.id", ondelete="CASCADE"),
        primary_key=True,
        nullable=False,
    ),
    Column(
        "label_id",
        Text,
        ForeignKey("labels.id", ondelete="CASCADE"),
        primary_key=True,
        nullable=False,
    ),
)
