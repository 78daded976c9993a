"""
Core Models
-----------

ORM tables for labels and activities.

Models:
    - LabelRecord: Row in ``labels``
    - ActivityRecord: Row in ``activities``

Identifiers and timestamps are stored as canonical text (see
timelog.core.codecs); converting rows to value types happens in
timelog.database.mappers, never on these classes.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional

# --- Third party imports ---
from sqlalchemy import CheckConstraint, Index, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

# --- Local imports ---
from .base import Base


class LabelRecord(Base):
    """
    Stored label row.

    Attributes:
        id: UUID text, primary key
        name: Label name (non-empty)
        scope: Optional scope; NULL for global labels

    Constraints:
        - UNIQUE(name, scope)
        - One global label per name (partial unique index, since SQLite
          treats NULL scopes as distinct in the table constraint)
    """

    __tablename__ = "labels"
    __table_args__ = (
        UniqueConstraint("name", "scope", name="uq_labels_name_scope"),
        Index(
            "uq_labels_global_name",
            "name",
            unique=True,
            sqlite_where=text("scope IS NULL"),
        ),
        CheckConstraint("name != ''", name="ck_label_non_empty_name"),
    )

    id: Mapped[str] = mapped_column(Text, primary_key=True, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    scope: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    def __repr__(self) -> str:
        return f"<LabelRecord(id={self.id}, name='{self.name}', scope={self.scope!r})>"


class ActivityRecord(Base):
    """
    Stored activity row.

    Attributes:
        id: UUID text, primary key
        name: Activity name
        description: Optional free text
        astart: Start timestamp text (YYYY-MM-DD HH:MM:SS)
        aend: Optional end timestamp text
    """

    __tablename__ = "activities"

    id: Mapped[str] = mapped_column(Text, primary_key=True, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)
    astart: Mapped[str] = mapped_column(Text, nullable=False)
    aend: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    def __repr__(self) -> str:
        return f"<ActivityRecord(id={self.id}, name='{self.name}', astart={self.astart})>"
