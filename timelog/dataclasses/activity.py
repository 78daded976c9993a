#!/usr/bin/env python3
"""
activity.py
-------------------

Defines the Activity value types handed to and returned by the store.

An activity is a named occurrence with a start time, an optional end time
(absent while the activity is still running), an optional description and
the labels attached to it.

Interchange dictionaries render timestamps as ``YYYY-MM-DD HH:MM:SS``; an
absent optional timestamp is written as the literal text ``"null"``.
"""
from __future__ import annotations

# --- Standard Library ---
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

# --- Local ---
from timelog.core.codecs import (
    decode_id,
    decode_optional_timestamp,
    decode_timestamp,
    encode_id,
    encode_optional_timestamp,
    encode_timestamp,
)
from timelog.core.validators import DataValidator
from .label import Label


@dataclass
class Activity:
    """
    A persisted activity.

    Fields:
    - id:          Identifier generated at creation
    - name:        Activity name
    - start:       Start timestamp (naive, local)
    - description: Optional free text
    - end:         Optional end timestamp; None while ongoing
    - labels:      Labels attached through the association table, in stored order
    """
    id:          uuid.UUID
    name:        str
    start:       datetime
    description: Optional[str]      = None
    end:         Optional[datetime] = None
    labels:      List[Label]        = field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return self.end is None

    # ---- Interchange ----
    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": encode_id(self.id),
            "name": self.name,
            "description": self.description,
            "labels": [label.to_dict() for label in self.labels],
            "start": encode_timestamp(self.start),
            "end": encode_optional_timestamp(self.end),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Activity":
        """
        Build an Activity from its interchange dictionary.

        Raises:
            ValidationError: If ``id``, ``name``, ``start`` or ``end`` is missing
            ParseError: If an identifier or timestamp is malformed
        """
        DataValidator.validate_required_fields(data, ["id", "name", "start", "end"])
        return cls(
            id=decode_id(data["id"]),
            name=data["name"],
            start=decode_timestamp(data["start"]),
            description=DataValidator.optional_text(data.get("description"), "description"),
            end=decode_optional_timestamp(data["end"]),
            labels=[Label.from_dict(item) for item in data.get("labels") or []],
        )


@dataclass
class ActivityNew:
    """
    An activity that has not been stored yet.

    ``labels`` is carried for callers but is not persisted when starting
    an activity. ``start`` may be None, in which case the store uses the
    current time.
    """
    name:        str
    description: Optional[str]      = None
    labels:      List[Label]        = field(default_factory=list)
    start:       Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "labels": [label.to_dict() for label in self.labels],
            "start": encode_optional_timestamp(self.start),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ActivityNew":
        DataValidator.validate_required_fields(data, ["name", "start"])
        return cls(
            name=data["name"],
            description=DataValidator.optional_text(data.get("description"), "description"),
            labels=[Label.from_dict(item) for item in data.get("labels") or []],
            start=decode_optional_timestamp(data["start"]),
        )
