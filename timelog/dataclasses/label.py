#!/usr/bin/env python3
"""
label.py
-------------------

Defines the Label value types handed to and returned by the store.

A label is a named tag with an optional scope (namespace). Labels without
a scope are global. The display form joins scope and name with ``::``.
"""
from __future__ import annotations

# --- Standard Library ---
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional

# --- Local ---
from timelog.core.codecs import decode_id, encode_id
from timelog.core.validators import DataValidator


@dataclass(frozen=True)
class Label:
    """
    A persisted label.

    Fields:
    - id:    Identifier generated at creation
    - name:  Label text (non-empty)
    - scope: Optional namespace; None means global
    """
    id:    uuid.UUID
    name:  str
    scope: Optional[str] = None

    def description(self) -> str:
        """Return ``scope::name`` for scoped labels, else ``name``."""
        if self.scope is not None:
            return f"{self.scope}::{self.name}"
        return self.name

    def __str__(self) -> str:
        return self.description()

    # ---- Interchange ----
    def to_dict(self) -> Dict[str, Any]:
        return {"id": encode_id(self.id), "name": self.name, "scope": self.scope}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Label":
        """
        Build a Label from its interchange dictionary.

        Raises:
            ValidationError: If ``id`` or ``name`` is missing
            ParseError: If ``id`` is not a valid identifier
        """
        DataValidator.validate_required_fields(data, ["id", "name"])
        return cls(
            id=decode_id(data["id"]),
            name=data["name"],
            scope=DataValidator.optional_text(data.get("scope"), "scope"),
        )


@dataclass(frozen=True)
class LabelNew:
    """A label that has not been stored yet."""
    name:  str
    scope: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "scope": self.scope}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LabelNew":
        DataValidator.validate_required_fields(data, ["name"])
        return cls(
            name=data["name"],
            scope=DataValidator.optional_text(data.get("scope"), "scope"),
        )
