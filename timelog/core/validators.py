#!/usr/bin/env python3
"""
validators.py
--------------------
Input validation helpers shared by the entity model and the store.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from .exceptions import ValidationError


class DataValidator:
    """Centralized data validation for store and interchange inputs."""

    @staticmethod
    def validate_required_fields(
        data: Dict[str, Any], required_fields: List[str]
    ) -> None:
        """
        Validate that required fields are present and non-empty.

        Args:
            data: Data dictionary to validate
            required_fields: List of required field names

        Raises:
            ValidationError: If validation fails
        """
        if not isinstance(data, dict):
            raise ValidationError(f"Expected a mapping, got {type(data).__name__}")
        for field in required_fields:
            if field not in data or data[field] in (None, ""):
                raise ValidationError(f"Required field '{field}' missing or empty")

    @staticmethod
    def require_text(value: Any, field: str) -> str:
        """
        Return ``value`` unchanged if it is a non-empty string.

        No stripping or case folding is performed.

        Raises:
            ValidationError: If value is not a string or is empty
        """
        if not isinstance(value, str) or value == "":
            raise ValidationError(f"{field} must be a non-empty string")
        return value

    @staticmethod
    def optional_text(value: Any, field: str) -> Optional[str]:
        """Return ``value`` if it is None or a string, else raise ValidationError."""
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"{field} must be a string or None")
        return value
