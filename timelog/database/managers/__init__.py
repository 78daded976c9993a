#!/usr/bin/env python3
"""
managers package
--------------------
Entity managers for the Timelog store.

Each manager works inside one AsyncSession and handles a single table
family, inheriting from BaseManager.

Available Managers:
    BaseManager: Abstract base class with shared query helpers
    LabelManager: Creates, looks up and searches labels
    ActivityManager: Starts activities and loads them with their labels

Usage:
    from timelog.database.managers import LabelManager

    label_mgr = LabelManager(session, logger)
"""
from .base_manager import BaseManager
from .label_manager import LabelManager
from .activity_manager import ActivityManager

__all__ = [
    "BaseManager",
    "LabelManager",
    "ActivityManager",
]
