#!/usr/bin/env python3
"""
activity_manager.py
--------------------
Manages Activity rows and resolves their labels.

Starting an activity stores its name, description and start time only;
``end`` and the label associations are left untouched. Reads always
re-resolve labels from the activity_labels table.

Usage:
    activity_mgr = ActivityManager(session, logger)

    activity_id = await activity_mgr.insert(ActivityNew(name="run"))
    activity = await activity_mgr.get_by_id(activity_id)
"""
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import insert, select, text

from timelog.core.codecs import encode_id, encode_timestamp, new_id
from timelog.core.exceptions import ValidationError
from timelog.core.validators import DataValidator
from timelog.database.decorators import handle_db_errors, log_database_operation
from timelog.database.mappers import activity_from_row, labels_from_rows
from timelog.database.models import ActivityRecord, LabelRecord, activity_labels
from timelog.dataclasses import Activity, ActivityNew, Label
from .base_manager import BaseManager

_ASSOCIATION_ORDER = text("activity_labels.rowid")


class ActivityManager(BaseManager):
    """
    Manages ``activities`` table operations and label resolution.
    """

    @handle_db_errors
    @log_database_operation("insert_activity")
    async def insert(self, new: ActivityNew) -> UUID:
        """
        Insert a new activity row.

        Args:
            new: Pending activity. ``labels`` is ignored; a missing ``start``
                defaults to the current local time (whole seconds).

        Returns:
            The generated activity id

        Raises:
            ValidationError: If the name is not a string
            DatabaseError: If the insert did not affect exactly one row
            SqlError: On backing-store failures
        """
        if not isinstance(new.name, str):
            raise ValidationError("Activity name must be a string")
        DataValidator.optional_text(new.description, "Activity description")

        start = new.start if new.start is not None else datetime.now().replace(microsecond=0)
        activity_id = new_id()

        await self._insert_one(
            insert(ActivityRecord.__table__).values(
                id=encode_id(activity_id),
                name=new.name,
                description=new.description,
                astart=encode_timestamp(start),
            ),
            "activity",
        )

        if self.logger:
            self.logger.log_debug(
                f"Started activity: {new.name}",
                {"activity_id": str(activity_id), "start": encode_timestamp(start)},
            )

        return activity_id

    @handle_db_errors
    @log_database_operation("get_activity_by_id")
    async def get_by_id(self, activity_id: UUID) -> Optional[Activity]:
        """
        Retrieve an activity with its labels.

        Returns:
            Activity if found, None otherwise
        """
        row = await self._get_by_id(ActivityRecord, activity_id)
        if row is None:
            return None

        activity = activity_from_row(row)
        labels = await self._labels_for(activity_id)
        if labels:
            activity.labels = labels

        return activity

    async def _labels_for(self, activity_id: UUID) -> List[Label]:
        statement = (
            select(LabelRecord)
            .join(activity_labels, activity_labels.c.label_id == LabelRecord.id)
            .where(activity_labels.c.activity_id == encode_id(activity_id))
            .order_by(_ASSOCIATION_ORDER)
        )
        return labels_from_rows(await self._all(statement))
