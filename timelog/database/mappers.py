#!/usr/bin/env python3
"""
mappers.py
--------------------
Explicit row-to-value mapping for the Timelog tables.

Each function lists every column it reads and the field it feeds, and
decodes stored text through timelog.core.codecs. Malformed stored
identifiers or timestamps therefore surface as ParseError.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from timelog.core.codecs import decode_id, decode_timestamp
from timelog.dataclasses import Activity, Label
from .models import ActivityRecord, LabelRecord


def label_from_row(row: LabelRecord) -> Label:
    """Map a ``labels`` row to a Label."""
    return Label(
        id=decode_id(row.id),
        name=row.name,
        scope=row.scope,
    )


def labels_from_rows(rows: Iterable[LabelRecord]) -> List[Label]:
    return [label_from_row(row) for row in rows]


def activity_from_row(row: ActivityRecord) -> Activity:
    """
    Map an ``activities`` row to an Activity.

    ``labels`` starts empty; the caller resolves it from activity_labels.
    """
    end: Optional[str] = row.aend
    return Activity(
        id=decode_id(row.id),
        name=row.name,
        description=row.description,
        start=decode_timestamp(row.astart),
        end=decode_timestamp(end) if end is not None else None,
        labels=[],
    )
