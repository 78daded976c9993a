"""
dataclasses package
-------------------
Plain value types exchanged with the store.

- Label / LabelNew: stored and pending labels
- Activity / ActivityNew: stored and pending activities

Values returned by the store are independent copies built from rows;
mutating them never touches stored data.
"""
from timelog.dataclasses.label import Label, LabelNew
from timelog.dataclasses.activity import Activity, ActivityNew

__all__ = ["Activity", "ActivityNew", "Label", "LabelNew"]
