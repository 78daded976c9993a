"""
Base Classes
------------

Declarative base for the Timelog ORM tables.
"""
# --- Third party ---
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all ORM models.

    Provides the metadata object used for schema creation.
    """

    pass
