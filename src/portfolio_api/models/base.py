"""
Base SQLAlchemy declarative class and common model mixins.

This module provides the foundation for all table definitions in the application.
Timestamps are stored as ISO-8601 text so both engines sort them identically.
"""

from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import declarative_base, declared_attr


# Create base declarative class
Base = declarative_base()


class IdMixin:
    """Server-generated, strictly increasing integer primary key."""

    # SQLite would otherwise reuse the ids of deleted rows
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)


class CreatedMixin:
    """
    Mixin that adds the created_date stamp.

    Attributes:
        created_date: ISO timestamp, supplied by the caller or set on insert
    """

    @declared_attr
    def created_date(cls):
        return Column(Text, nullable=True)


class TimestampMixin(CreatedMixin):
    """
    Mixin that adds created_date and modified_date stamps.

    Attributes:
        created_date: ISO timestamp set when the row is inserted
        modified_date: ISO timestamp refreshed on every write
    """

    @declared_attr
    def modified_date(cls):
        return Column(Text, nullable=True)


class OwnedMixin:
    """Rows scoped to an identity through its email (filter only, not enforced)."""

    @declared_attr
    def user_email(cls):
        return Column(Text, nullable=True, index=True)
