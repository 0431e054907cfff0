"""
User ORM model.

The credential store: one row per registered identity.
"""

from sqlalchemy import Column, Text

from portfolio_api.models.base import Base, IdMixin


class User(IdMixin, Base):
    """Registered identity. ``password`` holds a salted one-way hash, never plaintext."""

    __tablename__ = "users"

    email = Column(Text, unique=True)
    password = Column(Text)
