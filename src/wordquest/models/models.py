"""Database models for the learning engine."""
from sqlalchemy import Column, String, Text

from wordquest.models.base import Base, TimestampMixin


class StoredValue(Base, TimestampMixin):
    """Flat key-value blob, one row per persisted document."""

    __tablename__ = "stored_values"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)  # JSON document
