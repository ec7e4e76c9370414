"""
app/models/submission.py

Purpose: Contact form submission table

- One row per submission, immutable after insert
- created_at is stamped at insert time and never updated
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base

from utils.constants import (
    EMAIL_MAX_LENGTH,
    FIRST_NAME_MAX_LENGTH,
    LAST_NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    SUBJECT_MAX_LENGTH,
)

Base = declarative_base()


def utc_now() -> datetime:
    """Naive UTC timestamp; the only source of created_at values."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Submission(Base):
    """A persisted contact form entry."""

    __tablename__ = "contact_table"
    # Ids are never reused, even after the newest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(FIRST_NAME_MAX_LENGTH), nullable=False)
    last_name = Column(String(LAST_NAME_MAX_LENGTH), nullable=False)
    email = Column(String(EMAIL_MAX_LENGTH), nullable=False)
    phone = Column(String(PHONE_MAX_LENGTH), nullable=False)
    subject = Column(String(SUBJECT_MAX_LENGTH), nullable=True)
    message = Column(Text, nullable=False)
    created_at = Column(
        DateTime,
        nullable=False,
        default=utc_now,
    )

    def __repr__(self) -> str:
        return f"<Submission(id={self.id}, email={self.email}, phone={self.phone})>"
