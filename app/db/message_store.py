"""
app/db/message_store.py

Purpose: Submission table access

- Insert one submission inside a caller-owned transaction
- List every submission, newest first
- Delete one submission by id
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.db.database import Database
from app.models.submission import Submission
from app.schemas.contact import SubmissionRecord

logger = get_logger(__name__)


class MessageStore:
    """
    Data access for contact submissions.

    Inserts only happen inside `transaction()`, so the caller decides
    when the row becomes visible.
    """

    def __init__(self, database: Database):
        self.database = database

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        with self.database.transaction() as session:
            yield session

    def insert(
        self,
        session: Session,
        first_name: str,
        last_name: str,
        email: str,
        phone: str,
        message: str,
        subject: Optional[str] = None,
    ) -> int:
        """
        Adds a submission to the open transaction and returns its new id.

        Empty subjects are stored as NULL.
        """
        submission = Submission(
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            subject=subject or None,
            message=message,
        )
        session.add(submission)
        session.flush()
        return submission.id

    def list_all(self) -> List[SubmissionRecord]:
        """All submissions ordered by creation time, newest first."""
        statement = select(Submission).order_by(
            Submission.created_at.desc(), Submission.id.desc()
        )
        with self.database.session() as session:
            rows = session.scalars(statement).all()
            return [SubmissionRecord.model_validate(row) for row in rows]

    def delete(self, submission_id: int) -> bool:
        """
        Removes one submission.

        Returns:
            True if a row was deleted, False if none matched
        """
        statement = (
            delete(Submission)
            .where(Submission.id == submission_id)
            .execution_options(synchronize_session=False)
        )
        with self.database.transaction() as session:
            deleted = session.execute(statement).rowcount > 0

        if deleted:
            logger.info(f"Submission {submission_id} deleted")
        return deleted

    def count(self) -> int:
        with self.database.session() as session:
            return session.scalar(select(func.count()).select_from(Submission))
