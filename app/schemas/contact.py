"""
app/schemas/contact.py

Purpose: Contact form payload and response schemas

- Stored submission records as returned to the admin view
- Gateway result pass-through
- Submission workflow result
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SubmissionRecord(BaseModel):
    """A stored submission, full schema."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    subject: Optional[str] = None
    message: str
    created_at: datetime


class SmsResult(BaseModel):
    """
    Raw outcome of one completed call to the SMS gateway.
    Non-2xx statuses are still results, the body is passed through untouched.
    """
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(..., alias="statusCode")
    body: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class NotificationStatus(str, Enum):
    SENT = "sent"
    FAILED = "failed"
    SKIPPED = "skipped"


class SubmissionResult(BaseModel):
    """Returned to the HTTP layer once a submission is committed."""
    ok: bool = True
    id: int
    sms: Optional[SmsResult] = None
    notification_status: NotificationStatus

    def render(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class MessageListResponse(BaseModel):
    ok: bool = True
    data: List[SubmissionRecord]


class OkResponse(BaseModel):
    ok: bool = True
