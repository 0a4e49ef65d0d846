"""
Pydantic schemas for messages sent through the contact form.

``attachment`` is stored as a bare string (a link or file name); no
upload handling happens here.  New messages always start with status
``new``; ``read`` and ``replied`` exist for the inbox view.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from .common import SQLITE_MAX_INT, EmailAddress, NonEmptyStr, UtcDatetime

ContactStatus = Literal["new", "read", "replied"]


class ContactMessageCreate(BaseModel):
    """Schema for submitting a contact message."""

    name: NonEmptyStr
    email: EmailAddress
    subject: NonEmptyStr
    message: NonEmptyStr
    attachment: Optional[str] = None


class ContactMessageQuery(BaseModel):
    """Filters and pagination for the contact inbox."""

    status: Optional[ContactStatus] = None
    limit: int = Field(50, gt=0, le=SQLITE_MAX_INT)
    offset: int = Field(0, ge=0, le=SQLITE_MAX_INT)


class ContactMessageRead(BaseModel):
    id: str
    name: str
    email: str
    subject: str
    message: str
    attachment: Optional[str]
    status: ContactStatus
    created_at: UtcDatetime
