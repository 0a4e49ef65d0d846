"""
Pydantic schemas for certificates.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .common import NonEmptyStr, UrlStr, UtcDatetime


class CertificateCreate(BaseModel):
    """Schema for creating a new certificate."""

    title: NonEmptyStr = Field(..., examples=["AWS Solutions Architect"])
    issuer: NonEmptyStr = Field(..., examples=["Amazon Web Services"])
    issue_date: datetime
    credential_id: Optional[str] = None
    verify_url: Optional[UrlStr] = None
    image: UrlStr
    category: Optional[str] = None


class CertificateQuery(BaseModel):
    category: Optional[str] = None


class CertificateRead(BaseModel):
    id: str
    title: str
    issuer: str
    issue_date: UtcDatetime
    credential_id: Optional[str]
    verify_url: Optional[str]
    image: str
    category: Optional[str]
