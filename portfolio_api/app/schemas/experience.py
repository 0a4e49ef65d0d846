"""
Pydantic schemas for work experience entries.

``description`` is an ordered list of bullet points.  By convention
``end_date`` is null when ``current`` is true; this is not enforced.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import NonEmptyStr, UtcDatetime


class ExperienceCreate(BaseModel):
    """Schema for creating a new experience entry."""

    company: NonEmptyStr = Field(..., examples=["Acme Corp"])
    position: NonEmptyStr = Field(..., examples=["Senior Engineer"])
    location: Optional[str] = None
    start_date: datetime
    end_date: Optional[datetime] = None
    description: List[NonEmptyStr] = Field(..., description="Bullet points, in display order")
    current: bool = False
    company_logo: Optional[str] = None


class ExperienceRead(BaseModel):
    id: str
    company: str
    position: str
    location: Optional[str]
    start_date: UtcDatetime
    end_date: Optional[UtcDatetime]
    description: List[str]
    current: bool
    company_logo: Optional[str]
