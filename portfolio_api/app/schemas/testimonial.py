"""
Pydantic schemas for client testimonials.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .common import NonEmptyStr, UrlStr, UtcDatetime


class TestimonialCreate(BaseModel):
    """Schema for creating a new testimonial."""

    client_name: NonEmptyStr
    client_photo: Optional[str] = None
    client_position: NonEmptyStr
    client_company: NonEmptyStr
    testimonial: NonEmptyStr
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    linkedin_url: Optional[UrlStr] = None


class TestimonialRead(BaseModel):
    id: str
    client_name: str
    client_photo: Optional[str]
    client_position: str
    client_company: str
    testimonial: str
    rating: int
    linkedin_url: Optional[str]
    created_at: UtcDatetime
