"""
Pydantic models for the site owner's profile.

A portfolio has a single owner whose name, contact email, short bio,
avatar, resume link and social profile links feed the hero, about and
footer sections.  ``social_links`` is an open mapping (platform name
to URL) so new platforms need no schema change.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field

from .common import EmailAddress, NonEmptyStr, UtcDatetime


class UserCreate(BaseModel):
    """Schema for creating a user."""

    name: NonEmptyStr = Field(..., examples=["Jane Doe"])
    email: EmailAddress = Field(..., examples=["jane@example.com"])
    bio: Optional[str] = Field(None, examples=["Full-stack developer"])
    avatar: Optional[str] = None
    resume: Optional[str] = None
    social_links: Optional[Dict[str, str]] = Field(
        None, examples=[{"github": "https://github.com/jane"}]
    )


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    name: str
    email: str
    bio: Optional[str]
    avatar: Optional[str]
    resume: Optional[str]
    social_links: Optional[Dict[str, str]]
    created_at: UtcDatetime
