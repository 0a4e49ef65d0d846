"""
Pydantic schemas for skills.

Each skill belongs to a free-form ``category`` (e.g. "Frontend") and
carries a proficiency ``level`` between 1 and 100 plus optional years
of experience.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .common import NonEmptyStr


class SkillCreate(BaseModel):
    """Schema for creating a new skill."""

    name: NonEmptyStr = Field(..., examples=["TypeScript"])
    category: NonEmptyStr = Field(..., examples=["Frontend"])
    level: int = Field(..., ge=1, le=100, description="Proficiency from 1 to 100")
    icon: Optional[str] = None
    experience: Optional[int] = Field(None, description="Years of experience")


class SkillQuery(BaseModel):
    """Filters for listing skills."""

    category: Optional[str] = None


class SkillRead(BaseModel):
    id: str
    name: str
    category: str
    level: int
    icon: Optional[str]
    experience: Optional[int]
