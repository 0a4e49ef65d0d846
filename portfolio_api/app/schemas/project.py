"""
Pydantic schemas for portfolio projects.

Projects carry a thumbnail, an ordered gallery of image URLs and the
ordered list of technologies used.  ``view_count`` is never set by
callers: it starts at zero and is bumped each time the project is
returned by a listing.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from .common import SQLITE_MAX_INT, NonEmptyStr, UrlStr, UtcDatetime


class ProjectCreate(BaseModel):
    """Schema for creating a new project."""

    title: NonEmptyStr = Field(..., examples=["Portfolio site"])
    description: NonEmptyStr
    thumbnail: UrlStr = Field(..., examples=["https://example.com/thumb.jpg"])
    images: List[UrlStr] = Field(..., description="Gallery image URLs, in display order")
    tech_stack: List[NonEmptyStr] = Field(..., examples=[["React", "FastAPI"]])
    live_url: Optional[UrlStr] = None
    github_url: Optional[UrlStr] = None
    featured: bool = False


class ProjectUpdate(BaseModel):
    """Schema for updating an existing project.

    All fields except ``id`` are optional; only the fields present in
    the payload are written.  Sending ``null`` for ``live_url`` or
    ``github_url`` clears the link, leaving it out keeps it.
    """

    id: str
    title: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None
    thumbnail: Optional[UrlStr] = None
    images: Optional[List[UrlStr]] = None
    tech_stack: Optional[List[NonEmptyStr]] = None
    live_url: Optional[UrlStr] = None
    github_url: Optional[UrlStr] = None
    featured: Optional[bool] = None

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> "ProjectUpdate":
        """Only the two links may be cleared; other columns cannot be null."""
        for name in self.model_fields_set - {"id", "live_url", "github_url"}:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class ProjectQuery(BaseModel):
    """Filters and pagination for listing projects.

    ``category`` is accepted for forward compatibility but projects have
    no category column, so it does not narrow the result.
    """

    featured: Optional[bool] = None
    category: Optional[str] = None
    limit: int = Field(20, gt=0, le=SQLITE_MAX_INT)
    offset: int = Field(0, ge=0, le=SQLITE_MAX_INT)


class ProjectRead(BaseModel):
    id: str
    title: str
    description: str
    thumbnail: str
    images: List[str]
    tech_stack: List[str]
    live_url: Optional[str]
    github_url: Optional[str]
    featured: bool
    view_count: int
    created_at: UtcDatetime
