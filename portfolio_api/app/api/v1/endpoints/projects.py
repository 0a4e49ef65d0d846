"""
Project endpoints for API v1.

Listing projects counts a view for every project on the returned page.
Updates are sparse: the body names the project ``id`` and only the
fields to change.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from portfolio_api.app.schemas.common import parse_input
from portfolio_api.app.schemas.project import (
    ProjectCreate,
    ProjectQuery,
    ProjectRead,
    ProjectUpdate,
)
from portfolio_api.app.services.project_service import ProjectService

router = APIRouter()


@router.get("", response_model=List[ProjectRead], operation_id="getProjects")
async def list_projects(
    featured: Optional[bool] = Query(None),
    category: Optional[str] = Query(None, description="Accepted but currently has no effect"),
    limit: Optional[int] = Query(None, description="Page size, default 20"),
    offset: Optional[int] = Query(None, description="Rows to skip, default 0"),
) -> List[ProjectRead]:
    """List projects newest first.

    - **featured** - only featured (true) or non-featured (false) projects.
    - **limit**, **offset** - pagination; ``limit`` must be positive and
      ``offset`` non-negative.
    """
    params = {"featured": featured, "category": category, "limit": limit, "offset": offset}
    query = parse_input(ProjectQuery, **{k: v for k, v in params.items() if v is not None})
    return await ProjectService.list_projects(query)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    operation_id="createProject",
)
async def create_project(project_in: ProjectCreate) -> ProjectRead:
    return await ProjectService.create_project(project_in)


@router.patch("", response_model=ProjectRead, operation_id="updateProject")
async def update_project(project_in: ProjectUpdate) -> ProjectRead:
    """Update the given fields of a project.  Responds 404 for an unknown id."""
    return await ProjectService.update_project(project_in)
