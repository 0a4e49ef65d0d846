"""
Work experience endpoints for API v1.
"""

from typing import List

from fastapi import APIRouter, status

from portfolio_api.app.schemas.experience import ExperienceCreate, ExperienceRead
from portfolio_api.app.services.experience_service import ExperienceService

router = APIRouter()


@router.get("", response_model=List[ExperienceRead], operation_id="getExperience")
async def list_experience() -> List[ExperienceRead]:
    """List experience entries, most recent start date first."""
    return await ExperienceService.list_experience()


@router.post(
    "",
    response_model=ExperienceRead,
    status_code=status.HTTP_201_CREATED,
    operation_id="createExperience",
)
async def create_experience(experience_in: ExperienceCreate) -> ExperienceRead:
    return await ExperienceService.create_experience(experience_in)
