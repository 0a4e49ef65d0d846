"""
Skill endpoints for API v1.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from portfolio_api.app.schemas.common import parse_input
from portfolio_api.app.schemas.skill import SkillCreate, SkillQuery, SkillRead
from portfolio_api.app.services.skill_service import SkillService

router = APIRouter()


@router.get("", response_model=List[SkillRead], operation_id="getSkills")
async def list_skills(category: Optional[str] = Query(None)) -> List[SkillRead]:
    """List skills, optionally only those of one ``category``."""
    query = parse_input(SkillQuery, category=category)
    return await SkillService.list_skills(query)


@router.post(
    "",
    response_model=SkillRead,
    status_code=status.HTTP_201_CREATED,
    operation_id="createSkill",
)
async def create_skill(skill_in: SkillCreate) -> SkillRead:
    return await SkillService.create_skill(skill_in)
