"""
Site owner endpoints for API v1.

``GET /user`` answers ``null`` (not 404) until the owner profile has
been created, so the front-end can render placeholders.
"""

from typing import Optional

from fastapi import APIRouter, status

from portfolio_api.app.schemas.user import UserCreate, UserRead
from portfolio_api.app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=Optional[UserRead], operation_id="getUser")
async def get_user() -> Optional[UserRead]:
    """Return the portfolio owner, or ``null`` if none exists yet."""
    return await UserService.get_user()


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    operation_id="createUser",
)
async def create_user(user_in: UserCreate) -> UserRead:
    """Create a user.  Responds 409 if the email is already taken."""
    return await UserService.create_user(user_in)
