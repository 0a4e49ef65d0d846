"""
Contact form endpoints for API v1.

Anyone may submit a message; the listing is the owner's inbox view.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from portfolio_api.app.schemas.common import parse_input
from portfolio_api.app.schemas.contact import (
    ContactMessageCreate,
    ContactMessageQuery,
    ContactMessageRead,
)
from portfolio_api.app.services.contact_service import ContactService

router = APIRouter()


@router.get("", response_model=List[ContactMessageRead], operation_id="getContactMessages")
async def list_contact_messages(
    status_filter: Optional[str] = Query(None, alias="status"),
    limit: Optional[int] = Query(None, description="Page size, default 50"),
    offset: Optional[int] = Query(None, description="Rows to skip, default 0"),
) -> List[ContactMessageRead]:
    """List messages newest first.

    - **status** - one of ``new``, ``read``, ``replied``.
    - **limit**, **offset** - pagination.
    """
    params = {"status": status_filter, "limit": limit, "offset": offset}
    query = parse_input(ContactMessageQuery, **{k: v for k, v in params.items() if v is not None})
    return await ContactService.list_contact_messages(query)


@router.post(
    "",
    response_model=ContactMessageRead,
    status_code=status.HTTP_201_CREATED,
    operation_id="createContactMessage",
)
async def create_contact_message(message_in: ContactMessageCreate) -> ContactMessageRead:
    return await ContactService.create_contact_message(message_in)
