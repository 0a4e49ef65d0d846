"""
Newsletter endpoints for API v1.

Subscribing is idempotent: posting an address that is already
subscribed returns the existing subscription, and posting one that
unsubscribed earlier reactivates it.  Both answer 201 like a fresh
subscription.
"""

from typing import List

from fastapi import APIRouter, Query, status

from portfolio_api.app.schemas.common import parse_input
from portfolio_api.app.schemas.newsletter import (
    NewsletterQuery,
    NewsletterSubscriptionCreate,
    NewsletterSubscriptionRead,
)
from portfolio_api.app.services.newsletter_service import NewsletterService

router = APIRouter()


@router.get(
    "",
    response_model=List[NewsletterSubscriptionRead],
    operation_id="getNewsletterSubscriptions",
)
async def list_subscriptions(active_only: bool = Query(True)) -> List[NewsletterSubscriptionRead]:
    query = parse_input(NewsletterQuery, active_only=active_only)
    return await NewsletterService.list_subscriptions(query)


@router.post(
    "",
    response_model=NewsletterSubscriptionRead,
    status_code=status.HTTP_201_CREATED,
    operation_id="createNewsletterSubscription",
)
async def subscribe(subscription_in: NewsletterSubscriptionCreate) -> NewsletterSubscriptionRead:
    return await NewsletterService.subscribe(subscription_in)
