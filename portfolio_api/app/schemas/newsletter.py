"""
Pydantic schemas for newsletter subscriptions.

There is one subscription row per email address.  Subscribing an
address that previously unsubscribed reactivates its existing row.
"""

from pydantic import BaseModel

from .common import EmailAddress, UtcDatetime


class NewsletterSubscriptionCreate(BaseModel):
    email: EmailAddress


class NewsletterQuery(BaseModel):
    """``active_only`` restricts the listing to current subscribers."""

    active_only: bool = True


class NewsletterSubscriptionRead(BaseModel):
    id: str
    email: str
    subscribed: bool
    created_at: UtcDatetime
