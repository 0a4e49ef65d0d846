"""
Business logic for newsletter subscriptions.

``subscribe`` behaves like an upsert keyed on the email address:

1. an active subscription is returned unchanged, without a write;
2. an inactive one is flipped back to ``subscribed`` in place, keeping
   its identifier;
3. otherwise a new subscription row is inserted.

Emails are compared as exact strings, so addresses differing only in
the case of the local part are separate subscribers.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import new_id, transaction, utc_now
from ..core.errors import ConflictError
from ..schemas.newsletter import (
    NewsletterQuery,
    NewsletterSubscriptionCreate,
    NewsletterSubscriptionRead,
)

logger = logging.getLogger(__name__)


class NewsletterService:
    """Service for newsletter subscriptions."""

    @classmethod
    async def subscribe(cls, data: NewsletterSubscriptionCreate) -> NewsletterSubscriptionRead:
        with transaction("subscribe to newsletter") as cursor:
            existing = cursor.execute(
                "SELECT * FROM newsletter_subscriptions WHERE email = ?", (data.email,)
            ).fetchone()
            if existing and existing["subscribed"]:
                return cls._row_to_subscription_read(existing)
            if existing:
                cursor.execute(
                    "UPDATE newsletter_subscriptions SET subscribed = 1 WHERE id = ?",
                    (existing["id"],),
                )
                row = cursor.execute(
                    "SELECT * FROM newsletter_subscriptions WHERE id = ?", (existing["id"],)
                ).fetchone()
                logger.info("Reactivated newsletter subscription %s", existing["id"])
                return cls._row_to_subscription_read(row)

        try:
            return await cls._insert_subscription(data.email)
        except ConflictError:
            # A concurrent subscribe for the same address inserted first.
            with transaction("subscribe to newsletter") as cursor:
                row = cursor.execute(
                    "SELECT * FROM newsletter_subscriptions WHERE email = ?", (data.email,)
                ).fetchone()
            if not row:
                raise
            return cls._row_to_subscription_read(row)

    @classmethod
    async def list_subscriptions(
        cls, query: Optional[NewsletterQuery] = None
    ) -> List[NewsletterSubscriptionRead]:
        """Return subscriptions, newest first; only active ones by default."""
        query = query or NewsletterQuery()
        sql = "SELECT * FROM newsletter_subscriptions"
        if query.active_only:
            sql += " WHERE subscribed = 1"
        sql += " ORDER BY created_at DESC, rowid DESC"
        with transaction("list newsletter subscriptions") as cursor:
            rows = cursor.execute(sql).fetchall()
        return [cls._row_to_subscription_read(row) for row in rows]

    @classmethod
    async def _insert_subscription(cls, email: str) -> NewsletterSubscriptionRead:
        subscription_id = new_id()
        with transaction("subscribe to newsletter") as cursor:
            cursor.execute(
                """
                INSERT INTO newsletter_subscriptions (id, email, subscribed, created_at)
                VALUES (?, ?, 1, ?)
                """,
                (subscription_id, email, utc_now()),
            )
            row = cursor.execute(
                "SELECT * FROM newsletter_subscriptions WHERE id = ?", (subscription_id,)
            ).fetchone()
        logger.info("Created newsletter subscription %s", subscription_id)
        return cls._row_to_subscription_read(row)

    @staticmethod
    def _row_to_subscription_read(row: sqlite3.Row) -> NewsletterSubscriptionRead:
        return NewsletterSubscriptionRead(
            id=row["id"],
            email=row["email"],
            subscribed=bool(row["subscribed"]),
            created_at=row["created_at"],
        )
