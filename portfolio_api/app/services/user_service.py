"""
Business logic for the site owner's profile.

A portfolio has one owner.  Rather than treating "the oldest row in
``users``" as the owner, the first user ever created claims the fixed
``owner`` slot of the ``site_owner`` table and keeps it.  ``get_user``
reads that slot.
"""

import logging
import sqlite3
from typing import Optional

from ..core.db import dump_json, load_json, new_id, transaction, utc_now
from ..schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Service for the portfolio owner."""

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Insert a user and return the stored record.

        A duplicate email violates the UNIQUE constraint and surfaces as
        :class:`~portfolio_api.app.core.errors.ConflictError`; nothing is
        written in that case.
        """
        user_id = new_id()
        with transaction("create user") as cursor:
            cursor.execute(
                """
                INSERT INTO users (id, name, email, bio, avatar, resume, social_links, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    user_id,
                    data.name,
                    data.email,
                    data.bio,
                    data.avatar,
                    data.resume,
                    dump_json(data.social_links),
                    utc_now(),
                ),
            )
            # Only the first user gets the slot.
            cursor.execute(
                "INSERT OR IGNORE INTO site_owner (slot, user_id) VALUES ('owner', ?)",
                (user_id,),
            )
            row = cursor.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        logger.info("Created user %s", user_id)
        return cls._row_to_user_read(row)

    @classmethod
    async def get_user(cls) -> Optional[UserRead]:
        """Return the site owner, or ``None`` when no user exists yet."""
        with transaction("get user") as cursor:
            row = cursor.execute(
                """
                SELECT users.* FROM site_owner
                JOIN users ON users.id = site_owner.user_id
                WHERE site_owner.slot = 'owner'
                """
            ).fetchone()
        if not row:
            return None
        return cls._row_to_user_read(row)

    @staticmethod
    def _row_to_user_read(row: sqlite3.Row) -> UserRead:
        return UserRead(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            bio=row["bio"],
            avatar=row["avatar"],
            resume=row["resume"],
            social_links=load_json(row["social_links"]),
            created_at=row["created_at"],
        )
