"""
Business logic for contact form messages.

Messages are stored with status ``new``.  Nothing in this service
changes the status afterwards; ``read`` and ``replied`` can only be
filtered on.  No email is sent when a message arrives.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import new_id, transaction, utc_now
from ..schemas.contact import ContactMessageCreate, ContactMessageQuery, ContactMessageRead

logger = logging.getLogger(__name__)


class ContactService:
    """Service for the contact inbox."""

    @classmethod
    async def create_contact_message(cls, data: ContactMessageCreate) -> ContactMessageRead:
        message_id = new_id()
        with transaction("create contact message") as cursor:
            cursor.execute(
                """
                INSERT INTO contact_messages (id, name, email, subject, message, attachment, status, created_at)
                VALUES (?, ?, ?, ?, ?, ?, 'new', ?)
                """,
                (
                    message_id,
                    data.name,
                    data.email,
                    data.subject,
                    data.message,
                    data.attachment,
                    utc_now(),
                ),
            )
            row = cursor.execute(
                "SELECT * FROM contact_messages WHERE id = ?", (message_id,)
            ).fetchone()
        logger.info("Stored contact message %s", message_id)
        return cls._row_to_message_read(row)

    @classmethod
    async def list_contact_messages(
        cls, query: Optional[ContactMessageQuery] = None
    ) -> List[ContactMessageRead]:
        """Return a page of messages, newest first, optionally by status."""
        query = query or ContactMessageQuery()
        sql = "SELECT * FROM contact_messages"
        params: list = []
        if query.status is not None:
            sql += " WHERE status = ?"
            params.append(query.status)
        sql += " ORDER BY created_at DESC, rowid DESC LIMIT ? OFFSET ?"
        params.extend([query.limit, query.offset])
        with transaction("list contact messages") as cursor:
            rows = cursor.execute(sql, tuple(params)).fetchall()
        return [cls._row_to_message_read(row) for row in rows]

    @staticmethod
    def _row_to_message_read(row: sqlite3.Row) -> ContactMessageRead:
        return ContactMessageRead(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            subject=row["subject"],
            message=row["message"],
            attachment=row["attachment"],
            status=row["status"],
            created_at=row["created_at"],
        )
