"""
Business logic for testimonials.
"""

import logging
import sqlite3
from typing import List

from ..core.db import new_id, transaction, utc_now
from ..schemas.testimonial import TestimonialCreate, TestimonialRead

logger = logging.getLogger(__name__)


class TestimonialService:
    """Service for managing client testimonials."""

    @classmethod
    async def create_testimonial(cls, data: TestimonialCreate) -> TestimonialRead:
        testimonial_id = new_id()
        with transaction("create testimonial") as cursor:
            cursor.execute(
                """
                INSERT INTO testimonials (id, client_name, client_photo, client_position, client_company,
                                          testimonial, rating, linkedin_url, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    testimonial_id,
                    data.client_name,
                    data.client_photo,
                    data.client_position,
                    data.client_company,
                    data.testimonial,
                    data.rating,
                    data.linkedin_url,
                    utc_now(),
                ),
            )
            row = cursor.execute(
                "SELECT * FROM testimonials WHERE id = ?", (testimonial_id,)
            ).fetchone()
        logger.info("Created testimonial %s from %s", testimonial_id, data.client_name)
        return cls._row_to_testimonial_read(row)

    @classmethod
    async def list_testimonials(cls) -> List[TestimonialRead]:
        """Return every testimonial, newest first."""
        with transaction("list testimonials") as cursor:
            rows = cursor.execute(
                "SELECT * FROM testimonials ORDER BY created_at DESC, rowid DESC"
            ).fetchall()
        return [cls._row_to_testimonial_read(row) for row in rows]

    @staticmethod
    def _row_to_testimonial_read(row: sqlite3.Row) -> TestimonialRead:
        return TestimonialRead(
            id=row["id"],
            client_name=row["client_name"],
            client_photo=row["client_photo"],
            client_position=row["client_position"],
            client_company=row["client_company"],
            testimonial=row["testimonial"],
            rating=row["rating"],
            linkedin_url=row["linkedin_url"],
            created_at=row["created_at"],
        )
