"""
Business logic for work experience entries.
"""

import logging
import sqlite3
from typing import List

from ..core.db import dump_json, load_json, new_id, to_db_timestamp, transaction
from ..schemas.experience import ExperienceCreate, ExperienceRead

logger = logging.getLogger(__name__)


class ExperienceService:
    """Service for managing experience entries."""

    @classmethod
    async def create_experience(cls, data: ExperienceCreate) -> ExperienceRead:
        experience_id = new_id()
        end_date = to_db_timestamp(data.end_date) if data.end_date is not None else None
        with transaction("create experience") as cursor:
            cursor.execute(
                """
                INSERT INTO experience (id, company, position, location, start_date, end_date,
                                        description, current, company_logo)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    experience_id,
                    data.company,
                    data.position,
                    data.location,
                    to_db_timestamp(data.start_date),
                    end_date,
                    dump_json(data.description),
                    int(data.current),
                    data.company_logo,
                ),
            )
            row = cursor.execute(
                "SELECT * FROM experience WHERE id = ?", (experience_id,)
            ).fetchone()
        logger.info("Created experience %s (%s at %s)", experience_id, data.position, data.company)
        return cls._row_to_experience_read(row)

    @classmethod
    async def list_experience(cls) -> List[ExperienceRead]:
        """Return every experience entry, most recent start date first."""
        with transaction("list experience") as cursor:
            rows = cursor.execute(
                "SELECT * FROM experience ORDER BY start_date DESC, rowid DESC"
            ).fetchall()
        return [cls._row_to_experience_read(row) for row in rows]

    @staticmethod
    def _row_to_experience_read(row: sqlite3.Row) -> ExperienceRead:
        return ExperienceRead(
            id=row["id"],
            company=row["company"],
            position=row["position"],
            location=row["location"],
            start_date=row["start_date"],
            end_date=row["end_date"],
            description=load_json(row["description"]),
            current=bool(row["current"]),
            company_logo=row["company_logo"],
        )
