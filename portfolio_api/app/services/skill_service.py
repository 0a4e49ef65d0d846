"""
Business logic for skills.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import new_id, transaction
from ..schemas.skill import SkillCreate, SkillQuery, SkillRead

logger = logging.getLogger(__name__)


class SkillService:
    """Service for managing skills."""

    @classmethod
    async def create_skill(cls, data: SkillCreate) -> SkillRead:
        skill_id = new_id()
        with transaction("create skill") as cursor:
            cursor.execute(
                """
                INSERT INTO skills (id, name, category, level, icon, experience)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (skill_id, data.name, data.category, data.level, data.icon, data.experience),
            )
            row = cursor.execute("SELECT * FROM skills WHERE id = ?", (skill_id,)).fetchone()
        logger.info("Created skill %s (%s)", skill_id, data.name)
        return cls._row_to_skill_read(row)

    @classmethod
    async def list_skills(cls, query: Optional[SkillQuery] = None) -> List[SkillRead]:
        """Return all skills, optionally restricted to one category.

        The category match is exact.  No ordering is imposed.
        """
        query = query or SkillQuery()
        sql = "SELECT * FROM skills"
        params: list = []
        if query.category:
            sql += " WHERE category = ?"
            params.append(query.category)
        with transaction("list skills") as cursor:
            rows = cursor.execute(sql, tuple(params)).fetchall()
        return [cls._row_to_skill_read(row) for row in rows]

    @staticmethod
    def _row_to_skill_read(row: sqlite3.Row) -> SkillRead:
        return SkillRead(
            id=row["id"],
            name=row["name"],
            category=row["category"],
            level=row["level"],
            icon=row["icon"],
            experience=row["experience"],
        )
