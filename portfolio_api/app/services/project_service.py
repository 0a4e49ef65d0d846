"""
Business logic for portfolio projects.

Listing projects has a side effect: every project returned by
``list_projects`` has its ``view_count`` bumped by one.  The bumps are
independent single-row updates committed one by one after the read.
They are not atomic with the read nor with each other, so concurrent
listings may lose an increment.  If a bump fails the listing fails with
:class:`StoreError`; the bumps already committed stay.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import dump_json, load_json, new_id, transaction, utc_now
from ..core.errors import NotFoundError
from ..schemas.project import ProjectCreate, ProjectQuery, ProjectRead, ProjectUpdate

logger = logging.getLogger(__name__)

_JSON_COLUMNS = {"images", "tech_stack"}


class ProjectService:
    """Service for managing projects."""

    @classmethod
    async def create_project(cls, data: ProjectCreate) -> ProjectRead:
        """Insert a project with ``view_count`` 0 and return it."""
        project_id = new_id()
        with transaction("create project") as cursor:
            cursor.execute(
                """
                INSERT INTO projects (id, title, description, thumbnail, images, tech_stack,
                                      live_url, github_url, featured, view_count, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, 0, ?)
                """,
                (
                    project_id,
                    data.title,
                    data.description,
                    data.thumbnail,
                    dump_json(data.images),
                    dump_json(data.tech_stack),
                    data.live_url,
                    data.github_url,
                    int(data.featured),
                    utc_now(),
                ),
            )
            row = cursor.execute("SELECT * FROM projects WHERE id = ?", (project_id,)).fetchone()
        logger.info("Created project %s (%s)", project_id, data.title)
        return cls._row_to_project_read(row)

    @classmethod
    async def list_projects(cls, query: Optional[ProjectQuery] = None) -> List[ProjectRead]:
        """Return a page of projects, newest first, and count the views.

        ``featured`` filters on exact match.  ``category`` is accepted
        but ignored: projects have no category.  Each returned record
        already reflects its own view.
        """
        query = query or ProjectQuery()
        sql = "SELECT * FROM projects"
        params: list = []
        if query.featured is not None:
            sql += " WHERE featured = ?"
            params.append(int(query.featured))
        sql += " ORDER BY created_at DESC, rowid DESC LIMIT ? OFFSET ?"
        params.extend([query.limit, query.offset])
        with transaction("list projects") as cursor:
            rows = cursor.execute(sql, tuple(params)).fetchall()

        projects: List[ProjectRead] = []
        for row in rows:
            cls._increment_view_count(row["id"])
            projects.append(cls._row_to_project_read(row, view_count=row["view_count"] + 1))
        return projects

    @classmethod
    async def update_project(cls, data: ProjectUpdate) -> ProjectRead:
        """Apply the fields present in ``data`` to an existing project.

        Fields absent from the payload keep their stored values.  Raises
        :class:`NotFoundError` if no project has ``data.id``.
        """
        changes = data.model_dump(include=data.model_fields_set - {"id"})
        with transaction("update project") as cursor:
            row = cursor.execute("SELECT id FROM projects WHERE id = ?", (data.id,)).fetchone()
            if not row:
                raise NotFoundError(f"Project {data.id} not found")
            if changes:
                columns = list(changes)
                values = [cls._to_column_value(column, changes[column]) for column in columns]
                assignments = ", ".join(f"{column} = ?" for column in columns)
                cursor.execute(
                    f"UPDATE projects SET {assignments} WHERE id = ?",
                    (*values, data.id),
                )
            row = cursor.execute("SELECT * FROM projects WHERE id = ?", (data.id,)).fetchone()
        if changes:
            logger.info("Updated project %s: %s", data.id, ", ".join(sorted(changes)))
        return cls._row_to_project_read(row)

    @staticmethod
    def _increment_view_count(project_id: str) -> None:
        with transaction("increment project view count") as cursor:
            cursor.execute(
                "UPDATE projects SET view_count = view_count + 1 WHERE id = ?",
                (project_id,),
            )

    @staticmethod
    def _to_column_value(column: str, value):
        if column in _JSON_COLUMNS:
            return dump_json(value)
        if column == "featured":
            return int(value)
        return value

    @staticmethod
    def _row_to_project_read(row: sqlite3.Row, view_count: Optional[int] = None) -> ProjectRead:
        return ProjectRead(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            thumbnail=row["thumbnail"],
            images=load_json(row["images"]),
            tech_stack=load_json(row["tech_stack"]),
            live_url=row["live_url"],
            github_url=row["github_url"],
            featured=bool(row["featured"]),
            view_count=row["view_count"] if view_count is None else view_count,
            created_at=row["created_at"],
        )
