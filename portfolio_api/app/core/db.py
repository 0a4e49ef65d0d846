"""
SQLite storage for the portfolio records.

Services run their SQL inside ``transaction``, which turns driver
failures into the API error types.  ``init_db`` brings the schema up to
the latest entry of ``MIGRATIONS``; applied versions are recorded in
the ``migrations`` table.

Identifiers are ``uuid4`` strings generated here rather than by the
database.  Timestamps are stored as naive UTC ISO 8601 text with
microsecond precision so that ``ORDER BY`` on the text column is
chronological.  List and mapping fields are stored as JSON text.
"""

import json
import logging
import os
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator, Optional

from .config import settings
from .errors import ConflictError, StoreError

logger = logging.getLogger(__name__)


def get_database_path() -> str:
    """``DATABASE_URL`` as a file path; relative paths sit in the repository root."""
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Open a connection whose rows are addressable by column name.

    Timestamps and JSON columns come back as text; the read schemas
    parse them.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def transaction(operation: str) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, commit on success and classify failures.

    ``sqlite3.IntegrityError`` becomes :class:`ConflictError`; every
    other ``sqlite3.Error`` becomes :class:`StoreError`.  The original
    driver exception is chained and the failure is logged with the
    ``operation`` name.  Domain errors raised inside the block pass
    through untouched after the rollback.
    """
    conn = get_connection()
    try:
        cursor = conn.cursor()
        yield cursor
        conn.commit()
    except sqlite3.IntegrityError as e:
        conn.rollback()
        logger.error("%s failed: %s", operation, e)
        raise ConflictError(_describe_integrity_error(e)) from e
    except sqlite3.Error as e:
        conn.rollback()
        logger.error("%s failed: %s", operation, e)
        raise StoreError(f"{operation} failed: {e}") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def _describe_integrity_error(error: sqlite3.IntegrityError) -> str:
    # sqlite reports e.g. "UNIQUE constraint failed: users.email"
    text = str(error)
    if text.startswith("UNIQUE constraint failed:"):
        columns = text.split(":", 1)[1].strip()
        return f"A record with the same {columns} already exists"
    return text


def new_id() -> str:
    """Return a fresh, collision-free record identifier."""
    return str(uuid.uuid4())


def to_db_timestamp(value: datetime) -> str:
    """Normalise ``value`` to naive UTC and render it as ISO 8601 text."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="microseconds")


def utc_now() -> str:
    """Current time in the storage format."""
    return to_db_timestamp(datetime.now(timezone.utc))


def dump_json(value: Any) -> Optional[str]:
    if value is None:
        return None
    return json.dumps(value)


def load_json(value: Optional[str]) -> Any:
    if value is None:
        return None
    return json.loads(value)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT NOT NULL UNIQUE,
            bio TEXT,
            avatar TEXT,
            resume TEXT,
            social_links TEXT,
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS skills (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            category TEXT NOT NULL,
            level INTEGER NOT NULL,
            icon TEXT,
            experience INTEGER
        );

        CREATE TABLE IF NOT EXISTS projects (
            id TEXT PRIMARY KEY,
            title TEXT NOT NULL,
            description TEXT NOT NULL,
            thumbnail TEXT NOT NULL,
            images TEXT NOT NULL,
            tech_stack TEXT NOT NULL,
            live_url TEXT,
            github_url TEXT,
            featured INTEGER NOT NULL DEFAULT 0,
            view_count INTEGER NOT NULL DEFAULT 0,
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS certificates (
            id TEXT PRIMARY KEY,
            title TEXT NOT NULL,
            issuer TEXT NOT NULL,
            issue_date TEXT NOT NULL,
            credential_id TEXT,
            verify_url TEXT,
            image TEXT NOT NULL,
            category TEXT
        );

        CREATE TABLE IF NOT EXISTS experience (
            id TEXT PRIMARY KEY,
            company TEXT NOT NULL,
            position TEXT NOT NULL,
            location TEXT,
            start_date TEXT NOT NULL,
            end_date TEXT,
            description TEXT NOT NULL,
            current INTEGER NOT NULL DEFAULT 0,
            company_logo TEXT
        );

        CREATE TABLE IF NOT EXISTS testimonials (
            id TEXT PRIMARY KEY,
            client_name TEXT NOT NULL,
            client_photo TEXT,
            client_position TEXT NOT NULL,
            client_company TEXT NOT NULL,
            testimonial TEXT NOT NULL,
            rating INTEGER NOT NULL,
            linkedin_url TEXT,
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS contact_messages (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            subject TEXT NOT NULL,
            message TEXT NOT NULL,
            attachment TEXT,
            status TEXT NOT NULL DEFAULT 'new',
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS newsletter_subscriptions (
            id TEXT PRIMARY KEY,
            email TEXT NOT NULL UNIQUE,
            subscribed INTEGER NOT NULL DEFAULT 1,
            created_at TEXT NOT NULL
        );
        """,
    ),
    # Migration 2: the site owner is the user held in a fixed slot
    (
        2,
        """
        CREATE TABLE IF NOT EXISTS site_owner (
            slot TEXT PRIMARY KEY CHECK (slot = 'owner'),
            user_id TEXT NOT NULL REFERENCES users(id)
        );
        """,
    ),
    # Migration 3: indices for the listing queries
    (
        3,
        """
        CREATE INDEX IF NOT EXISTS idx_projects_created_at ON projects(created_at);
        CREATE INDEX IF NOT EXISTS idx_certificates_issue_date ON certificates(issue_date);
        CREATE INDEX IF NOT EXISTS idx_experience_start_date ON experience(start_date);
        CREATE INDEX IF NOT EXISTS idx_contact_messages_created_at ON contact_messages(created_at);
        """,
    ),
]


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries of
    ``MIGRATIONS``.  Safe to call repeatedly.
    """
    with transaction("init_db") as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) AS version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
                logger.info("Applied migration %s", version)
