"""
Business logic for certificates.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import new_id, to_db_timestamp, transaction
from ..schemas.certificate import CertificateCreate, CertificateQuery, CertificateRead

logger = logging.getLogger(__name__)


class CertificateService:
    """Service for managing certificates."""

    @classmethod
    async def create_certificate(cls, data: CertificateCreate) -> CertificateRead:
        certificate_id = new_id()
        with transaction("create certificate") as cursor:
            cursor.execute(
                """
                INSERT INTO certificates (id, title, issuer, issue_date, credential_id, verify_url, image, category)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    certificate_id,
                    data.title,
                    data.issuer,
                    to_db_timestamp(data.issue_date),
                    data.credential_id,
                    data.verify_url,
                    data.image,
                    data.category,
                ),
            )
            row = cursor.execute(
                "SELECT * FROM certificates WHERE id = ?", (certificate_id,)
            ).fetchone()
        logger.info("Created certificate %s (%s)", certificate_id, data.title)
        return cls._row_to_certificate_read(row)

    @classmethod
    async def list_certificates(cls, query: Optional[CertificateQuery] = None) -> List[CertificateRead]:
        """Return certificates, most recently issued first.

        ``category`` restricts the result to an exact category match.
        """
        query = query or CertificateQuery()
        sql = "SELECT * FROM certificates"
        params: list = []
        if query.category:
            sql += " WHERE category = ?"
            params.append(query.category)
        sql += " ORDER BY issue_date DESC, rowid DESC"
        with transaction("list certificates") as cursor:
            rows = cursor.execute(sql, tuple(params)).fetchall()
        return [cls._row_to_certificate_read(row) for row in rows]

    @staticmethod
    def _row_to_certificate_read(row: sqlite3.Row) -> CertificateRead:
        return CertificateRead(
            id=row["id"],
            title=row["title"],
            issuer=row["issuer"],
            issue_date=row["issue_date"],
            credential_id=row["credential_id"],
            verify_url=row["verify_url"],
            image=row["image"],
            category=row["category"],
        )
