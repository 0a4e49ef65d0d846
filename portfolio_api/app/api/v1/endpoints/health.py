"""
Liveness endpoint for API v1.
"""

from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthcheck", operation_id="healthcheck")
async def healthcheck() -> Dict[str, str]:
    """Report that the service is up, with the current server time."""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
