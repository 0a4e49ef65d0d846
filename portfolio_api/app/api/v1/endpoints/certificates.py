"""
Certificate endpoints for API v1.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, status

from portfolio_api.app.schemas.certificate import (
    CertificateCreate,
    CertificateQuery,
    CertificateRead,
)
from portfolio_api.app.schemas.common import parse_input
from portfolio_api.app.services.certificate_service import CertificateService

router = APIRouter()


@router.get("", response_model=List[CertificateRead], operation_id="getCertificates")
async def list_certificates(category: Optional[str] = Query(None)) -> List[CertificateRead]:
    """List certificates, most recently issued first."""
    query = parse_input(CertificateQuery, category=category)
    return await CertificateService.list_certificates(query)


@router.post(
    "",
    response_model=CertificateRead,
    status_code=status.HTTP_201_CREATED,
    operation_id="createCertificate",
)
async def create_certificate(certificate_in: CertificateCreate) -> CertificateRead:
    return await CertificateService.create_certificate(certificate_in)
