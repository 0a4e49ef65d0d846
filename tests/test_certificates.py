"""Tests for the certificate service."""
import asyncio
from datetime import datetime, timedelta, timezone

from portfolio_api.app.schemas.certificate import CertificateCreate, CertificateQuery
from portfolio_api.app.services.certificate_service import CertificateService


def add_certificate(title, issue_date, category=None):
    return asyncio.run(
        CertificateService.create_certificate(
            CertificateCreate(
                title=title,
                issuer="Issuer",
                issue_date=issue_date,
                credential_id=None,
                verify_url="https://verify.example.com/abc",
                image="https://example.com/cert.png",
                category=category,
            )
        )
    )


def test_create_certificate_round_trips_date():
    cert = add_certificate("Cloud", datetime(2023, 5, 17, 9, 30))

    assert cert.id
    assert cert.issue_date == datetime(2023, 5, 17, 9, 30, tzinfo=timezone.utc)
    assert cert.verify_url == "https://verify.example.com/abc"


def test_aware_dates_keep_their_instant():
    plus_two = timezone(timedelta(hours=2))
    issued = datetime(2023, 5, 17, 12, 0, tzinfo=plus_two)
    cert = add_certificate("Cloud", issued)

    assert cert.issue_date == issued
    assert cert.issue_date.utcoffset() == timedelta(0)


def test_list_certificates_newest_issue_first():
    add_certificate("2021", datetime(2021, 1, 1))
    add_certificate("2023", datetime(2023, 1, 1))
    add_certificate("2022", datetime(2022, 1, 1))

    certs = asyncio.run(CertificateService.list_certificates())

    assert [c.title for c in certs] == ["2023", "2022", "2021"]


def test_list_certificates_by_category():
    add_certificate("AWS", datetime(2021, 1, 1), category="Cloud")
    add_certificate("Scrum", datetime(2022, 1, 1), category="Process")
    add_certificate("Unfiled", datetime(2023, 1, 1))

    certs = asyncio.run(CertificateService.list_certificates(CertificateQuery(category="Cloud")))

    assert [c.title for c in certs] == ["AWS"]
