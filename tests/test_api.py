"""Tests for the HTTP surface of API v1."""
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import TypeAdapter

API = "/api/v1"


def as_datetime(value):
    return TypeAdapter(datetime).validate_python(value)


def test_healthcheck(client):
    response = client.get(f"{API}/healthcheck")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert datetime.fromisoformat(body["timestamp"])


def test_operations_are_named(client):
    schema = client.get("/openapi.json").json()
    operation_ids = {
        operation["operationId"]
        for path in schema["paths"].values()
        for operation in path.values()
    }

    assert operation_ids == {
        "healthcheck",
        "getUser",
        "createUser",
        "getSkills",
        "createSkill",
        "getProjects",
        "createProject",
        "updateProject",
        "getCertificates",
        "createCertificate",
        "getExperience",
        "createExperience",
        "getTestimonials",
        "createTestimonial",
        "getContactMessages",
        "createContactMessage",
        "getNewsletterSubscriptions",
        "createNewsletterSubscription",
    }


def test_get_user_before_creation_is_null(client):
    response = client.get(f"{API}/user")

    assert response.status_code == 200
    assert response.json() is None


def test_create_and_get_user(client, user_data):
    created = client.post(f"{API}/user", json=user_data)

    assert created.status_code == 201
    body = created.json()
    assert body["id"]
    assert body["social_links"] == user_data["social_links"]
    assert client.get(f"{API}/user").json() == body


def test_duplicate_user_is_tagged_conflict(client, user_data):
    client.post(f"{API}/user", json=user_data)

    response = client.post(f"{API}/user", json=user_data)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


def test_invalid_body_is_tagged_validation_error(client):
    response = client.post(
        f"{API}/skills", json={"name": "Go", "category": "Backend", "level": 101}
    )

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert [f["field"] for f in error["fields"]] == ["level"]


def test_skills_round_trip(client):
    client.post(f"{API}/skills", json={"name": "Go", "category": "Backend", "level": 70})
    client.post(f"{API}/skills", json={"name": "CSS", "category": "Frontend", "level": 60})

    response = client.get(f"{API}/skills", params={"category": "Backend"})

    assert response.status_code == 200
    assert [s["name"] for s in response.json()] == ["Go"]


def test_projects_flow(client, project_data):
    created = client.post(f"{API}/projects", json=dict(project_data, featured=True))
    assert created.status_code == 201
    project_id = created.json()["id"]

    listed = client.get(f"{API}/projects", params={"featured": "true"}).json()
    assert [p["id"] for p in listed] == [project_id]
    assert listed[0]["view_count"] == 1

    updated = client.patch(f"{API}/projects", json={"id": project_id, "title": "Renamed"})
    assert updated.status_code == 200
    assert updated.json()["title"] == "Renamed"
    assert updated.json()["view_count"] == 1
    assert updated.json()["tech_stack"] == project_data["tech_stack"]


def test_update_unknown_project_is_tagged_not_found(client):
    response = client.patch(f"{API}/projects", json={"id": "missing", "title": "X"})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.parametrize(
    "params",
    [{"limit": 0}, {"offset": -1}, {"limit": "many"}, {"limit": 10**20}, {"offset": 10**20}],
)
def test_bad_project_pagination_rejected(client, params):
    response = client.get(f"{API}/projects", params=params)

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.parametrize(
    "params", [{"status": "bogus"}, {"limit": 0}, {"offset": -1}, {"limit": 10**20}]
)
def test_bad_contact_query_rejected(client, params):
    response = client.get(f"{API}/contact", params=params)

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_contact_flow(client, contact_data):
    created = client.post(f"{API}/contact", json=contact_data)
    assert created.status_code == 201
    assert created.json()["status"] == "new"

    inbox = client.get(f"{API}/contact", params={"status": "new"}).json()
    assert [m["id"] for m in inbox] == [created.json()["id"]]


def test_certificates_and_experience_serialise_dates(client):
    cert = client.post(
        f"{API}/certificates",
        json={
            "title": "Cloud",
            "issuer": "Vendor",
            "issue_date": "2023-05-17T09:30:00",
            "credential_id": "ABC-123",
            "verify_url": None,
            "image": "https://example.com/cert.png",
            "category": "Cloud",
        },
    )
    assert cert.status_code == 201
    assert as_datetime(cert.json()["issue_date"]) == datetime(2023, 5, 17, 9, 30, tzinfo=timezone.utc)

    exp = client.post(
        f"{API}/experience",
        json={
            "company": "Acme",
            "position": "Engineer",
            "location": "Remote",
            "start_date": "2022-01-01T00:00:00",
            "end_date": None,
            "description": ["Shipped the API"],
            "current": True,
            "company_logo": None,
        },
    )
    assert exp.status_code == 201

    listed = client.get(f"{API}/experience").json()
    assert as_datetime(listed[0]["start_date"]) == datetime(2022, 1, 1, tzinfo=timezone.utc)
    assert listed[0]["description"] == ["Shipped the API"]
    assert client.get(f"{API}/certificates", params={"category": "Cloud"}).json()[0]["title"] == "Cloud"


def test_testimonial_rating_out_of_range(client, testimonial_data):
    testimonial_data["rating"] = 6

    response = client.post(f"{API}/testimonials", json=testimonial_data)

    assert response.status_code == 422


def test_testimonials_flow(client, testimonial_data):
    assert client.post(f"{API}/testimonials", json=testimonial_data).status_code == 201
    assert len(client.get(f"{API}/testimonials").json()) == 1


def test_newsletter_is_idempotent(client):
    first = client.post(f"{API}/newsletter", json={"email": "a@b.com"})
    second = client.post(f"{API}/newsletter", json={"email": "a@b.com"})

    assert first.status_code == 201
    assert second.json()["id"] == first.json()["id"]
    assert len(client.get(f"{API}/newsletter").json()) == 1
    assert len(client.get(f"{API}/newsletter", params={"active_only": "false"}).json()) == 1


def test_offset_dates_round_trip_as_the_same_instant(client):
    issued = "2024-01-01T00:00:00+02:00"
    response = client.post(
        f"{API}/certificates",
        json={
            "title": "Cloud",
            "issuer": "Vendor",
            "issue_date": issued,
            "image": "https://example.com/cert.png",
        },
    )

    assert response.status_code == 201
    returned = as_datetime(response.json()["issue_date"])
    assert returned.utcoffset() == timedelta(0)
    assert returned == datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=2)))


def test_created_user_echoes_email(client, user_data):
    user_data["email"] = "jane@Example.com"

    created = client.post(f"{API}/user", json=user_data)
    other = client.post(f"{API}/user", json=dict(user_data, email="jane@example.com"))

    assert created.json()["email"] == "jane@Example.com"
    assert other.status_code == 201
