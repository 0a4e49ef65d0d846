"""Test configuration and fixtures."""
import pytest
from fastapi.testclient import TestClient

from portfolio_api.app.core.config import settings
from portfolio_api.app.core.db import init_db
from portfolio_api.app.main import app


@pytest.fixture(autouse=True)
def temp_db(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file for every test."""
    db_path = tmp_path / "portfolio.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    yield db_path


@pytest.fixture
def client(temp_db):
    """Create a test client; entering it runs the startup hook."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_data():
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "bio": "Full-stack developer",
        "avatar": "https://example.com/avatar.png",
        "resume": None,
        "social_links": {"github": "https://github.com/jane", "x": "https://x.com/jane"},
    }


@pytest.fixture
def project_data():
    return {
        "title": "Portfolio site",
        "description": "The site you are looking at",
        "thumbnail": "https://example.com/thumb.jpg",
        "images": ["https://example.com/img1.jpg", "https://example.com/img2.jpg"],
        "tech_stack": ["React", "FastAPI"],
        "live_url": "https://example.com/live",
        "github_url": "https://github.com/jane/portfolio",
    }


@pytest.fixture
def testimonial_data():
    return {
        "client_name": "John Smith",
        "client_photo": None,
        "client_position": "CTO",
        "client_company": "Acme",
        "testimonial": "Delivered on time and on budget.",
        "rating": 5,
        "linkedin_url": "https://www.linkedin.com/in/johnsmith",
    }


@pytest.fixture
def contact_data():
    return {
        "name": "Alice",
        "email": "alice@example.com",
        "subject": "Hello",
        "message": "I would like to work with you.",
        "attachment": None,
    }
