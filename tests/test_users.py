"""Tests for the site owner profile service."""
import asyncio
import sqlite3

import pytest

from portfolio_api.app.core.db import get_connection
from portfolio_api.app.core.errors import ConflictError
from portfolio_api.app.schemas.user import UserCreate
from portfolio_api.app.services.user_service import UserService


def test_create_user_returns_stored_record(user_data):
    user = asyncio.run(UserService.create_user(UserCreate(**user_data)))

    assert user.id
    assert user.name == "Jane Doe"
    assert user.email == "jane@example.com"
    assert user.social_links == {"github": "https://github.com/jane", "x": "https://x.com/jane"}
    assert user.resume is None
    assert user.created_at is not None


def test_duplicate_email_conflicts(user_data):
    asyncio.run(UserService.create_user(UserCreate(**user_data)))
    user_data["name"] = "Someone Else"

    with pytest.raises(ConflictError):
        asyncio.run(UserService.create_user(UserCreate(**user_data)))

    conn = get_connection()
    try:
        count = conn.execute(
            "SELECT COUNT(*) FROM users WHERE email = ?", ("jane@example.com",)
        ).fetchone()[0]
    finally:
        conn.close()
    assert count == 1


def test_get_user_on_empty_store_returns_none():
    assert asyncio.run(UserService.get_user()) is None


def test_get_user_returns_first_created(user_data):
    first = asyncio.run(UserService.create_user(UserCreate(**user_data)))
    user_data.update(name="Second", email="second@example.com")
    second = asyncio.run(UserService.create_user(UserCreate(**user_data)))

    owner = asyncio.run(UserService.get_user())

    assert second.id != first.id
    assert owner.id == first.id
    assert owner.social_links == first.social_links


def test_failed_create_does_not_claim_owner_slot(user_data):
    asyncio.run(UserService.create_user(UserCreate(**user_data)))
    with pytest.raises(ConflictError):
        asyncio.run(UserService.create_user(UserCreate(**user_data)))

    conn = get_connection()
    try:
        rows = conn.execute("SELECT * FROM site_owner").fetchall()
    finally:
        conn.close()
    assert len(rows) == 1


def test_owner_slot_is_single_row():
    conn = get_connection()
    try:
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute("INSERT INTO site_owner (slot, user_id) VALUES ('other', 'x')")
    finally:
        conn.close()


def test_email_domain_case_is_preserved(user_data):
    user_data["email"] = "jane@Example.com"
    first = asyncio.run(UserService.create_user(UserCreate(**user_data)))
    user_data["email"] = "jane@example.com"
    second = asyncio.run(UserService.create_user(UserCreate(**user_data)))

    assert first.email == "jane@Example.com"
    assert second.email == "jane@example.com"
    assert first.id != second.id
