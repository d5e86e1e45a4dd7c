"""Tests for registration, login, profile and user management endpoints."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from conftest import DEFAULT_PASSWORD, auth_headers, fetch, make_account, notifications_for

from leavedesk.models.account import Account
from leavedesk.models.enums import Gender, Role
from leavedesk.security import create_access_token
from leavedesk.services.notification import MANAGE_USERS_LINK

if TYPE_CHECKING:
    from httpx import AsyncClient

    from leavedesk.db import Database


def _registration(email: str = "new.hire@example.com", **overrides: object) -> dict[str, object]:
    body: dict[str, object] = {
        "email": email,
        "name": "New Hire",
        "password": "a-long-password",
        "date_of_birth": "1994-03-12",
        "gender": "MALE",
    }
    body.update(overrides)
    return body


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


async def test_register_creates_inactive_account(async_client: AsyncClient, database: Database) -> None:
    resp = await async_client.post("/auth/register", json=_registration())
    assert resp.status_code == 201
    data = resp.json()
    assert data["is_active"] is False
    assert data["role"] == "EMPLOYEE"
    assert "hashed_password" not in data

    account = await fetch(database, Account, uuid.UUID(data["id"]))
    assert account.annual_leave_balance == 25
    assert account.hashed_password != "a-long-password"


async def test_register_notifies_active_managers_only(async_client: AsyncClient, database: Database) -> None:
    hr = await make_account(database, name="HR", role=Role.HR)
    admin = await make_account(database, name="Admin", role=Role.ADMIN)
    dormant_hr = await make_account(database, name="Dormant", role=Role.HR, is_active=False)
    employee = await make_account(database, name="Peer")

    resp = await async_client.post("/auth/register", json=_registration())
    assert resp.status_code == 201

    for manager in (hr, admin):
        notes = await notifications_for(database, manager.id)
        assert len(notes) == 1
        assert notes[0].message == "New user registered: New Hire. Please review and activate their account."
        assert notes[0].link == MANAGE_USERS_LINK
    assert await notifications_for(database, dormant_hr.id) == []
    assert await notifications_for(database, employee.id) == []


async def test_register_duplicate_email_conflicts(async_client: AsyncClient, database: Database) -> None:
    await make_account(database, email="taken@example.com")
    resp = await async_client.post("/auth/register", json=_registration("TAKEN@example.com"))
    assert resp.status_code == 409
    assert resp.json()["detail"] == "Email already in use"


async def test_register_rejects_short_password(async_client: AsyncClient) -> None:
    resp = await async_client.post("/auth/register", json=_registration(password="short"))
    assert resp.status_code == 422
    assert resp.json()["error"] == "ValidationError"


# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------


async def test_login_returns_usable_token(async_client: AsyncClient, database: Database) -> None:
    account = await make_account(database, email="worker@example.com", name="Worker")
    resp = await async_client.post("/auth/login", json={"email": "worker@example.com", "password": DEFAULT_PASSWORD})
    assert resp.status_code == 200
    token = resp.json()["access_token"]
    assert resp.json()["token_type"] == "bearer"

    profile = await async_client.get("/profile", headers={"Authorization": f"Bearer {token}"})
    assert profile.status_code == 200
    assert profile.json()["id"] == str(account.id)


async def test_login_inactive_account_rejected(async_client: AsyncClient, database: Database) -> None:
    await make_account(database, email="pending@example.com", is_active=False)
    resp = await async_client.post("/auth/login", json={"email": "pending@example.com", "password": DEFAULT_PASSWORD})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid credentials or account not activated."


async def test_login_wrong_password_rejected(async_client: AsyncClient, database: Database) -> None:
    await make_account(database, email="worker@example.com")
    resp = await async_client.post("/auth/login", json={"email": "worker@example.com", "password": "not-it-at-all"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid credentials"


async def test_missing_token_is_unauthenticated(async_client: AsyncClient) -> None:
    resp = await async_client.get("/profile")
    assert resp.status_code == 401
    assert resp.json()["error"] == "AuthenticationError"


async def test_garbage_token_is_unauthenticated(async_client: AsyncClient) -> None:
    resp = await async_client.get("/profile", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


async def test_profile_shows_balances(async_client: AsyncClient, database: Database) -> None:
    account = await make_account(database, gender=Gender.MALE, sick_leave_balance=7)
    resp = await async_client.get("/profile", headers=auth_headers(account))
    data = resp.json()
    assert data["gender"] == "MALE"
    assert data["annual_leave_balance"] == 25
    assert data["sick_leave_balance"] == 7


async def test_update_bio(async_client: AsyncClient, database: Database) -> None:
    account = await make_account(database)
    resp = await async_client.patch("/profile", json={"bio": "Likes spreadsheets"}, headers=auth_headers(account))
    assert resp.status_code == 200
    assert resp.json()["bio"] == "Likes spreadsheets"
    assert (await fetch(database, Account, account.id)).bio == "Likes spreadsheets"


# ---------------------------------------------------------------------------
# User management
# ---------------------------------------------------------------------------


async def test_list_users_requires_manager(async_client: AsyncClient, database: Database) -> None:
    employee = await make_account(database)
    resp = await async_client.get("/users", headers=auth_headers(employee))
    assert resp.status_code == 403


async def test_hr_lists_every_account(async_client: AsyncClient, database: Database) -> None:
    hr = await make_account(database, role=Role.HR)
    await make_account(database, is_active=False)
    resp = await async_client.get("/users", headers=auth_headers(hr))
    assert resp.status_code == 200
    assert len(resp.json()) == 2


async def test_admin_activates_and_promotes(async_client: AsyncClient, database: Database) -> None:
    admin = await make_account(database, role=Role.ADMIN)
    pending = await make_account(database, is_active=False)

    resp = await async_client.patch(
        f"/users/{pending.id}", json={"is_active": True, "role": "HR"}, headers=auth_headers(admin)
    )
    assert resp.status_code == 200
    stored = await fetch(database, Account, pending.id)
    assert stored.is_active is True
    assert stored.role == Role.HR
    assert stored.name == pending.name


async def test_update_unknown_user_is_404(async_client: AsyncClient, database: Database) -> None:

    admin = await make_account(database, role=Role.ADMIN)
    resp = await async_client.patch(f"/users/{uuid.uuid4()}", json={"is_active": True}, headers=auth_headers(admin))
    assert resp.status_code == 404


async def test_employee_cannot_update_users(async_client: AsyncClient, database: Database) -> None:
    employee = await make_account(database)
    other = await make_account(database, is_active=False)
    resp = await async_client.patch(f"/users/{other.id}", json={"is_active": True}, headers=auth_headers(employee))
    assert resp.status_code == 403
    assert (await fetch(database, Account, other.id)).is_active is False


async def test_token_for_deleted_or_unknown_account_rejected(async_client: AsyncClient) -> None:
    token = create_access_token(uuid.uuid4(), Role.ADMIN)
    resp = await async_client.get("/users", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


# ---------------------------------------------------------------------------
# Password length
# ---------------------------------------------------------------------------


async def test_register_rejects_password_over_72_bytes(async_client: AsyncClient, database: Database) -> None:
    resp = await async_client.post("/auth/register", json=_registration(password="a" * 80))
    assert resp.status_code == 422
    assert resp.json()["error"] == "ValidationError"


async def test_register_accepts_72_byte_password(async_client: AsyncClient) -> None:
    resp = await async_client.post("/auth/register", json=_registration(password="a" * 72))
    assert resp.status_code == 201


async def test_login_with_over_long_password_is_plain_failure(async_client: AsyncClient, database: Database) -> None:
    await make_account(database, email="worker@example.com")
    resp = await async_client.post("/auth/login", json={"email": "worker@example.com", "password": "a" * 100})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid credentials"
