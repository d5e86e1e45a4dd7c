"""Tests for the public verification endpoint behind document QR codes."""

from __future__ import annotations

import uuid
from datetime import date
from typing import TYPE_CHECKING

import pytest
from conftest import make_account

from leavedesk.models.enums import LeaveType, RequestStatus
from leavedesk.models.request import LeaveRequest

if TYPE_CHECKING:
    from httpx import AsyncClient

    from leavedesk.db import Database


async def _leave(database: Database, status: RequestStatus) -> LeaveRequest:
    owner = await make_account(database, name="Ada Lovelace")
    leave = LeaveRequest(
        user_id=owner.id,
        leave_type=LeaveType.ANNUAL.value,
        start_date=date(2024, 6, 1),
        end_date=date(2024, 6, 5),
        reason="Private reason",
        status=status.value,
    )
    async with database.session() as session:
        session.add(leave)
        await session.commit()
    return leave


async def test_approved_request_exposes_only_public_fields(async_client: AsyncClient, database: Database) -> None:
    leave = await _leave(database, RequestStatus.APPROVED)
    resp = await async_client.get(f"/verify/{leave.id}")
    assert resp.status_code == 200
    assert resp.json() == {
        "id": str(leave.id),
        "leave_type": "ANNUAL",
        "start_date": "2024-06-01",
        "end_date": "2024-06-05",
        "status": "APPROVED",
        "owner_name": "Ada Lovelace",
    }


@pytest.mark.parametrize("status", [RequestStatus.PENDING, RequestStatus.DENIED])
async def test_undecided_or_denied_requests_are_not_found(
    async_client: AsyncClient, database: Database, status: RequestStatus
) -> None:
    leave = await _leave(database, status)
    resp = await async_client.get(f"/verify/{leave.id}")
    assert resp.status_code == 404
    assert "Private reason" not in resp.text


async def test_unknown_id_is_not_found(async_client: AsyncClient) -> None:
    resp = await async_client.get(f"/verify/{uuid.uuid4()}")
    assert resp.status_code == 404
