from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from conftest import auth_headers, caller_for, make_account

from leavedesk.models.enums import LeaveType, RequestStatus, Role
from leavedesk.models.request import LeaveRequest
from leavedesk.schemas.dashboard import EmployeeSummary, ManagerSummary
from leavedesk.services.dashboard import dashboard_summary

if TYPE_CHECKING:
    import uuid

    from httpx import AsyncClient

    from leavedesk.db import Database

TODAY = date(2024, 6, 10)


def _leave(user_id: uuid.UUID, start: date, end: date, status: RequestStatus) -> LeaveRequest:
    return LeaveRequest(
        user_id=user_id,
        leave_type=LeaveType.ANNUAL.value,
        start_date=start,
        end_date=end,
        reason="Break",
        status=status.value,
    )


async def test_manager_summary_counts(database: Database) -> None:
    hr = await make_account(database, role=Role.HR)
    away = await make_account(database)
    await make_account(database, is_active=False)
    async with database.session() as session:
        session.add_all(
            [
                _leave(away.id, date(2024, 6, 8), date(2024, 6, 12), RequestStatus.APPROVED),
                _leave(away.id, date(2024, 7, 1), date(2024, 7, 2), RequestStatus.PENDING),
                _leave(hr.id, date(2024, 6, 10), date(2024, 6, 10), RequestStatus.DENIED),
            ]
        )
        await session.commit()

    async with database.session() as session:
        summary = await dashboard_summary(session, caller_for(hr), today=TODAY)
    assert isinstance(summary, ManagerSummary)
    assert summary.pending_leave_requests == 1
    assert summary.inactive_users == 1
    assert summary.users_on_leave_today == 1


async def test_employee_summary(database: Database) -> None:
    employee = await make_account(database, annual_leave_balance=18, sick_leave_balance=9)
    async with database.session() as session:
        session.add_all(
            [
                _leave(employee.id, date(2024, 8, 1), date(2024, 8, 2), RequestStatus.APPROVED),
                _leave(employee.id, date(2024, 7, 1), date(2024, 7, 3), RequestStatus.APPROVED),
                _leave(employee.id, date(2024, 5, 1), date(2024, 5, 3), RequestStatus.APPROVED),
                _leave(employee.id, date(2024, 9, 1), date(2024, 9, 3), RequestStatus.PENDING),
            ]
        )
        await session.commit()

    async with database.session() as session:
        summary = await dashboard_summary(session, caller_for(employee), today=TODAY)
    assert isinstance(summary, EmployeeSummary)
    assert summary.upcoming_leave is not None
    assert summary.upcoming_leave.start_date == date(2024, 7, 1)
    assert summary.pending_requests_count == 1
    assert summary.annual_leave_balance == 18
    assert summary.sick_leave_balance == 9


async def test_dashboard_endpoint_picks_shape_by_role(async_client: AsyncClient, database: Database) -> None:
    admin = await make_account(database, role=Role.ADMIN)
    employee = await make_account(database)

    manager_view = await async_client.get("/dashboard/summary", headers=auth_headers(admin))
    assert manager_view.json()["kind"] == "manager"

    employee_view = await async_client.get("/dashboard/summary", headers=auth_headers(employee))
    data = employee_view.json()
    assert data["kind"] == "employee"
    assert data["upcoming_leave"] is None
    assert data["annual_leave_balance"] == 25
