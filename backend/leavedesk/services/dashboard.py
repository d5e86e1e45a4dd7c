from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlmodel import col

from leavedesk.exceptions import NotFoundError
from leavedesk.models.account import Account
from leavedesk.models.enums import RequestStatus
from leavedesk.models.request import LeaveRequest
from leavedesk.policy import can_decide
from leavedesk.schemas.dashboard import EmployeeSummary, ManagerSummary
from leavedesk.services.account import get_account
from leavedesk.services.leave import build_leave_response

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leavedesk.schemas.auth import AuthenticatedCaller


async def _count(session: AsyncSession, *filters: object) -> int:
    result = await session.execute(select(func.count()).select_from(LeaveRequest).where(*filters))  # type: ignore[arg-type]
    return int(result.scalar_one())


async def dashboard_summary(
    session: AsyncSession,
    caller: AuthenticatedCaller,
    today: date | None = None,
) -> ManagerSummary | EmployeeSummary:
    """Role-tailored summary: system-wide counts for deciders, personal figures otherwise."""
    account = await get_account(session, caller.account_id)
    if account is None:
        raise NotFoundError("User not found")
    today = today or date.today()

    if can_decide(caller.role):
        inactive = await session.execute(
            select(func.count()).select_from(Account).where(col(Account.is_active).is_(False))
        )
        return ManagerSummary(
            role=caller.role,
            pending_leave_requests=await _count(session, col(LeaveRequest.status) == RequestStatus.PENDING.value),
            inactive_users=int(inactive.scalar_one()),
            users_on_leave_today=await _count(
                session,
                col(LeaveRequest.status) == RequestStatus.APPROVED.value,
                col(LeaveRequest.start_date) <= today,
                col(LeaveRequest.end_date) >= today,
            ),
        )

    upcoming = await session.execute(
        select(LeaveRequest)
        .where(
            col(LeaveRequest.user_id) == account.id,
            col(LeaveRequest.status) == RequestStatus.APPROVED.value,
            col(LeaveRequest.start_date) >= today,
        )
        .order_by(col(LeaveRequest.start_date).asc())
        .limit(1)
    )
    upcoming_leave = upcoming.scalar_one_or_none()
    return EmployeeSummary(
        role=caller.role,
        upcoming_leave=build_leave_response(upcoming_leave) if upcoming_leave is not None else None,
        pending_requests_count=await _count(
            session,
            col(LeaveRequest.user_id) == account.id,
            col(LeaveRequest.status) == RequestStatus.PENDING.value,
        ),
        annual_leave_balance=account.annual_leave_balance,
        sick_leave_balance=account.sick_leave_balance,
    )
