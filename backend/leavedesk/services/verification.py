# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlmodel import col

from leavedesk.exceptions import NotFoundError
from leavedesk.models.account import Account
from leavedesk.models.enums import RequestStatus
from leavedesk.models.request import LeaveRequest
from leavedesk.schemas.verification import VerificationResponse

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


async def get_approved_request_for_verification(
    session: AsyncSession,
    leave_id: uuid.UUID,
) -> VerificationResponse:
    """Public lookup used by document QR codes.

    The status filter is part of the query so pending and denied requests
    are never loaded, not merely hidden.
    """
    result = await session.execute(
        select(
            col(LeaveRequest.id),
            col(LeaveRequest.leave_type),
            col(LeaveRequest.start_date),
            col(LeaveRequest.end_date),
            col(LeaveRequest.status),
            col(Account.name),
        )
        .join(Account, col(Account.id) == col(LeaveRequest.user_id))
        .where(
            col(LeaveRequest.id) == leave_id,
            col(LeaveRequest.status) == RequestStatus.APPROVED.value,
        )
    )
    row = result.one_or_none()
    if row is None:
        raise NotFoundError("Approved leave request not found")
    return VerificationResponse(
        id=row[0],
        leave_type=row[1],
        start_date=row[2],
        end_date=row[3],
        status=row[4],
        owner_name=row[5],
    )
