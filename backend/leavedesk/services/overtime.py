# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlmodel import col

from leavedesk.exceptions import AuthorizationError, NotFoundError, StateError, ValidationError
from leavedesk.models.enums import RequestStatus
from leavedesk.models.request import OvertimeRequest
from leavedesk.policy import can_decide
from leavedesk.schemas.overtime import MIN_OVERTIME_HOURS, OvertimeRequestResponse
from leavedesk.services.account import get_active_account
from leavedesk.services.notification import MANAGE_REQUESTS_LINK, notify_managers, try_notify

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leavedesk.schemas.auth import AuthenticatedCaller
    from leavedesk.schemas.leave import DecisionPayload
    from leavedesk.schemas.overtime import CreateOvertimePayload

logger = logging.getLogger(__name__)


def _build_overtime_response(overtime: OvertimeRequest) -> OvertimeRequestResponse:
    return OvertimeRequestResponse(
        id=overtime.id,
        user_id=overtime.user_id,
        date=overtime.date,
        hours=overtime.hours,
        reason=overtime.reason,
        status=RequestStatus(overtime.status),
        approved_by=overtime.approved_by,
        denied_by=overtime.denied_by,
        created_at=overtime.created_at,
    )


def _format_hours(hours: float) -> str:
    return f"{hours:g}"


async def create_overtime_request(
    session: AsyncSession,
    caller: AuthenticatedCaller,
    payload: CreateOvertimePayload,
) -> OvertimeRequestResponse:
    """Create a PENDING overtime request and notify managers."""
    account = await get_active_account(session, caller.account_id)

    if payload.hours < MIN_OVERTIME_HOURS:
        raise ValidationError(f"Hours must be at least {_format_hours(MIN_OVERTIME_HOURS)}.")
    if not payload.reason.strip():
        raise ValidationError("Reason is required")

    overtime = OvertimeRequest(
        user_id=account.id,
        date=payload.date,
        hours=payload.hours,
        reason=payload.reason,
        status=RequestStatus.PENDING.value,
    )
    session.add(overtime)
    requester_name = account.name
    await session.commit()

    response = _build_overtime_response(overtime)
    logger.info("Overtime request %s created by %s (%s h)", overtime.id, caller.account_id, payload.hours)

    await notify_managers(
        session,
        message=f"{requester_name} has submitted a new overtime request.",
        link=MANAGE_REQUESTS_LINK,
        created_by=caller.account_id,
    )
    return response


async def decide_overtime_request(
    session: AsyncSession,
    caller: AuthenticatedCaller,
    overtime_id: uuid.UUID,
    payload: DecisionPayload,
) -> OvertimeRequestResponse:
    """Approve or deny a PENDING overtime request. No balance is touched."""
    if not can_decide(caller.role):
        raise AuthorizationError("Forbidden")

    result = await session.execute(
        select(OvertimeRequest).where(col(OvertimeRequest.id) == overtime_id).with_for_update()
    )
    overtime = result.scalar_one_or_none()
    if overtime is None:
        raise NotFoundError("Overtime request not found")
    if overtime.status != RequestStatus.PENDING.value:
        raise StateError(f"This request has already been {overtime.status.lower()}.")

    decision = RequestStatus(payload.status)
    overtime.status = decision.value
    if decision == RequestStatus.APPROVED:
        overtime.approved_by = caller.account_id
    else:
        overtime.denied_by = caller.account_id
    await session.commit()

    response = _build_overtime_response(overtime)
    logger.info("Overtime request %s %s by %s", overtime.id, decision.value.lower(), caller.account_id)

    await try_notify(
        session,
        user_id=response.user_id,
        message=(
            f"Your overtime request for {_format_hours(response.hours)} hours "
            f"has been {decision.value.lower()}."
        ),
        link="/overtime",
        created_by=caller.account_id,
    )
    return response


async def list_my_overtime_requests(
    session: AsyncSession,
    caller: AuthenticatedCaller,
) -> list[OvertimeRequestResponse]:
    result = await session.execute(
        select(OvertimeRequest)
        .where(col(OvertimeRequest.user_id) == caller.account_id)
        .order_by(col(OvertimeRequest.created_at).desc())
    )
    return [_build_overtime_response(r) for r in result.scalars().all()]
