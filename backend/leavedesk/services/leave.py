# ruff: noqa: TC003
from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlmodel import col

from leavedesk.config import get_settings
from leavedesk.exceptions import AuthorizationError, ConflictError, NotFoundError, StateError, ValidationError
from leavedesk.models.account import Account
from leavedesk.models.enums import BALANCE_FIELDS, Gender, LeaveType, RequestStatus, RequestType
from leavedesk.models.request import LeaveRequest, OvertimeRequest
from leavedesk.policy import can_decide
from leavedesk.schemas.leave import LeaveRequestResponse, RequestOverviewItem
from leavedesk.services.account import get_account, get_active_account
from leavedesk.services.document import (
    LeaveDocumentData,
    document_filename,
    get_document_generator,
)
from leavedesk.services.mailer import get_mailer, leave_approved_mail
from leavedesk.services.notification import MANAGE_REQUESTS_LINK, notify_managers, try_notify

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leavedesk.schemas.auth import AuthenticatedCaller
    from leavedesk.schemas.leave import CreateLeavePayload, DecisionPayload

logger = logging.getLogger(__name__)

_ACTIVE_STATUSES = [RequestStatus.PENDING.value, RequestStatus.APPROVED.value]

# Categories restricted to one gender.
_GENDER_RESTRICTIONS: dict[LeaveType, tuple[Gender, str]] = {
    LeaveType.MATERNITY: (Gender.FEMALE, "Maternity leave is only available for female employees."),
    LeaveType.PATERNITY: (Gender.MALE, "Paternity leave is only available for male employees."),
}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def build_leave_response(leave: LeaveRequest) -> LeaveRequestResponse:
    """Map a leave request model to its response schema."""
    return LeaveRequestResponse(
        id=leave.id,
        user_id=leave.user_id,
        leave_type=LeaveType(leave.leave_type),
        start_date=leave.start_date,
        end_date=leave.end_date,
        reason=leave.reason,
        status=RequestStatus(leave.status),
        approved_by=leave.approved_by,
        denied_by=leave.denied_by,
        created_at=leave.created_at,
    )


async def _get_leave_or_404(
    session: AsyncSession,
    leave_id: uuid.UUID,
    *,
    for_update: bool = False,
) -> LeaveRequest:
    query = select(LeaveRequest).where(col(LeaveRequest.id) == leave_id)
    if for_update:
        query = query.with_for_update()
    result = await session.execute(query)
    leave = result.scalar_one_or_none()
    if leave is None:
        raise NotFoundError("Leave request not found")
    return leave


async def _get_visible_leave(session: AsyncSession, caller: AuthenticatedCaller, leave_id: uuid.UUID) -> LeaveRequest:
    """Owners see their own requests, deciders see all; anyone else gets 404."""
    leave = await _get_leave_or_404(session, leave_id)
    if leave.user_id != caller.account_id and not can_decide(caller.role):
        raise NotFoundError("Leave request not found")
    return leave


def _check_gender_restriction(account: Account, leave_type: LeaveType) -> None:
    restriction = _GENDER_RESTRICTIONS.get(leave_type)
    if restriction is None:
        return
    required_gender, message = restriction
    if account.gender != required_gender:
        raise ValidationError(message)


async def _check_leave_overlap(
    session: AsyncSession,
    user_id: uuid.UUID,
    start_date: date,
    end_date: date,
) -> None:
    """Raise 409 if an active request overlaps the inclusive range.

    Active means PENDING or APPROVED. Inclusive ranges overlap when
    existing.start_date <= new.end_date AND existing.end_date >= new.start_date.
    """
    result = await session.execute(
        select(col(LeaveRequest.id))
        .where(
            col(LeaveRequest.user_id) == user_id,
            col(LeaveRequest.status).in_(_ACTIVE_STATUSES),
            col(LeaveRequest.start_date) <= end_date,
            col(LeaveRequest.end_date) >= start_date,
        )
        .limit(1)
    )
    if result.scalar_one_or_none() is not None:
        raise ConflictError("You already have a pending or approved request in this date range.")


def balance_field_for(leave_type: LeaveType) -> str | None:
    """Account attribute decremented when a request of this type is approved.

    Returns None for categories not listed in ``deductible_leave_types``.
    """
    if leave_type.value not in get_settings().deductible_leave_types:
        return None
    return BALANCE_FIELDS[leave_type]


async def _send_approval_document(data: LeaveDocumentData, email: str) -> None:
    """Render the approval PDF and mail it to the owner.

    Runs after the approval has committed; failures are logged only.
    """
    try:
        document = await asyncio.to_thread(get_document_generator().render, data)
        await get_mailer().send(
            leave_approved_mail(email, data.employee_name, data.leave_type, document, document_filename(data.id))
        )
    except Exception:
        logger.exception("Failed to deliver approval document for leave request %s", data.id)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


async def create_leave_request(
    session: AsyncSession,
    caller: AuthenticatedCaller,
    payload: CreateLeavePayload,
) -> LeaveRequestResponse:
    """Create a PENDING leave request for the caller.

    Flow:
    1. Lock the caller's account row (serializes concurrent creations).
    2. Validate dates, reason and gender-restricted categories.
    3. Reject overlaps with the caller's PENDING/APPROVED requests.
    4. Insert and commit.
    5. Notify managers (best-effort, after commit).
    """
    account = await get_active_account(session, caller.account_id, for_update=True)

    if not payload.reason.strip():
        raise ValidationError("Reason is required")
    if payload.end_date < payload.start_date:
        raise ValidationError("End date must not be before start date")
    _check_gender_restriction(account, payload.leave_type)

    await _check_leave_overlap(session, account.id, payload.start_date, payload.end_date)

    leave = LeaveRequest(
        user_id=account.id,
        leave_type=payload.leave_type.value,
        start_date=payload.start_date,
        end_date=payload.end_date,
        reason=payload.reason,
        status=RequestStatus.PENDING.value,
    )
    session.add(leave)
    requester_name = account.name
    await session.commit()

    response = build_leave_response(leave)
    logger.info("Leave request %s created by %s (%s)", leave.id, caller.account_id, payload.leave_type)

    await notify_managers(
        session,
        message=f"{requester_name} has submitted a new {payload.leave_type.value.lower()} leave request.",
        link=MANAGE_REQUESTS_LINK,
        created_by=caller.account_id,
    )
    return response


async def decide_leave_request(
    session: AsyncSession,
    caller: AuthenticatedCaller,
    leave_id: uuid.UUID,
    payload: DecisionPayload,
) -> LeaveRequestResponse:
    """Approve or deny a PENDING leave request.

    Approval decrements the owner's matching balance and flips the status in
    a single commit; either both land or neither does. The owner is then
    notified and, for approvals, sent the approval document.
    """
    if not can_decide(caller.role):
        raise AuthorizationError("Forbidden")

    decision = RequestStatus(payload.status)
    leave = await _get_leave_or_404(session, leave_id, for_update=True)
    if leave.status != RequestStatus.PENDING.value:
        raise StateError(f"This request has already been {leave.status.lower()}.")

    owner = await get_account(session, leave.user_id, for_update=True)
    if owner is None:
        raise NotFoundError("Leave request not found")

    document_data: LeaveDocumentData | None = None
    if decision == RequestStatus.APPROVED:
        approver = await get_account(session, caller.account_id)
        balance_field = balance_field_for(LeaveType(leave.leave_type))
        try:
            if balance_field is not None:
                setattr(owner, balance_field, getattr(owner, balance_field) - leave.days)
            leave.status = RequestStatus.APPROVED.value
            leave.approved_by = caller.account_id
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        document_data = LeaveDocumentData(
            id=leave.id,
            employee_name=owner.name,
            leave_type=leave.leave_type,
            start_date=leave.start_date,
            end_date=leave.end_date,
            reason=leave.reason,
            status=leave.status,
            approved_by_name=approver.name if approver is not None else None,
            created_at=leave.created_at,
        )
    else:
        leave.status = RequestStatus.DENIED.value
        leave.denied_by = caller.account_id
        await session.commit()

    response = build_leave_response(leave)
    owner_email = owner.email
    logger.info("Leave request %s %s by %s", leave.id, decision.value.lower(), caller.account_id)

    await try_notify(
        session,
        user_id=response.user_id,
        message=f"Your {response.leave_type.value.lower()} leave request has been {decision.value.lower()}.",
        link=f"/leave/{response.id}",
        created_by=caller.account_id,
    )
    if document_data is not None:
        await _send_approval_document(document_data, owner_email)
    return response


async def get_leave_request(
    session: AsyncSession,
    caller: AuthenticatedCaller,
    leave_id: uuid.UUID,
) -> LeaveRequestResponse:
    leave = await _get_visible_leave(session, caller, leave_id)
    return build_leave_response(leave)


async def get_leave_document(
    session: AsyncSession,
    caller: AuthenticatedCaller,
    leave_id: uuid.UUID,
) -> tuple[str, bytes]:
    """Render the approval document for an APPROVED request the caller can see."""
    leave = await _get_visible_leave(session, caller, leave_id)
    if leave.status != RequestStatus.APPROVED.value:
        raise StateError("Only approved requests have an approval document.")

    owner = await get_account(session, leave.user_id)
    approver = await get_account(session, leave.approved_by) if leave.approved_by is not None else None
    data = LeaveDocumentData(
        id=leave.id,
        employee_name=owner.name if owner is not None else "N/A",
        leave_type=leave.leave_type,
        start_date=leave.start_date,
        end_date=leave.end_date,
        reason=leave.reason,
        status=leave.status,
        approved_by_name=approver.name if approver is not None else None,
        created_at=leave.created_at,
    )
    content = await asyncio.to_thread(get_document_generator().render, data)
    return document_filename(leave.id), content


async def list_my_leave_requests(session: AsyncSession, caller: AuthenticatedCaller) -> list[LeaveRequestResponse]:
    """The caller's own leave requests, newest first."""
    result = await session.execute(
        select(LeaveRequest)
        .where(col(LeaveRequest.user_id) == caller.account_id)
        .order_by(col(LeaveRequest.created_at).desc())
    )
    return [build_leave_response(r) for r in result.scalars().all()]


async def list_all_requests(session: AsyncSession, caller: AuthenticatedCaller) -> list[RequestOverviewItem]:
    """Every leave and overtime request, merged and newest first (deciders only)."""
    if not can_decide(caller.role):
        raise AuthorizationError("Forbidden")

    leave_rows = await session.execute(
        select(LeaveRequest, col(Account.name)).join(Account, col(Account.id) == col(LeaveRequest.user_id))
    )
    overtime_rows = await session.execute(
        select(OvertimeRequest, col(Account.name)).join(Account, col(Account.id) == col(OvertimeRequest.user_id))
    )

    items = [
        RequestOverviewItem(
            id=leave.id,
            request_type=RequestType.LEAVE,
            user_id=leave.user_id,
            user_name=name,
            status=RequestStatus(leave.status),
            reason=leave.reason,
            created_at=leave.created_at,
            leave_type=LeaveType(leave.leave_type),
            start_date=leave.start_date,
            end_date=leave.end_date,
        )
        for leave, name in leave_rows.all()
    ]
    items.extend(
        RequestOverviewItem(
            id=overtime.id,
            request_type=RequestType.OVERTIME,
            user_id=overtime.user_id,
            user_name=name,
            status=RequestStatus(overtime.status),
            reason=overtime.reason,
            created_at=overtime.created_at,
            date=overtime.date,
            hours=overtime.hours,
        )
        for overtime, name in overtime_rows.all()
    )
    items.sort(key=lambda item: item.created_at, reverse=True)
    return items
