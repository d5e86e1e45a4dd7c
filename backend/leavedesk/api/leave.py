# ruff: noqa: TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Response, status

from leavedesk.api.deps import CallerDep
from leavedesk.db import SessionDep
from leavedesk.schemas.leave import (
    CreateLeavePayload,
    DecisionPayload,
    LeaveRequestResponse,
    RequestOverviewItem,
)
from leavedesk.services import leave as leave_service

leave_router = APIRouter(prefix="/leave", tags=["leave"])
requests_router = APIRouter(prefix="/requests", tags=["requests"])


@leave_router.post("", response_model=LeaveRequestResponse, status_code=status.HTTP_201_CREATED)
async def create_leave_request(
    payload: CreateLeavePayload,
    session: SessionDep,
    caller: CallerDep,
) -> LeaveRequestResponse:
    """Submit a new leave request."""
    return await leave_service.create_leave_request(session, caller, payload)


@leave_router.get("", response_model=list[LeaveRequestResponse])
async def list_my_leave_requests(session: SessionDep, caller: CallerDep) -> list[LeaveRequestResponse]:
    return await leave_service.list_my_leave_requests(session, caller)


@leave_router.get("/{leave_id}", response_model=LeaveRequestResponse)
async def get_leave_request(leave_id: uuid.UUID, session: SessionDep, caller: CallerDep) -> LeaveRequestResponse:
    return await leave_service.get_leave_request(session, caller, leave_id)


@leave_router.patch("/{leave_id}", response_model=LeaveRequestResponse)
async def decide_leave_request(
    leave_id: uuid.UUID,
    payload: DecisionPayload,
    session: SessionDep,
    caller: CallerDep,
) -> LeaveRequestResponse:
    """Approve or deny a pending leave request (admin/HR only)."""
    return await leave_service.decide_leave_request(session, caller, leave_id, payload)


@leave_router.get("/{leave_id}/document", response_class=Response)
async def get_leave_document(leave_id: uuid.UUID, session: SessionDep, caller: CallerDep) -> Response:
    """Download the approval PDF of an approved request."""
    filename, content = await leave_service.get_leave_document(session, caller, leave_id)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@requests_router.get("/all", response_model=list[RequestOverviewItem])
async def list_all_requests(session: SessionDep, caller: CallerDep) -> list[RequestOverviewItem]:
    """All leave and overtime requests, newest first (admin/HR only)."""
    return await leave_service.list_all_requests(session, caller)
