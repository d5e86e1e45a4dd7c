# ruff: noqa: TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, status

from leavedesk.api.deps import CallerDep
from leavedesk.db import SessionDep
from leavedesk.schemas.leave import DecisionPayload
from leavedesk.schemas.overtime import CreateOvertimePayload, OvertimeRequestResponse
from leavedesk.services import overtime as overtime_service

overtime_router = APIRouter(prefix="/overtime", tags=["overtime"])


@overtime_router.post("", response_model=OvertimeRequestResponse, status_code=status.HTTP_201_CREATED)
async def create_overtime_request(
    payload: CreateOvertimePayload,
    session: SessionDep,
    caller: CallerDep,
) -> OvertimeRequestResponse:
    return await overtime_service.create_overtime_request(session, caller, payload)


@overtime_router.get("", response_model=list[OvertimeRequestResponse])
async def list_my_overtime_requests(session: SessionDep, caller: CallerDep) -> list[OvertimeRequestResponse]:
    return await overtime_service.list_my_overtime_requests(session, caller)


@overtime_router.patch("/{overtime_id}", response_model=OvertimeRequestResponse)
async def decide_overtime_request(
    overtime_id: uuid.UUID,
    payload: DecisionPayload,
    session: SessionDep,
    caller: CallerDep,
) -> OvertimeRequestResponse:
    """Approve or deny a pending overtime request (admin/HR only)."""
    return await overtime_service.decide_overtime_request(session, caller, overtime_id, payload)
