from __future__ import annotations

from fastapi import APIRouter

from leavedesk.db import SessionDep
from leavedesk.schemas.auth import ForgotPasswordPayload, MessageResponse, ResetPasswordPayload
from leavedesk.services import password as password_service

password_router = APIRouter(prefix="/password", tags=["password"])


@password_router.post("/forgot", response_model=MessageResponse)
async def forgot_password(payload: ForgotPasswordPayload, session: SessionDep) -> MessageResponse:
    """Start a reset. Answers the same whether or not the address is known."""
    return await password_service.request_password_reset(session, payload)


@password_router.post("/reset", response_model=MessageResponse)
async def reset_password(payload: ResetPasswordPayload, session: SessionDep) -> MessageResponse:
    return await password_service.reset_password(session, payload)
