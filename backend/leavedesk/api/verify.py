# ruff: noqa: TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter

from leavedesk.db import SessionDep
from leavedesk.schemas.verification import VerificationResponse
from leavedesk.services import verification as verification_service

verify_router = APIRouter(prefix="/verify", tags=["verify"])


@verify_router.get("/{leave_id}", response_model=VerificationResponse)
async def verify_leave(leave_id: uuid.UUID, session: SessionDep) -> VerificationResponse:
    """Public authenticity check for an approval document. No authentication."""
    return await verification_service.get_approved_request_for_verification(session, leave_id)
