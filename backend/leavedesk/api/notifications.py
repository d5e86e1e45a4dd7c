from __future__ import annotations

from fastapi import APIRouter

from leavedesk.api.deps import CallerDep
from leavedesk.db import SessionDep
from leavedesk.schemas.notification import MarkReadResponse, NotificationResponse
from leavedesk.services import notification as notification_service

notifications_router = APIRouter(prefix="/notifications", tags=["notifications"])


@notifications_router.get("", response_model=list[NotificationResponse])
async def list_notifications(session: SessionDep, caller: CallerDep) -> list[NotificationResponse]:
    """The caller's notifications, newest first."""
    return await notification_service.list_notifications(session, caller)


@notifications_router.patch("/mark-read", response_model=MarkReadResponse)
async def mark_all_read(session: SessionDep, caller: CallerDep) -> MarkReadResponse:
    return await notification_service.mark_all_read(session, caller)
