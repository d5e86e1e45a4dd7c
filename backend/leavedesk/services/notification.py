# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col

from leavedesk.models.account import Account
from leavedesk.models.enums import Role
from leavedesk.models.notification import Notification
from leavedesk.policy import can_decide
from leavedesk.schemas.notification import MarkReadResponse, NotificationResponse

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leavedesk.schemas.auth import AuthenticatedCaller

logger = logging.getLogger(__name__)

MANAGE_REQUESTS_LINK = "/admin/hr/manage-requests"
MANAGE_USERS_LINK = "/admin/hr/manage-users"


async def notify(
    session: AsyncSession,
    *,
    user_id: uuid.UUID,
    message: str,
    link: str | None = None,
    created_by: uuid.UUID | None = None,
) -> Notification:
    """Append a notification for one recipient and commit it."""
    notification = Notification(user_id=user_id, message=message, link=link, created_by=created_by)
    session.add(notification)
    await session.commit()
    return notification


async def try_notify(
    session: AsyncSession,
    *,
    user_id: uuid.UUID,
    message: str,
    link: str | None = None,
    created_by: uuid.UUID | None = None,
) -> bool:
    """Like ``notify`` but logs and swallows datastore failures.

    Used for notifications emitted after the triggering change has already
    committed, where a failure must not surface as an error for that change.
    """
    try:
        await notify(session, user_id=user_id, message=message, link=link, created_by=created_by)
    except SQLAlchemyError:
        await session.rollback()
        logger.exception("Failed to write notification for %s", user_id)
        return False
    return True


async def notify_managers(
    session: AsyncSession,
    *,
    message: str,
    link: str,
    created_by: uuid.UUID,
) -> int:
    """Notify every active account allowed to decide requests (ADMIN and HR).

    Each insert commits on its own; a failed insert is logged and skipped.
    Returns the number of notifications written.
    """
    result = await session.execute(
        select(col(Account.id)).where(
            col(Account.is_active).is_(True),
            col(Account.role).in_([role.value for role in Role if can_decide(role)]),
        )
    )
    manager_ids = list(result.scalars().all())

    written = 0
    for manager_id in manager_ids:
        if await try_notify(session, user_id=manager_id, message=message, link=link, created_by=created_by):
            written += 1
    return written


async def list_notifications(session: AsyncSession, caller: AuthenticatedCaller) -> list[NotificationResponse]:
    """Return the caller's notifications, newest first."""
    result = await session.execute(
        select(Notification, col(Account.name))
        .outerjoin(Account, col(Account.id) == col(Notification.created_by))
        .where(col(Notification.user_id) == caller.account_id)
        .order_by(col(Notification.created_at).desc())
    )
    return [
        NotificationResponse(
            id=n.id,
            message=n.message,
            link=n.link,
            read=n.read,
            created_at=n.created_at,
            created_by=n.created_by,
            creator_name=creator_name,
        )
        for n, creator_name in result.all()
    ]


async def mark_all_read(session: AsyncSession, caller: AuthenticatedCaller) -> MarkReadResponse:
    """Flip the caller's unread notifications to read and return how many changed."""
    result = await session.execute(
        update(Notification)
        .where(
            col(Notification.user_id) == caller.account_id,
            col(Notification.read).is_(False),
        )
        .values(read=True)
    )
    await session.commit()
    count = result.rowcount  # type: ignore[attr-defined]
    return MarkReadResponse(count=count, message=f"{count} notifications marked as read.")
