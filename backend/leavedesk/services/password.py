"""Password reset by e-mailed token.

Only the sha256 digest of the token is stored; the raw value travels in the
e-mail link. The request step answers identically whether or not the address
belongs to an account.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlmodel import col

from leavedesk.config import get_settings
from leavedesk.exceptions import ValidationError
from leavedesk.models.account import Account
from leavedesk.schemas.auth import MessageResponse
from leavedesk.security import generate_reset_token, hash_password, hash_reset_token
from leavedesk.services.account import get_account_by_email
from leavedesk.services.mailer import get_mailer, password_reset_mail

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leavedesk.schemas.auth import ForgotPasswordPayload, ResetPasswordPayload

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = "If an account with that email exists, a password reset link has been sent."


async def request_password_reset(session: AsyncSession, payload: ForgotPasswordPayload) -> MessageResponse:
    settings = get_settings()
    account = await get_account_by_email(session, payload.email)
    if account is not None:
        token = generate_reset_token()
        account.reset_password_token = hash_reset_token(token)
        account.reset_password_token_expiry = datetime.now(UTC) + timedelta(
            minutes=settings.password_reset_ttl_minutes
        )
        email = account.email
        await session.commit()

        reset_link = f"{settings.app_base_url.rstrip('/')}/reset-password/{token}"
        try:
            await get_mailer().send(password_reset_mail(email, reset_link, settings.password_reset_ttl_minutes))
        except Exception:
            logger.exception("Failed to send password reset email")

    return MessageResponse(message=RESET_REQUESTED_MESSAGE)


async def reset_password(session: AsyncSession, payload: ResetPasswordPayload) -> MessageResponse:
    result = await session.execute(
        select(Account).where(
            col(Account.reset_password_token) == hash_reset_token(payload.token),
            col(Account.reset_password_token_expiry) > datetime.now(UTC),
        )
    )
    account = result.scalar_one_or_none()
    if account is None:
        raise ValidationError("Invalid or expired password reset token.")

    account.hashed_password = hash_password(payload.password)
    account.reset_password_token = None
    account.reset_password_token_expiry = None
    await session.commit()
    logger.info("Password reset for account %s", account.id)
    return MessageResponse(message="Password has been reset successfully.")
