# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlmodel import col

from leavedesk.exceptions import AuthenticationError, AuthorizationError, ConflictError, NotFoundError
from leavedesk.models.account import Account
from leavedesk.policy import can_manage_users
from leavedesk.schemas.account import AccountResponse, ProfileResponse
from leavedesk.schemas.auth import TokenResponse
from leavedesk.security import create_access_token, hash_password, verify_password
from leavedesk.services.notification import MANAGE_USERS_LINK, notify_managers

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leavedesk.schemas.account import RegisterPayload, UpdateBioPayload, UpdateUserPayload
    from leavedesk.schemas.auth import AuthenticatedCaller, LoginPayload

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lookups shared with the workflow services
# ---------------------------------------------------------------------------


async def get_account(
    session: AsyncSession,
    account_id: uuid.UUID,
    *,
    for_update: bool = False,
) -> Account | None:
    query = select(Account).where(col(Account.id) == account_id)
    if for_update:
        # The caller's row may already sit in the identity map; reload it under the lock.
        query = query.with_for_update().execution_options(populate_existing=True)
    result = await session.execute(query)
    return result.scalar_one_or_none()


async def get_active_account(
    session: AsyncSession,
    account_id: uuid.UUID,
    *,
    for_update: bool = False,
) -> Account:
    """Fetch the caller's account. Raises 404 if missing or not yet activated."""
    account = await get_account(session, account_id, for_update=for_update)
    if account is None or not account.is_active:
        raise NotFoundError("User not found or account inactive")
    return account


async def get_account_by_email(session: AsyncSession, email: str) -> Account | None:
    result = await session.execute(select(Account).where(col(Account.email) == email.lower()))
    return result.scalar_one_or_none()


def _require_user_manager(caller: AuthenticatedCaller) -> None:
    if not can_manage_users(caller.role):
        raise AuthorizationError("Forbidden")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


async def register(session: AsyncSession, payload: RegisterPayload) -> AccountResponse:
    """Create an inactive account and ask managers to review it."""
    email = payload.email.lower()
    if await get_account_by_email(session, email) is not None:
        raise ConflictError("Email already in use")

    account = Account(
        email=email,
        name=payload.name,
        hashed_password=hash_password(payload.password),
        date_of_birth=payload.date_of_birth,
        gender=payload.gender.value,
        is_active=False,
    )
    session.add(account)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise ConflictError("Email already in use") from None

    response = AccountResponse.model_validate(account)
    logger.info("Registered account %s", account.id)

    await notify_managers(
        session,
        message=f"New user registered: {payload.name}. Please review and activate their account.",
        link=MANAGE_USERS_LINK,
        created_by=response.id,
    )
    return response


async def login(session: AsyncSession, payload: LoginPayload) -> TokenResponse:
    """Exchange credentials for a bearer token. Inactive accounts cannot log in."""
    account = await get_account_by_email(session, payload.email)
    if account is None or not account.is_active:
        raise AuthenticationError("Invalid credentials or account not activated.")
    if not verify_password(payload.password, account.hashed_password):
        raise AuthenticationError("Invalid credentials")
    return TokenResponse(access_token=create_access_token(account.id, account.role))


async def get_profile(session: AsyncSession, caller: AuthenticatedCaller) -> ProfileResponse:
    account = await get_account(session, caller.account_id)
    if account is None:
        raise NotFoundError("User not found")
    return ProfileResponse.model_validate(account)


async def update_bio(session: AsyncSession, caller: AuthenticatedCaller, payload: UpdateBioPayload) -> ProfileResponse:
    account = await get_account(session, caller.account_id)
    if account is None:
        raise NotFoundError("User not found")
    account.bio = payload.bio
    await session.commit()
    return ProfileResponse.model_validate(account)


async def list_users(session: AsyncSession, caller: AuthenticatedCaller) -> list[AccountResponse]:
    """List every account, newest first (admin/HR only)."""
    _require_user_manager(caller)
    result = await session.execute(select(Account).order_by(col(Account.created_at).desc()))
    return [AccountResponse.model_validate(a) for a in result.scalars().all()]


async def update_user(
    session: AsyncSession,
    caller: AuthenticatedCaller,
    user_id: uuid.UUID,
    payload: UpdateUserPayload,
) -> AccountResponse:
    """Rename, change the role of, or (de)activate an account (admin/HR only)."""
    _require_user_manager(caller)
    account = await get_account(session, user_id)
    if account is None:
        raise NotFoundError("User not found")

    changes = payload.model_dump(exclude_none=True)
    for field, value in changes.items():
        setattr(account, field, value)
    await session.commit()
    logger.info("Account %s updated by %s: %s", user_id, caller.account_id, sorted(changes))
    return AccountResponse.model_validate(account)
