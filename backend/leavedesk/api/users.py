# ruff: noqa: TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter

from leavedesk.api.deps import CallerDep
from leavedesk.db import SessionDep
from leavedesk.schemas.account import (
    AccountResponse,
    ProfileResponse,
    UpdateBioPayload,
    UpdateUserPayload,
)
from leavedesk.services import account as account_service

profile_router = APIRouter(prefix="/profile", tags=["profile"])
users_router = APIRouter(prefix="/users", tags=["users"])


@profile_router.get("", response_model=ProfileResponse)
async def get_profile(session: SessionDep, caller: CallerDep) -> ProfileResponse:
    return await account_service.get_profile(session, caller)


@profile_router.patch("", response_model=ProfileResponse)
async def update_bio(payload: UpdateBioPayload, session: SessionDep, caller: CallerDep) -> ProfileResponse:
    return await account_service.update_bio(session, caller, payload)


@users_router.get("", response_model=list[AccountResponse])
async def list_users(session: SessionDep, caller: CallerDep) -> list[AccountResponse]:
    """List all accounts (admin/HR only)."""
    return await account_service.list_users(session, caller)


@users_router.patch("/{user_id}", response_model=AccountResponse)
async def update_user(
    user_id: uuid.UUID,
    payload: UpdateUserPayload,
    session: SessionDep,
    caller: CallerDep,
) -> AccountResponse:
    """Edit name, role or activation of an account (admin/HR only)."""
    return await account_service.update_user(session, caller, user_id, payload)
