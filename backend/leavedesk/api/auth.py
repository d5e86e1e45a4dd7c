from __future__ import annotations

from fastapi import APIRouter, status

from leavedesk.db import SessionDep
from leavedesk.schemas.account import AccountResponse, RegisterPayload
from leavedesk.schemas.auth import LoginPayload, TokenResponse
from leavedesk.services import account as account_service

auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/register", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterPayload, session: SessionDep) -> AccountResponse:
    """Self-register. The account stays inactive until an admin or HR activates it."""
    return await account_service.register(session, payload)


@auth_router.post("/login", response_model=TokenResponse)
async def login(payload: LoginPayload, session: SessionDep) -> TokenResponse:
    return await account_service.login(session, payload)
