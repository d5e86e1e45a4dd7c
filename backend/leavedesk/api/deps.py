# ruff: noqa: B008
from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from leavedesk.db import SessionDep
from leavedesk.exceptions import AuthenticationError
from leavedesk.models.enums import Role
from leavedesk.schemas.auth import AuthenticatedCaller
from leavedesk.security import decode_access_token
from leavedesk.services.account import get_account

_bearer = HTTPBearer(auto_error=False)


async def get_current_caller(
    session: SessionDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> AuthenticatedCaller:
    """Resolve the caller from the bearer token and the stored account.

    The token only names the account. Role and activation are read from the
    database on every request, so a demotion or deactivation applies to
    tokens that were already issued.
    """
    if credentials is None:
        raise AuthenticationError("Unauthenticated")
    claims = decode_access_token(credentials.credentials)
    try:
        account_id = uuid.UUID(claims["sub"])
    except (KeyError, TypeError, ValueError):
        raise AuthenticationError("Invalid token") from None

    account = await get_account(session, account_id)
    if account is None or not account.is_active:
        raise AuthenticationError("Account not found or inactive")
    return AuthenticatedCaller(account_id=account.id, role=Role(account.role))


CallerDep = Annotated[AuthenticatedCaller, Depends(get_current_caller)]
