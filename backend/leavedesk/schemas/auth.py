# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, EmailStr, Field

from leavedesk.models.enums import Role

# bcrypt only looks at the first 72 bytes of a password and refuses longer input.
MAX_PASSWORD_BYTES = 72


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        msg = f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
        raise ValueError(msg)
    return value


NewPassword = Annotated[str, Field(min_length=8), AfterValidator(_check_password_bytes)]


class AuthenticatedCaller(BaseModel):
    """Identity of the caller, resolved once per request from the bearer token."""

    account_id: uuid.UUID
    role: Role = Role.EMPLOYEE


class LoginPayload(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: Literal["bearer"] = "bearer"


class ForgotPasswordPayload(BaseModel):
    email: EmailStr


class ResetPasswordPayload(BaseModel):
    token: str = Field(min_length=1)
    password: NewPassword


class MessageResponse(BaseModel):
    message: str
