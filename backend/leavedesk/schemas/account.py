# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from leavedesk.models.enums import Gender, Role
from leavedesk.schemas.auth import NewPassword

# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


class RegisterPayload(BaseModel):
    """Request body for self-registration. The new account starts inactive."""

    email: EmailStr
    name: str = Field(min_length=1, max_length=255)
    password: NewPassword
    date_of_birth: date
    gender: Gender


class UpdateBioPayload(BaseModel):
    bio: str = Field(max_length=2000)


class UpdateUserPayload(BaseModel):
    """Admin/HR edit of another account. Omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    role: Role | None = None
    is_active: bool | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class AccountResponse(BaseModel):
    """Public view of an account, without credentials."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    role: Role
    gender: Gender
    is_active: bool
    created_at: datetime


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    role: Role
    gender: Gender
    date_of_birth: date | None
    bio: str | None
    annual_leave_balance: int
    sick_leave_balance: int
    maternity_leave_balance: int
    paternity_leave_balance: int
    compassionate_leave_balance: int
    unpaid_leave_balance: int
