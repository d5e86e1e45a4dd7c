# ruff: noqa: TC003
from __future__ import annotations

from datetime import date, datetime

import sqlalchemy as sa
from sqlmodel import Field

from leavedesk.models.base import TimestampMixin, UUIDBase
from leavedesk.models.enums import Role


class Account(UUIDBase, TimestampMixin, table=True):
    """A user of the system: credentials, role, activation state and leave balances."""

    __tablename__ = "account"
    __table_args__ = (sa.Index("ix_account_role_active", "role", "is_active"),)

    email: str = Field(max_length=255, unique=True, index=True)
    name: str = Field(max_length=255)
    role: str = Field(default=Role.EMPLOYEE, max_length=20, sa_column_kwargs={"server_default": "EMPLOYEE"})
    gender: str = Field(max_length=20)
    date_of_birth: date | None = None
    bio: str | None = None
    is_active: bool = Field(default=False, sa_column_kwargs={"server_default": sa.false()})
    hashed_password: str = Field(max_length=255)
    reset_password_token: str | None = Field(default=None, max_length=64, index=True)
    reset_password_token_expiry: datetime | None = Field(
        default=None,
        sa_type=sa.DateTime(timezone=True),  # ty: ignore[invalid-argument-type]
    )

    # Balances are day counters and may go negative.
    annual_leave_balance: int = Field(default=25, sa_column_kwargs={"server_default": "25"})
    sick_leave_balance: int = Field(default=15, sa_column_kwargs={"server_default": "15"})
    maternity_leave_balance: int = Field(default=90, sa_column_kwargs={"server_default": "90"})
    paternity_leave_balance: int = Field(default=14, sa_column_kwargs={"server_default": "14"})
    compassionate_leave_balance: int = Field(default=5, sa_column_kwargs={"server_default": "5"})
    unpaid_leave_balance: int = Field(default=0, sa_column_kwargs={"server_default": "0"})
