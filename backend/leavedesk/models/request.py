# ruff: noqa: TC003
from __future__ import annotations

import datetime as dt
import uuid

import sqlalchemy as sa
from sqlmodel import Field

from leavedesk.models.base import TimestampMixin, UUIDBase, account_fk
from leavedesk.models.enums import RequestStatus


class LeaveRequest(UUIDBase, TimestampMixin, table=True):
    """An employee's leave request over an inclusive date range."""

    __tablename__ = "leave_request"
    __table_args__ = (sa.Index("ix_leave_request_user_status", "user_id", "status"),)

    user_id: uuid.UUID = Field(sa_column=account_fk(nullable=False))
    leave_type: str = Field(max_length=20)
    start_date: dt.date
    end_date: dt.date
    reason: str
    status: str = Field(
        default=RequestStatus.PENDING, max_length=20, index=True, sa_column_kwargs={"server_default": "PENDING"}
    )
    approved_by: uuid.UUID | None = Field(default=None, sa_column=account_fk(nullable=True, index=False))
    denied_by: uuid.UUID | None = Field(default=None, sa_column=account_fk(nullable=True, index=False))

    @property
    def days(self) -> int:
        """Inclusive day count."""
        return (self.end_date - self.start_date).days + 1


class OvertimeRequest(UUIDBase, TimestampMixin, table=True):
    """Hours worked beyond schedule on a single day, pending approval."""

    __tablename__ = "overtime_request"

    user_id: uuid.UUID = Field(sa_column=account_fk(nullable=False))
    date: dt.date
    hours: float
    reason: str
    status: str = Field(
        default=RequestStatus.PENDING, max_length=20, index=True, sa_column_kwargs={"server_default": "PENDING"}
    )
    approved_by: uuid.UUID | None = Field(default=None, sa_column=account_fk(nullable=True, index=False))
    denied_by: uuid.UUID | None = Field(default=None, sa_column=account_fk(nullable=True, index=False))
