# ruff: noqa: TC003
from __future__ import annotations

import uuid

import sqlalchemy as sa
from sqlmodel import Field

from leavedesk.models.base import TimestampMixin, UUIDBase, account_fk


class Notification(UUIDBase, TimestampMixin, table=True):
    """In-app message for one recipient. Only the read flag ever changes."""

    __tablename__ = "notification"
    __table_args__ = (sa.Index("ix_notification_user_read", "user_id", "read"),)

    user_id: uuid.UUID = Field(sa_column=account_fk(nullable=False))
    message: str
    link: str | None = Field(default=None, max_length=500)
    read: bool = Field(default=False, sa_column_kwargs={"server_default": sa.false()})
    created_by: uuid.UUID | None = Field(default=None, sa_column=account_fk(nullable=True, index=False))
