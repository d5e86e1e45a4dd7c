"""Initial schema: accounts, leave and overtime requests, notifications.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _request_columns() -> list[sa.Column]:  # type: ignore[type-arg]
    return [
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("account.id"), nullable=False),
        sa.Column("reason", sa.String(), nullable=False),
        sa.Column("status", sa.String(length=20), server_default="PENDING", nullable=False),
        sa.Column("approved_by", sa.Uuid(), sa.ForeignKey("account.id"), nullable=True),
        sa.Column("denied_by", sa.Uuid(), sa.ForeignKey("account.id"), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "account",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), server_default="EMPLOYEE", nullable=False),
        sa.Column("gender", sa.String(length=20), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("bio", sa.String(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("reset_password_token", sa.String(length=64), nullable=True),
        sa.Column("reset_password_token_expiry", sa.DateTime(timezone=True), nullable=True),
        sa.Column("annual_leave_balance", sa.Integer(), server_default="25", nullable=False),
        sa.Column("sick_leave_balance", sa.Integer(), server_default="15", nullable=False),
        sa.Column("maternity_leave_balance", sa.Integer(), server_default="90", nullable=False),
        sa.Column("paternity_leave_balance", sa.Integer(), server_default="14", nullable=False),
        sa.Column("compassionate_leave_balance", sa.Integer(), server_default="5", nullable=False),
        sa.Column("unpaid_leave_balance", sa.Integer(), server_default="0", nullable=False),
    )
    op.create_index("ix_account_email", "account", ["email"], unique=True)
    op.create_index("ix_account_created_at", "account", ["created_at"])
    op.create_index("ix_account_reset_password_token", "account", ["reset_password_token"])
    op.create_index("ix_account_role_active", "account", ["role", "is_active"])

    op.create_table(
        "leave_request",
        *_request_columns(),
        sa.Column("leave_type", sa.String(length=20), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
    )
    op.create_index("ix_leave_request_created_at", "leave_request", ["created_at"])
    op.create_index("ix_leave_request_user_id", "leave_request", ["user_id"])
    op.create_index("ix_leave_request_status", "leave_request", ["status"])
    op.create_index("ix_leave_request_user_status", "leave_request", ["user_id", "status"])

    op.create_table(
        "overtime_request",
        *_request_columns(),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("hours", sa.Float(), nullable=False),
    )
    op.create_index("ix_overtime_request_created_at", "overtime_request", ["created_at"])
    op.create_index("ix_overtime_request_user_id", "overtime_request", ["user_id"])
    op.create_index("ix_overtime_request_status", "overtime_request", ["status"])

    op.create_table(
        "notification",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("account.id"), nullable=False),
        sa.Column("message", sa.String(), nullable=False),
        sa.Column("link", sa.String(length=500), nullable=True),
        sa.Column("read", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("created_by", sa.Uuid(), sa.ForeignKey("account.id"), nullable=True),
    )
    op.create_index("ix_notification_created_at", "notification", ["created_at"])
    op.create_index("ix_notification_user_id", "notification", ["user_id"])
    op.create_index("ix_notification_user_read", "notification", ["user_id", "read"])


def downgrade() -> None:
    op.drop_table("notification")
    op.drop_table("overtime_request")
    op.drop_table("leave_request")
    op.drop_table("account")
