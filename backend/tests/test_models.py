from __future__ import annotations

import uuid
from datetime import date

from leavedesk.models import (
    BALANCE_FIELDS,
    Account,
    LeaveRequest,
    LeaveType,
    Notification,
    OvertimeRequest,
    RequestStatus,
    Role,
    SQLModel,
)

EXPECTED_TABLES = {"account", "leave_request", "overtime_request", "notification"}


def test_all_tables_registered() -> None:
    assert EXPECTED_TABLES.issubset(set(SQLModel.metadata.tables.keys()))


def test_account_defaults() -> None:
    account = Account(email="a@example.com", name="A", gender="FEMALE", hashed_password="x")
    assert account.role == Role.EMPLOYEE
    assert account.is_active is False
    assert account.annual_leave_balance == 25
    assert account.sick_leave_balance == 15
    assert account.maternity_leave_balance == 90
    assert account.paternity_leave_balance == 14
    assert account.compassionate_leave_balance == 5
    assert account.unpaid_leave_balance == 0
    assert account.reset_password_token is None
    assert account.id is not None


def test_leave_request_defaults_and_inclusive_days() -> None:
    leave = LeaveRequest(
        user_id=uuid.uuid4(),
        leave_type=LeaveType.ANNUAL,
        start_date=date(2024, 6, 1),
        end_date=date(2024, 6, 5),
        reason="Trip",
    )
    assert leave.status == RequestStatus.PENDING
    assert leave.approved_by is None
    assert leave.denied_by is None
    assert leave.days == 5


def test_single_day_leave_counts_one_day() -> None:
    leave = LeaveRequest(
        user_id=uuid.uuid4(),
        leave_type=LeaveType.SICK,
        start_date=date(2024, 2, 29),
        end_date=date(2024, 2, 29),
        reason="Flu",
    )
    assert leave.days == 1


def test_overtime_and_notification_defaults() -> None:
    overtime = OvertimeRequest(user_id=uuid.uuid4(), date=date(2024, 6, 1), hours=2.5, reason="Release")
    assert overtime.status == RequestStatus.PENDING
    notification = Notification(user_id=uuid.uuid4(), message="hello")
    assert notification.read is False
    assert notification.link is None


def test_every_leave_type_has_a_balance_field() -> None:
    assert set(BALANCE_FIELDS) == set(LeaveType)
    for field in BALANCE_FIELDS.values():
        assert field in Account.model_fields
