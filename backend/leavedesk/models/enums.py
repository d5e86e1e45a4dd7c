from __future__ import annotations

import enum


class Role(enum.StrEnum):
    """Account role."""

    EMPLOYEE = "EMPLOYEE"
    HR = "HR"
    ADMIN = "ADMIN"


class Gender(enum.StrEnum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class LeaveType(enum.StrEnum):
    """Leave category. Each one has a balance counter on the account."""

    ANNUAL = "ANNUAL"
    SICK = "SICK"
    MATERNITY = "MATERNITY"
    PATERNITY = "PATERNITY"
    COMPASSIONATE = "COMPASSIONATE"
    UNPAID = "UNPAID"


class RequestStatus(enum.StrEnum):
    """State machine for leave and overtime requests.

    PENDING is the only state that accepts a decision.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    DENIED = "DENIED"


class RequestType(enum.StrEnum):
    """Tag used by the combined request overview."""

    LEAVE = "Leave"
    OVERTIME = "Overtime"


# Account attribute holding the balance for each leave category.
BALANCE_FIELDS: dict[LeaveType, str] = {
    LeaveType.ANNUAL: "annual_leave_balance",
    LeaveType.SICK: "sick_leave_balance",
    LeaveType.MATERNITY: "maternity_leave_balance",
    LeaveType.PATERNITY: "paternity_leave_balance",
    LeaveType.COMPASSIONATE: "compassionate_leave_balance",
    LeaveType.UNPAID: "unpaid_leave_balance",
}
