from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from leavedesk.models.enums import Role
from leavedesk.schemas.leave import LeaveRequestResponse


class ManagerSummary(BaseModel):
    kind: Literal["manager"] = "manager"
    role: Role
    pending_leave_requests: int
    inactive_users: int
    users_on_leave_today: int


class EmployeeSummary(BaseModel):
    kind: Literal["employee"] = "employee"
    role: Role
    upcoming_leave: LeaveRequestResponse | None
    pending_requests_count: int
    annual_leave_balance: int
    sick_leave_balance: int
