from sqlmodel import SQLModel

from leavedesk.models.account import Account
from leavedesk.models.base import TimestampMixin, UUIDBase
from leavedesk.models.enums import BALANCE_FIELDS, Gender, LeaveType, RequestStatus, RequestType, Role
from leavedesk.models.notification import Notification
from leavedesk.models.request import LeaveRequest, OvertimeRequest

__all__ = [
    "BALANCE_FIELDS",
    "Account",
    "Gender",
    "LeaveRequest",
    "LeaveType",
    "Notification",
    "OvertimeRequest",
    "RequestStatus",
    "RequestType",
    "Role",
    "SQLModel",
    "TimestampMixin",
    "UUIDBase",
]
