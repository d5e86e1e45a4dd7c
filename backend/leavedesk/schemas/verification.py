# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date

from pydantic import BaseModel

from leavedesk.models.enums import LeaveType, RequestStatus


class VerificationResponse(BaseModel):
    """Public projection of an approved leave request. Carries nothing else."""

    id: uuid.UUID
    leave_type: LeaveType
    start_date: date
    end_date: date
    status: RequestStatus
    owner_name: str
