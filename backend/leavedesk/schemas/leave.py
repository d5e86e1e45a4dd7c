# ruff: noqa: TC003
from __future__ import annotations

import datetime as dt
import uuid
from datetime import datetime
from typing import Literal, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from leavedesk.models.enums import LeaveType, RequestStatus, RequestType

Decision = Literal["APPROVED", "DENIED"]

# ---------------------------------------------------------------------------
# Request payloads
# ---------------------------------------------------------------------------


class CreateLeavePayload(BaseModel):
    """Request body for a new leave request."""

    leave_type: LeaveType
    start_date: dt.date
    end_date: dt.date
    reason: str = Field(min_length=1, max_length=2000)

    @model_validator(mode="after")
    def _validate_dates(self) -> Self:
        if self.end_date < self.start_date:
            msg = "end_date must not be before start_date"
            raise ValueError(msg)
        return self


class DecisionPayload(BaseModel):
    """Request body for approve/deny actions."""

    status: Decision


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class LeaveRequestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    leave_type: LeaveType
    start_date: dt.date
    end_date: dt.date
    reason: str
    status: RequestStatus
    approved_by: uuid.UUID | None
    denied_by: uuid.UUID | None
    created_at: datetime


class RequestOverviewItem(BaseModel):
    """One row of the combined leave + overtime list shown to managers."""

    id: uuid.UUID
    request_type: RequestType
    user_id: uuid.UUID
    user_name: str
    status: RequestStatus
    reason: str
    created_at: datetime
    leave_type: LeaveType | None = None
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    date: dt.date | None = None
    hours: float | None = None
