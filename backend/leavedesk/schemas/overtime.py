# ruff: noqa: TC003
from __future__ import annotations

import datetime as dt
import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from leavedesk.models.enums import RequestStatus

MIN_OVERTIME_HOURS = 0.5


class CreateOvertimePayload(BaseModel):
    date: dt.date
    hours: float = Field(ge=MIN_OVERTIME_HOURS, le=24)
    reason: str = Field(min_length=1, max_length=2000)


class OvertimeRequestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    date: dt.date
    hours: float
    reason: str
    status: RequestStatus
    approved_by: uuid.UUID | None
    denied_by: uuid.UUID | None
    created_at: datetime
