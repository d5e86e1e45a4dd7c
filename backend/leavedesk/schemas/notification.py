# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel


class NotificationResponse(BaseModel):
    id: uuid.UUID
    message: str
    link: str | None
    read: bool
    created_at: datetime
    created_by: uuid.UUID | None
    creator_name: str | None = None


class MarkReadResponse(BaseModel):
    count: int
    message: str
