from __future__ import annotations

from fastapi import APIRouter

from leavedesk.api.deps import CallerDep
from leavedesk.db import SessionDep
from leavedesk.schemas.dashboard import EmployeeSummary, ManagerSummary
from leavedesk.services import dashboard as dashboard_service

dashboard_router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@dashboard_router.get("/summary", response_model=ManagerSummary | EmployeeSummary)
async def dashboard_summary(session: SessionDep, caller: CallerDep) -> ManagerSummary | EmployeeSummary:
    return await dashboard_service.dashboard_summary(session, caller)
