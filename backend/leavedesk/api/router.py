from fastapi import APIRouter

from leavedesk.api.auth import auth_router
from leavedesk.api.dashboard import dashboard_router
from leavedesk.api.leave import leave_router, requests_router
from leavedesk.api.notifications import notifications_router
from leavedesk.api.overtime import overtime_router
from leavedesk.api.password import password_router
from leavedesk.api.users import profile_router, users_router
from leavedesk.api.verify import verify_router

api_router = APIRouter()
api_router.include_router(auth_router)
api_router.include_router(password_router)
api_router.include_router(profile_router)
api_router.include_router(users_router)
api_router.include_router(leave_router)
api_router.include_router(overtime_router)
api_router.include_router(requests_router)
api_router.include_router(notifications_router)
api_router.include_router(verify_router)
api_router.include_router(dashboard_router)
