from fastapi import APIRouter

from memberquery.interfaces.api.v1.routes.members import router as members_router
from memberquery.interfaces.api.v1.routes.ping import router as ping_router
from memberquery.interfaces.api.v1.routes.teams import router as teams_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(members_router)
api_router.include_router(ping_router)
api_router.include_router(teams_router)
