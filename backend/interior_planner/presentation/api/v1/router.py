"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from interior_planner.presentation.api.v1.endpoints.health import router as health_router
from interior_planner.presentation.api.v1.endpoints.clients import router as clients_router
from interior_planner.presentation.api.v1.endpoints.projects import router as projects_router
from interior_planner.presentation.api.v1.endpoints.rooms import router as rooms_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(clients_router)
router.include_router(projects_router)
router.include_router(rooms_router)
