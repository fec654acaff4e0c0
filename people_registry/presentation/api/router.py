"""Top-level API router — aggregates all endpoint routers under /api."""

from fastapi import APIRouter

from people_registry.presentation.api.endpoints.health import router as health_router
from people_registry.presentation.api.endpoints.people import router as people_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(people_router)
