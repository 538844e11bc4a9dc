"""Top-level API router: aggregates all endpoint routers under ``/api``."""

from fastapi import APIRouter

from sitecms.presentation.api.endpoints.auth import router as auth_router
from sitecms.presentation.api.endpoints.form_responses import router as form_responses_router
from sitecms.presentation.api.endpoints.health import router as health_router
from sitecms.presentation.api.endpoints.sections import routers as section_routers
from sitecms.presentation.api.endpoints.site_content import router as site_content_router
from sitecms.presentation.api.endpoints.uploads import router as uploads_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
for section_router in section_routers:
    router.include_router(section_router)
router.include_router(site_content_router)
router.include_router(auth_router)
router.include_router(uploads_router)
router.include_router(form_responses_router)
