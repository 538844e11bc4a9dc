"""Whole-document endpoints: public read and the admin dashboard save."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from sitecms.application.schemas import ApiResponse
from sitecms.application.services import SiteContentService
from sitecms.infrastructure.dependencies import get_site_content_service, require_admin
from sitecms.presentation.api.endpoints.sections import PUBLIC_CACHE_CONTROL

router = APIRouter(prefix="/site-content", tags=["Site Content"])


@router.get("")
async def get_site_content(
    response: Response,
    service: SiteContentService = Depends(get_site_content_service),
) -> dict[str, Any]:
    """Return the full site document (bundled default when nothing is stored)."""
    document = await service.get_content()
    response.headers["Cache-Control"] = PUBLIC_CACHE_CONTROL
    return ApiResponse(success=True, data=document).to_json()


@router.put("", dependencies=[Depends(require_admin)])
async def replace_site_content(
    document: Any = Body(...),
    service: SiteContentService = Depends(get_site_content_service),
) -> dict[str, Any]:
    """Overwrite the full site document."""
    warning = await service.replace_content(document)
    return ApiResponse(success=True, warning=warning).to_json()
