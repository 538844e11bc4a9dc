"""CRUD endpoints shared by every document section (products, brands, clients, team)."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from sitecms.application.schemas import ApiResponse
from sitecms.application.sections import SECTIONS, SectionDefinition
from sitecms.application.services import SectionService
from sitecms.infrastructure.dependencies import require_admin, section_service_provider

PUBLIC_CACHE_CONTROL = "public, s-maxage=60, stale-while-revalidate=300"


def build_section_router(definition: SectionDefinition) -> APIRouter:
    """Five CRUD routes under ``/<definition.path>``; writes need the admin capability."""
    router = APIRouter(prefix=f"/{definition.path}", tags=[definition.path.capitalize()])
    get_service = section_service_provider(definition.path)

    @router.get("")
    async def list_items(
        response: Response,
        service: SectionService = Depends(get_service),
    ) -> dict[str, Any]:
        items = await service.list_items()
        response.headers["Cache-Control"] = PUBLIC_CACHE_CONTROL
        return ApiResponse(success=True, data=items).to_json()

    @router.get("/{item_id}")
    async def get_item(
        item_id: str,
        response: Response,
        service: SectionService = Depends(get_service),
    ) -> dict[str, Any]:
        item = await service.get_item(item_id)
        response.headers["Cache-Control"] = PUBLIC_CACHE_CONTROL
        return ApiResponse(success=True, data=item).to_json()

    @router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_admin)])
    async def create_item(
        data: dict[str, Any] = Body(...),
        service: SectionService = Depends(get_service),
    ) -> dict[str, Any]:
        result = await service.create_item(data)
        return ApiResponse(success=True, data=result.item, warning=result.warning).to_json()

    @router.put("/{item_id}", dependencies=[Depends(require_admin)])
    async def update_item(
        item_id: str,
        data: dict[str, Any] = Body(...),
        service: SectionService = Depends(get_service),
    ) -> dict[str, Any]:
        result = await service.update_item(item_id, data)
        return ApiResponse(success=True, data=result.item, warning=result.warning).to_json()

    @router.delete("/{item_id}", dependencies=[Depends(require_admin)])
    async def delete_item(
        item_id: str,
        service: SectionService = Depends(get_service),
    ) -> dict[str, Any]:
        result = await service.delete_item(item_id)
        return ApiResponse(success=True, warning=result.warning).to_json()

    return router


routers: list[APIRouter] = [build_section_router(definition) for definition in SECTIONS]
