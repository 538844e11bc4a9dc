"""Contact form endpoints: public submission, admin listing."""

from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from sitecms.application.schemas import FormResponseCreate
from sitecms.application.services import FormResponseService
from sitecms.infrastructure.dependencies import get_form_response_service, require_admin

router = APIRouter(prefix="/form-responses", tags=["Form Responses"])


def _client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


@router.post("")
async def submit_form_response(
    data: FormResponseCreate,
    request: Request,
    service: FormResponseService = Depends(get_form_response_service),
) -> dict[str, Any]:
    """Store a contact form submission."""
    response = await service.submit(
        data,
        ip=_client_ip(request),
        user_agent=request.headers.get("user-agent"),
    )
    return {"success": True, "id": response.id}


@router.get("", dependencies=[Depends(require_admin)])
async def list_form_responses(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    service: FormResponseService = Depends(get_form_response_service),
) -> dict[str, Any]:
    """List submissions, newest first."""
    responses, pagination = await service.list_responses(page=page, limit=limit)
    return {
        "success": True,
        "data": [response.to_dict() for response in responses],
        "pagination": pagination.model_dump(),
    }
