"""FastAPI dependency injection: hands the app's container pieces to endpoints."""

from collections.abc import Callable

from fastapi import Depends, HTTPException, Request, status

from sitecms.application.services import (
    SESSION_COOKIE_NAME,
    AdminAuthService,
    FormResponseService,
    SectionService,
    SiteContentService,
    UploadService,
)
from sitecms.infrastructure.container import Container


def get_container(request: Request) -> Container:
    """The container built by ``create_app`` for this application instance."""
    return request.app.state.container


def get_auth_service(container: Container = Depends(get_container)) -> AdminAuthService:
    return container.auth


def get_site_content_service(container: Container = Depends(get_container)) -> SiteContentService:
    return container.site_content


def get_upload_service(container: Container = Depends(get_container)) -> UploadService:
    return container.uploads


def get_form_response_service(
    container: Container = Depends(get_container),
) -> FormResponseService:
    return container.form_responses


def section_service_provider(path: str) -> Callable[..., SectionService]:
    """Build a dependency that yields the SectionService registered for ``path``."""

    def get_section_service(container: Container = Depends(get_container)) -> SectionService:
        return container.section_service(path)

    get_section_service.__name__ = f"get_{path}_service"
    return get_section_service


def is_admin(
    request: Request,
    auth: AdminAuthService = Depends(get_auth_service),
) -> bool:
    return auth.is_admin(
        request.headers.get("Authorization"),
        request.cookies.get(SESSION_COOKIE_NAME),
    )


def require_admin(
    admin: bool = Depends(is_admin),
    auth: AdminAuthService = Depends(get_auth_service),
) -> None:
    """Reject the request with 401 unless it carries the admin capability."""
    if admin:
        return
    if not auth.configured:
        detail = "Unauthorized: Admin credentials not configured"
    else:
        detail = "Unauthorized: Invalid credentials"
    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
