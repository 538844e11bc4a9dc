"""Admin session endpoints (cookie based)."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response, status

from sitecms.application.schemas import AdminLogin
from sitecms.application.services import SESSION_COOKIE_NAME, AdminAuthService
from sitecms.infrastructure.container import Container
from sitecms.infrastructure.dependencies import get_auth_service, get_container, is_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post("/login")
async def login(
    data: AdminLogin,
    response: Response,
    auth: AdminAuthService = Depends(get_auth_service),
    container: Container = Depends(get_container),
) -> dict[str, Any]:
    """Check credentials and set the ``admin_session`` cookie."""
    if not auth.check_credentials(data.email, data.password):
        logger.warning("Failed admin login for %s", data.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    response.set_cookie(
        SESSION_COOKIE_NAME,
        auth.issue_session(),
        httponly=True,
        secure=container.settings.app_env == "production",
        samesite="lax",
        max_age=auth.session_ttl_seconds,
        path="/",
    )
    logger.info("Admin %s logged in", data.email)
    return {"success": True}


@router.post("/logout")
async def logout(response: Response) -> dict[str, Any]:
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")
    return {"success": True}


@router.get("/session")
async def session(admin: bool = Depends(is_admin)) -> dict[str, Any]:
    return {"success": True, "data": {"authenticated": admin}}
