"""Exception handlers rendering every error in the ``{success: false, error}`` envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sitecms.application.schemas import ApiResponse
from sitecms.domain.exceptions import (
    DocumentParseError,
    DocumentReadError,
    DocumentWriteError,
    EntityNotFoundError,
    ItemValidationError,
)

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse(success=False, error=message).to_json(),
    )


def _not_found_message(exc: EntityNotFoundError) -> str:
    name = exc.entity_type
    return f"{name[:1].upper()}{name[1:]} not found"


async def _entity_not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    logger.info("%s %s: %s", request.method, request.url.path, exc)
    return error_response(status.HTTP_404_NOT_FOUND, _not_found_message(exc))


async def _item_validation(request: Request, exc: ItemValidationError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def _document_failure(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def _request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        # Drop the "body"/"query" prefix FastAPI puts in front of field paths.
        loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
        message = f"{'.'.join(loc)}: {first.get('msg')}" if loc else str(first.get("msg"))
    else:
        message = "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def _http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s failed unexpectedly", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to process request")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EntityNotFoundError, _entity_not_found)
    app.add_exception_handler(ItemValidationError, _item_validation)
    app.add_exception_handler(DocumentWriteError, _document_failure)
    app.add_exception_handler(DocumentReadError, _document_failure)
    app.add_exception_handler(DocumentParseError, _document_failure)
    app.add_exception_handler(RequestValidationError, _request_validation)
    app.add_exception_handler(StarletteHTTPException, _http_exception)
    app.add_exception_handler(Exception, _unexpected_error)
