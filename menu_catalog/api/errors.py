from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from menu_catalog.core.errors import CatalogError, UnexpectedError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    extra = {"error_code": exc.code, "path": request.url.path}
    if isinstance(exc, UnexpectedError):
        logger.error("%s: %s", exc.message, exc.error, extra=extra)
    else:
        logger.info("%s: %s", exc.code, exc.message, extra=extra)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _describe(error: dict) -> str:
    location = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = ".".join(location)
    return f"{field}: {error.get('msg')}" if field else str(error.get("msg"))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [_describe(error) for error in exc.errors()]
    logger.info("Validation failed on %s: %s", request.url.path, details, extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Validation failed",
            "error": "; ".join(details),
        },
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = "Route not found" if exc.status_code == status.HTTP_404_NOT_FOUND else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": message},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s", request.url.path, exc_info=exc, extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Something went wrong!", "error": str(exc)},
    )
