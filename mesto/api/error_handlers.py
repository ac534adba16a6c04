"""Global exception handlers.

Every error response has the shape ``{"message": ...}``. Validation failures
also list the fields that failed. Unknown exceptions are logged and never
leak details to the client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mesto.errors import INTERNAL_ERROR_MESSAGE, MestoError

logger = logging.getLogger(__name__)

PAGE_NOT_FOUND_MESSAGE = "Page not found"
VALIDATION_FAILED_MESSAGE = "Validation failed"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(MestoError, mesto_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)


async def mesto_error_handler(request: Request, exc: MestoError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        return await internal_error_handler(request, exc)

    logger.info(f"{exc.status_code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Validation error on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": VALIDATION_FAILED_MESSAGE,
            "validation": build_validation_details(exc),
        },
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = PAGE_NOT_FOUND_MESSAGE
    else:
        message = exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log the error, answer with a generic message."""
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!r}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


def build_validation_details(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into ``{source, field, message}`` entries."""
    details = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        source = loc[0] if loc else "request"
        field = ".".join(loc[1:]) or source
        details.append({"source": source, "field": field, "message": error.get("msg", "")})
    return details
